"""
承诺状态机
Commitment State Machine
"""
from typing import Dict, List, Optional
from .commitment_state import CommitmentState
from ...utils.exceptions import CommitmentStateError


class CommitmentStateMachine:
    """承诺状态机类，只允许 UNCOMMITTED -> COMMITTED -> REVEALED"""

    # 状态转换规则
    VALID_TRANSITIONS: Dict[CommitmentState, List[CommitmentState]] = {
        CommitmentState.UNCOMMITTED: [CommitmentState.COMMITTED],
        CommitmentState.COMMITTED: [CommitmentState.REVEALED],
        CommitmentState.REVEALED: []
    }

    def __init__(self, initial_state: CommitmentState = CommitmentState.UNCOMMITTED):
        """
        初始化状态机

        Args:
            initial_state: 初始状态
        """
        self.current_state = initial_state
        self.previous_state: Optional[CommitmentState] = None

    def can_transition_to(self, state: CommitmentState) -> bool:
        """
        检查是否可以转换到指定状态

        Args:
            state: 目标状态

        Returns:
            bool: 是否可以转换
        """
        return state in self.VALID_TRANSITIONS.get(self.current_state, [])

    def transition_to(self, new_state: CommitmentState) -> None:
        """
        转换到新状态

        Args:
            new_state: 新状态

        Raises:
            CommitmentStateError: 转换不合法（包括从终态离开或原地转换）
        """
        if not self.can_transition_to(new_state):
            raise CommitmentStateError(
                f"Illegal commitment transition: {self.current_state} -> {new_state}",
                game_state=str(self.current_state))

        self.previous_state = self.current_state
        self.current_state = new_state

    def get_current_state(self) -> CommitmentState:
        """获取当前状态"""
        return self.current_state

    def is_in_state(self, state: CommitmentState) -> bool:
        """检查是否在指定状态"""
        return self.current_state == state
