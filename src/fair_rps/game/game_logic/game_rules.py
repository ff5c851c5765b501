"""
游戏规则实现
Game Rules Implementation - 任意奇数个招式的环形胜负规则
"""
from enum import Enum
from typing import List, Sequence, Union
from .move_set import MoveSet, MoveRef


class Outcome(Enum):
    """游戏结果枚举（从第一个招式的角度）"""
    WIN = "win"      # 获胜
    LOSE = "lose"    # 失败
    DRAW = "draw"    # 平局

    def __str__(self):
        return self.value

    def opposite(self) -> "Outcome":
        """从对手角度看的结果"""
        if self is Outcome.WIN:
            return Outcome.LOSE
        if self is Outcome.LOSE:
            return Outcome.WIN
        return Outcome.DRAW


class RuleEngine:
    """
    规则引擎类

    招式按给定顺序围成一个环，half = N // 2。
    招式 a 战胜在它之前 1..half 步（环形）的招式，输给其余 half 个招式。
    """

    def __init__(self, moves: Union[MoveSet, Sequence[str]]):
        """
        初始化规则引擎

        Args:
            moves: 招式集合或招式名称列表

        Raises:
            InvalidConfiguration: 招式列表不合法
        """
        self.move_set = moves if isinstance(moves, MoveSet) else MoveSet(moves)

    def resolve(self, first: MoveRef, second: MoveRef) -> Outcome:
        """
        判断游戏结果

        Args:
            first: 第一个招式（名称或下标）
            second: 第二个招式（名称或下标）

        Returns:
            Outcome: 第一个招式的结果

        Raises:
            UnknownMove: 任一招式不在集合中
        """
        ia = self.move_set.index_of(first)
        ib = self.move_set.index_of(second)
        half = self.move_set.half

        if ia == ib:
            return Outcome.DRAW

        if (ia > ib and ia - ib <= half) or (ib > ia and ib - ia > half):
            return Outcome.WIN
        return Outcome.LOSE

    def beats(self, move: MoveRef) -> List[str]:
        """
        获取被指定招式战胜的招式

        Args:
            move: 目标招式

        Returns:
            List[str]: 按集合顺序排列的招式名称
        """
        return [other for other in self.move_set if self.resolve(move, other) is Outcome.WIN]

    def loses_to(self, move: MoveRef) -> List[str]:
        """获取能战胜指定招式的招式"""
        return [other for other in self.move_set if self.resolve(move, other) is Outcome.LOSE]
