"""
游戏控制器
Game Controller - 整合规则引擎与承诺-揭示流程
"""
from dataclasses import dataclass
from typing import Optional, Callable
from .game_logic import RuleEngine, Outcome, MoveRef
from .fairness import (
    Commitment, FairnessCommitment, RandomSource, MIN_KEY_BYTES, DEFAULT_HASH,
    verify_commitment
)
from .fairness.security import check_hash_name, check_key_bytes
from .state_machine import CommitmentState
from ..utils.exceptions import CommitmentStateError
from ..utils.logger import setup_logger

logger = setup_logger("FairRPS.GameController")


@dataclass(frozen=True)
class RoundResult:
    """回合结果数据类"""
    round_number: int
    player_move: str
    computer_move: str
    outcome: Outcome
    digest: str
    key_hex: str
    verified: bool

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'round_number': self.round_number,
            'player_move': self.player_move,
            'computer_move': self.computer_move,
            'outcome': self.outcome.value,
            'digest': self.digest,
            'key': self.key_hex,
            'verified': self.verified
        }


class GameController:
    """游戏控制器类，每个回合使用一个新的承诺"""

    def __init__(self,
                 rule_engine: RuleEngine,
                 key_bytes: int = MIN_KEY_BYTES,
                 hash_name: str = DEFAULT_HASH,
                 random_source: Optional[RandomSource] = None):
        """
        初始化游戏控制器

        Args:
            rule_engine: 规则引擎
            key_bytes: 每回合密钥字节数
            hash_name: HMAC 哈希算法
            random_source: 随机源（可选，默认使用操作系统 CSPRNG）
        """
        self.rule_engine = rule_engine
        self.key_bytes = check_key_bytes(key_bytes)
        self.hash_name = check_hash_name(hash_name)
        self.random_source = random_source
        self.current_round = 0

        self._fairness: Optional[FairnessCommitment] = None
        self._commitment: Optional[Commitment] = None

        # 回调函数
        self.on_round_result: Optional[Callable[[RoundResult], None]] = None

        logger.info(f"游戏控制器初始化完成，招式数: {len(rule_engine.move_set)}")

    @property
    def move_set(self):
        """招式集合"""
        return self.rule_engine.move_set

    @property
    def is_round_pending(self) -> bool:
        """是否有已公布 HMAC、尚未揭示的回合"""
        return self._fairness is not None and self._fairness.state == CommitmentState.COMMITTED

    @property
    def current_digest(self) -> Optional[str]:
        """当前回合公布的 HMAC"""
        return self._commitment.digest if self.is_round_pending else None

    def start_round(self) -> str:
        """
        开始新回合：生成承诺

        Returns:
            str: 需要在玩家出招前公布的 HMAC

        Raises:
            CommitmentStateError: 上一回合尚未揭示
            InsufficientEntropy: 随机源出错
        """
        if self.is_round_pending:
            raise CommitmentStateError("Previous round has not been revealed yet",
                                       game_state=str(CommitmentState.COMMITTED))

        self._fairness = FairnessCommitment(self.random_source, self.key_bytes, self.hash_name)
        self._commitment = self._fairness.create(self.move_set)
        self.current_round += 1

        logger.info(f"回合 {self.current_round} 开始，HMAC: {self._commitment.digest}")
        return self._commitment.digest

    def play(self, player_move: MoveRef) -> RoundResult:
        """
        玩家出招，判定结果并揭示承诺

        Args:
            player_move: 玩家招式（名称或 0 起始下标）

        Returns:
            RoundResult: 回合结果

        Raises:
            UnknownMove: 招式不存在，回合保持未揭示，可重新出招
            CommitmentStateError: 没有进行中的回合
        """
        if not self.is_round_pending:
            raise CommitmentStateError("No round in progress, call start_round() first",
                                       game_state=str(self._fairness.state) if self._fairness else None)

        player_name = self.move_set.name_of(player_move)
        outcome = self.rule_engine.resolve(player_name, self._commitment.committed_move)

        secret_key, computer_move = self._fairness.reveal(self._commitment)
        verified = verify_commitment(self._commitment.digest, secret_key, computer_move,
                                     self.hash_name)
        if not verified:
            logger.error("承诺校验失败")

        round_result = RoundResult(
            round_number=self.current_round,
            player_move=player_name,
            computer_move=computer_move,
            outcome=outcome,
            digest=self._commitment.digest,
            key_hex=secret_key.hex(),
            verified=verified
        )

        logger.info(f"回合 {self.current_round}: 玩家={player_name}, "
                    f"电脑={computer_move}, 结果={outcome.value}")

        if self.on_round_result:
            try:
                self.on_round_result(round_result)
            except Exception as e:
                logger.error(f"回合结果回调异常: {e}")

        return round_result
