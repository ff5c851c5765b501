"""
公平性承诺
Fairness Commitment - 电脑招式的承诺-揭示（HMAC）

一个 FairnessCommitment 实例对应一个回合：
UNCOMMITTED --create()--> COMMITTED --reveal()--> REVEALED（终态）
"""
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union
from .security import (
    RandomSource, SecureRandomSource, DEFAULT_HASH, MIN_KEY_BYTES,
    check_hash_name, check_key_bytes, generate_key, generate_hmac, verify_hmac
)
from ..game_logic.move_set import MoveSet
from ..state_machine import CommitmentState, CommitmentStateMachine
from ...utils.exceptions import CommitmentStateError, InsufficientEntropy


@dataclass(frozen=True)
class Commitment:
    """承诺数据类，创建后不可修改；密钥不出现在 repr 中"""
    secret_key: bytes = field(repr=False)
    committed_move: str
    digest: str
    hash_name: str = DEFAULT_HASH

    @property
    def key_hex(self) -> str:
        """十六进制形式的密钥"""
        return self.secret_key.hex()


def verify_commitment(digest: str, secret_key: Union[bytes, str], move: str,
                      hash_name: str = DEFAULT_HASH) -> bool:
    """
    校验承诺

    用揭示出的密钥和招式重新计算 HMAC，与事先公布的摘要比较。

    Args:
        digest: 事先公布的十六进制摘要
        secret_key: 密钥（bytes 或十六进制字符串）
        move: 揭示出的招式名称
        hash_name: 哈希算法名称

    Returns:
        bool: 摘要一致返回 True；十六进制密钥格式错误时返回 False
    """
    if isinstance(secret_key, str):
        try:
            secret_key = bytes.fromhex(secret_key.strip())
        except ValueError:
            return False
    return verify_hmac(digest, secret_key, move, hash_name)


class FairnessCommitment:
    """公平性承诺类"""

    def __init__(self,
                 random_source: Optional[RandomSource] = None,
                 key_bytes: int = MIN_KEY_BYTES,
                 hash_name: str = DEFAULT_HASH):
        """
        初始化一个回合的承诺

        Args:
            random_source: 随机源，默认使用 SecureRandomSource
            key_bytes: 密钥字节数（至少32）
            hash_name: HMAC 哈希算法名称

        Raises:
            InvalidConfiguration: 密钥长度或哈希算法不合法
        """
        self.random_source = random_source or SecureRandomSource()
        self.key_bytes = check_key_bytes(key_bytes)
        self.hash_name = check_hash_name(hash_name)
        self.state_machine = CommitmentStateMachine()
        self._commitment: Optional[Commitment] = None

    @property
    def state(self) -> CommitmentState:
        """当前承诺状态"""
        return self.state_machine.get_current_state()

    @property
    def digest(self) -> Optional[str]:
        """已公布的摘要，尚未创建时为 None"""
        return self._commitment.digest if self._commitment else None

    def create(self, move_set: Union[MoveSet, Sequence[str]],
               random_source: Optional[RandomSource] = None) -> Commitment:
        """
        生成承诺：抽取密钥和电脑招式，计算 HMAC

        Args:
            move_set: 招式集合或招式名称列表
            random_source: 本次使用的随机源（可选，覆盖实例的随机源）

        Returns:
            Commitment: 新的承诺

        Raises:
            CommitmentStateError: 本回合已经生成过承诺
            InsufficientEntropy: 随机源出错
            InvalidConfiguration: 招式列表不合法
        """
        if not self.state_machine.can_transition_to(CommitmentState.COMMITTED):
            raise CommitmentStateError("A commitment was already created for this round",
                                       game_state=str(self.state))

        if not isinstance(move_set, MoveSet):
            move_set = MoveSet(move_set)
        source = random_source or self.random_source

        secret_key = generate_key(source, self.key_bytes)
        try:
            index = source.randbelow(len(move_set))
        except (OSError, NotImplementedError) as e:
            raise InsufficientEntropy(f"Random source failed: {e}") from e
        committed_move = move_set.name_of(index)

        commitment = Commitment(
            secret_key=secret_key,
            committed_move=committed_move,
            digest=generate_hmac(secret_key, committed_move, self.hash_name),
            hash_name=self.hash_name
        )
        self.state_machine.transition_to(CommitmentState.COMMITTED)
        self._commitment = commitment
        return commitment

    def reveal(self, commitment: Optional[Commitment] = None) -> Tuple[bytes, str]:
        """
        揭示密钥和电脑招式

        Args:
            commitment: 要揭示的承诺，必须是本回合 create() 返回的对象

        Returns:
            Tuple[bytes, str]: (密钥, 电脑招式)

        Raises:
            CommitmentStateError: 尚未承诺、已经揭示或承诺不属于本回合
        """
        if commitment is not None and commitment is not self._commitment:
            raise CommitmentStateError("Commitment does not belong to this round",
                                       game_state=str(self.state))
        self.state_machine.transition_to(CommitmentState.REVEALED)
        return self._commitment.secret_key, self._commitment.committed_move

    def verify(self, digest: str, secret_key: Union[bytes, str], move: str) -> bool:
        """用本回合的哈希算法校验承诺"""
        return verify_commitment(digest, secret_key, move, self.hash_name)
