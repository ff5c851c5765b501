"""
承诺状态枚举
Commitment State Enumeration
"""
from enum import Enum, auto


class CommitmentState(Enum):
    """单回合承诺-揭示状态枚举"""
    UNCOMMITTED = auto()   # 尚未生成承诺
    COMMITTED = auto()     # HMAC 已公布，等待玩家出招
    REVEALED = auto()      # 密钥和电脑招式已公开（终态）

    def __str__(self):
        return self.name
