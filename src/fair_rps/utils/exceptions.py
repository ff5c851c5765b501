"""
自定义异常类
Custom Exception Classes
"""
from typing import Optional, Sequence, Any


class GameException(Exception):
    """游戏逻辑异常"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message)
        self.game_state = game_state
        self.message = message


class ConfigurationException(Exception):
    """配置异常"""
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key
        self.message = message


class InvalidConfiguration(ConfigurationException):
    """招式列表或安全参数不合法（偶数个、少于3个、重复等）"""
    def __init__(self, message: str, moves: Optional[Sequence[Any]] = None,
                 config_key: Optional[str] = None):
        super().__init__(message, config_key=config_key)
        self.moves = list(moves) if moves is not None else None


class UnknownMove(GameException):
    """招式不在招式集合中"""
    def __init__(self, message: str, move: Any = None):
        super().__init__(message)
        self.move = move


class InsufficientEntropy(GameException):
    """安全随机源无法提供所需字节"""
    def __init__(self, message: str, requested: Optional[int] = None,
                 received: Optional[int] = None):
        super().__init__(message, game_state="UNCOMMITTED")
        self.requested = requested
        self.received = received


class CommitmentStateError(GameException):
    """承诺-揭示流程中的非法状态转换"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message, game_state=game_state)
