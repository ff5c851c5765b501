"""
错误处理工具模块
Error Handler Utility Module
"""
import traceback
from typing import Optional, Callable, Dict
from .exceptions import (
    GameException, ConfigurationException, InvalidConfiguration,
    UnknownMove, InsufficientEntropy, CommitmentStateError
)
from .logger import setup_logger

logger = setup_logger("FairRPS.ErrorHandler")


class ErrorHandler:
    """错误处理器类"""

    def __init__(self):
        """初始化错误处理器"""
        self.error_callbacks: Dict[type, Callable] = {}
        self.setup_default_handlers()

    def setup_default_handlers(self):
        """设置默认错误处理函数"""
        self.error_callbacks[GameException] = self._handle_game_error
        self.error_callbacks[ConfigurationException] = self._handle_config_error
        self.error_callbacks[InvalidConfiguration] = self._handle_invalid_configuration
        self.error_callbacks[UnknownMove] = self._handle_unknown_move
        self.error_callbacks[InsufficientEntropy] = self._handle_insufficient_entropy
        self.error_callbacks[CommitmentStateError] = self._handle_commitment_state_error

    def register_handler(self, exception_type: type, handler: Callable):
        """
        注册错误处理函数

        Args:
            exception_type: 异常类型
            handler: 处理函数，签名为 handler(exception, context)
        """
        self.error_callbacks[exception_type] = handler
        logger.debug(f"注册错误处理函数: {exception_type.__name__}")

    def find_handler(self, exception: Exception) -> Optional[Callable]:
        """沿异常类的 MRO 查找最具体的处理函数"""
        for exc_type in type(exception).__mro__:
            if exc_type in self.error_callbacks:
                return self.error_callbacks[exc_type]
        return None

    def handle(self, exception: Exception, context: Optional[str] = None) -> bool:
        """
        处理异常

        Args:
            exception: 异常对象
            context: 上下文信息

        Returns:
            bool: 是否找到并成功执行处理函数
        """
        error_msg = "异常发生"
        if context:
            error_msg += f" (上下文: {context})"
        error_msg += f": {exception}"
        logger.debug(error_msg, exc_info=exception)

        handler = self.find_handler(exception)
        if handler is None:
            self._handle_generic_error(exception, context)
            return False

        try:
            handler(exception, context)
            return True
        except Exception as e:
            logger.error(f"错误处理函数执行异常: {e}", exc_info=True)
            return False

    def _handle_game_error(self, exception: GameException, context: Optional[str]):
        """处理游戏逻辑错误"""
        logger.error(f"游戏逻辑错误 [状态: {exception.game_state}]: {exception.message}")

    def _handle_config_error(self, exception: ConfigurationException, context: Optional[str]):
        """处理配置错误"""
        logger.error(f"配置错误 [键: {exception.config_key}]: {exception.message}")

    def _handle_invalid_configuration(self, exception: InvalidConfiguration, context: Optional[str]):
        """处理招式列表或安全参数错误"""
        logger.error(f"无效配置 [招式: {exception.moves}]: {exception.message}")

    def _handle_unknown_move(self, exception: UnknownMove, context: Optional[str]):
        """未知招式可恢复，只记警告"""
        logger.warning(f"未知招式 {exception.move!r}: {exception.message}")

    def _handle_insufficient_entropy(self, exception: InsufficientEntropy, context: Optional[str]):
        """处理随机源错误"""
        logger.critical(f"随机源不足 [请求: {exception.requested}, 得到: {exception.received}]: "
                        f"{exception.message}")

    def _handle_commitment_state_error(self, exception: CommitmentStateError, context: Optional[str]):
        """处理承诺状态错误"""
        logger.error(f"承诺状态错误 [状态: {exception.game_state}]: {exception.message}")

    def _handle_generic_error(self, exception: Exception, context: Optional[str]):
        """处理通用错误"""
        logger.error(f"未处理的异常: {type(exception).__name__}: {exception}")
        logger.debug(traceback.format_exc())


# 全局错误处理器实例
global_error_handler = ErrorHandler()
