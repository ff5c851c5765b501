"""
工具类模块
Utility Classes
"""
from .logger import setup_logger, setup_logger_from_config, get_log_level
from .config_loader import ConfigLoader
from .error_handler import ErrorHandler, global_error_handler
from .exceptions import (
    GameException,
    ConfigurationException,
    InvalidConfiguration,
    UnknownMove,
    InsufficientEntropy,
    CommitmentStateError
)

__all__ = [
    'setup_logger',
    'setup_logger_from_config',
    'get_log_level',
    'ConfigLoader',
    'ErrorHandler',
    'global_error_handler',
    'GameException',
    'ConfigurationException',
    'InvalidConfiguration',
    'UnknownMove',
    'InsufficientEntropy',
    'CommitmentStateError'
]
