"""
日志工具模块
Logger Utility Module
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any

ROOT_LOGGER_NAME = "FairRPS"


def get_log_level(level_str: str) -> int:
    """
    从字符串获取日志级别

    Args:
        level_str: 日志级别字符串（DEBUG, INFO, WARNING, ERROR, CRITICAL）

    Returns:
        int: 日志级别，无法识别时返回 WARNING
    """
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }
    return level_map.get(str(level_str).upper(), logging.WARNING)


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    log_file: Optional[str] = None,
    level: int = logging.WARNING,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    设置日志记录器

    子记录器（"FairRPS.xxx"）不挂处理器，消息向上传递给根记录器，
    这样只需配置一次根记录器即可控制全部输出。

    Args:
        name: 日志记录器名称
        log_file: 日志文件路径（可选）
        level: 日志级别
        format_string: 日志格式字符串（可选）

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    logger = logging.getLogger(name)

    if name != ROOT_LOGGER_NAME:
        return logger

    logger.setLevel(level)

    # 重新配置时替换旧的处理器
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # 默认格式
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    formatter = logging.Formatter(format_string)

    # 控制台处理器（stderr，避免与游戏菜单输出混在一起）
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 文件处理器（如果指定）
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


def setup_logger_from_config(config: Dict[str, Any], name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    从配置字典设置日志记录器

    Args:
        config: 配置字典（包含level和file键）
        name: 日志记录器名称

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    level = get_log_level(config.get('level', 'WARNING'))
    log_file = config.get('file')

    root = setup_logger(name=ROOT_LOGGER_NAME, log_file=log_file, level=level)
    if name == ROOT_LOGGER_NAME:
        return root
    return logging.getLogger(name)
