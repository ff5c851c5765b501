"""
配置加载工具模块
Configuration Loader Utility
"""
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from .exceptions import ConfigurationException
from .logger import setup_logger

logger = setup_logger("FairRPS.ConfigLoader")

# 项目根目录下的 config/config.yaml（src/fair_rps/utils -> 项目根目录）
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent.parent.parent / "config" / "config.yaml"


class ConfigLoader:
    """配置加载器类"""

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        从YAML文件加载配置

        未指定路径时读取 config/config.yaml，该文件不存在则使用内置默认值。

        Args:
            config_path: 配置文件路径

        Returns:
            Dict[str, Any]: 配置字典

        Raises:
            FileNotFoundError: 显式指定的配置文件不存在
            ConfigurationException: YAML解析错误或顶层不是映射
        """
        if config_path is None:
            if not DEFAULT_CONFIG_PATH.exists():
                logger.debug("未找到默认配置文件，使用内置默认值")
                return {}
            config_file = DEFAULT_CONFIG_PATH
        else:
            config_file = Path(config_path)

        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML解析错误: {e}")
            raise ConfigurationException(f"Invalid YAML in {config_file}: {e}") from e

        if config is None:
            logger.warning(f"配置文件为空: {config_file}")
            return {}

        if not isinstance(config, dict):
            raise ConfigurationException(f"Top level of {config_file} must be a mapping")

        logger.info(f"成功加载配置文件: {config_file}")
        return config

    @staticmethod
    def _get_section(config: Dict[str, Any], section: str) -> Dict[str, Any]:
        value = config.get(section) or {}
        if not isinstance(value, dict):
            raise ConfigurationException(f"Config section '{section}' must be a mapping",
                                         config_key=section)
        return value

    @staticmethod
    def get_security_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取安全配置（key_bytes, hash）

        Args:
            config: 完整配置字典

        Returns:
            Dict[str, Any]: 安全配置字典
        """
        return ConfigLoader._get_section(config, 'security')

    @staticmethod
    def get_display_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """从配置中获取显示配置（table_format）"""
        return ConfigLoader._get_section(config, 'display')

    @staticmethod
    def get_logging_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取日志配置

        Args:
            config: 完整配置字典

        Returns:
            Dict[str, Any]: 日志配置字典
        """
        return ConfigLoader._get_section(config, 'logging')
