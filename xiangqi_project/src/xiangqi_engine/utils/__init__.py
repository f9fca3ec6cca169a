"""
工具模块

包含日志和异常定义。
"""

from .logger import setup_logger, setup_logger_from_config, get_logger, LoggerMixin
from .exceptions import XiangqiError, NotationError, GameStateError, ConfigurationError

__all__ = [
    'setup_logger', 'setup_logger_from_config', 'get_logger', 'LoggerMixin',
    'XiangqiError', 'NotationError', 'GameStateError', 'ConfigurationError'
]
