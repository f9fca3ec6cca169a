"""
日志系统

提供统一的日志记录功能。
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional


ROOT_LOGGER_NAME = 'xiangqi'


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str = 'INFO',
    log_file: Optional[str] = None,
    log_dir: str = 'logs/xiangqi_engine',
    max_size: int = 10,  # MB
    backup_count: int = 5,
    console_output: bool = True
) -> logging.Logger:
    """
    设置日志记录器

    Args:
        name: 日志记录器名称
        level: 日志级别
        log_file: 日志文件名，None表示不写文件
        log_dir: 日志目录
        max_size: 日志文件最大大小(MB)
        backup_count: 备份文件数量
        console_output: 是否输出到控制台

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    logger = logging.getLogger(name)

    # 如果已经配置过，直接返回
    if logger.handlers:
        return logger

    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        # 使用RotatingFileHandler实现日志轮转
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path / log_file,
            maxBytes=max_size * 1024 * 1024,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def setup_logger_from_config(system_config) -> logging.Logger:
    """
    根据系统配置设置根日志记录器

    Args:
        system_config: SystemConfig 对象

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    return setup_logger(
        name=ROOT_LOGGER_NAME,
        level=system_config.log_level,
        log_file=system_config.log_file or None,
        log_dir=system_config.log_dir,
        max_size=system_config.log_max_size,
        backup_count=system_config.log_backup_count,
        console_output=system_config.console_output
    )


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """获取日志记录器"""
    return logging.getLogger(name)


class LoggerMixin:
    """
    日志记录器混入类

    为类提供 ``xiangqi.<类名>`` 日志记录器。
    """

    @property
    def logger(self) -> logging.Logger:
        return get_logger(f'{ROOT_LOGGER_NAME}.{self.__class__.__name__}')

    def log_info(self, message: str, *args, **kwargs):
        self.logger.info(message, *args, **kwargs)

    def log_warning(self, message: str, *args, **kwargs):
        self.logger.warning(message, *args, **kwargs)

    def log_error(self, message: str, *args, **kwargs):
        self.logger.error(message, *args, **kwargs)

    def log_debug(self, message: str, *args, **kwargs):
        self.logger.debug(message, *args, **kwargs)
