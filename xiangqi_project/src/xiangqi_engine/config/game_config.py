"""
配置数据结构

定义对局配置、系统配置和默认参数。
"""

from dataclasses import dataclass


@dataclass
class GameConfig:
    """对局配置"""
    first_player: str = 'red'           # 先手方 ('red', 'black')
    validate_on_load: bool = True       # 加载棋谱后是否校验棋盘


@dataclass
class SystemConfig:
    """系统配置"""
    # 日志配置
    log_level: str = 'INFO'             # 日志级别
    log_file: str = ''                  # 日志文件，空表示不写文件
    log_dir: str = 'logs/xiangqi_engine'  # 日志目录
    log_max_size: int = 10              # 日志文件最大大小(MB)
    log_backup_count: int = 5           # 日志备份数量
    console_output: bool = True         # 是否输出到控制台


# 默认配置实例
DEFAULT_GAME_CONFIG = GameConfig()
DEFAULT_SYSTEM_CONFIG = SystemConfig()
