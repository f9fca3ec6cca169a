"""
异常定义

定义象棋规则核心的异常类型。

棋盘的走子、悔棋、重做操作本身不抛出异常（空操作即返回），
这里的异常只用于解析走法记录、回放棋谱以及读取配置。
"""


class XiangqiError(Exception):
    """
    象棋核心基础异常

    所有象棋核心相关异常的基类。
    """

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class NotationError(XiangqiError):
    """
    走法记法异常

    当序列化的走法文本无法解析时抛出。
    """

    def __init__(self, notation: str, reason: str = ""):
        message = f"无效的走法记法: {notation!r}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "NOTATION_ERROR")
        self.notation = notation
        self.reason = reason


class GameStateError(XiangqiError):
    """
    游戏状态异常

    当棋谱无法在初始局面上回放（起点无子、吃子不一致）时抛出。
    """

    def __init__(self, state_description: str, reason: str = ""):
        message = f"游戏状态错误: {state_description}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, "GAME_STATE_ERROR")
        self.state_description = state_description
        self.reason = reason


class ConfigurationError(XiangqiError):
    """
    配置错误异常

    当配置参数无效时抛出。
    """

    def __init__(self, config_name: str, reason: str = ""):
        message = f"配置错误 - {config_name}"
        if reason:
            message += f": {reason}"
        super().__init__(message, "CONFIG_ERROR")
        self.config_name = config_name
        self.reason = reason
