"""polish_notation/errors.py"""
from enum import Enum


class PolishError(Enum):
    """
    求值失败的种类（封闭集合，不携带额外信息）

    - FAILED_CALCULATE: 未知操作符，或者求值结束时栈中不是恰好一个值
    - NOT_ENOUGH_OPERANDS: 操作符出现时栈中不足两个操作数
    - USE_UNAVAILABLE_CHARACTER: 使用了不允许的字符
    - NOT_ENTERED_EXPRESSION: 没有输入表达式（空字符串）
    """
    FAILED_CALCULATE = "failed calculate"
    NOT_ENOUGH_OPERANDS = "not enough operands"
    USE_UNAVAILABLE_CHARACTER = "use unavailable character"
    # 保留原有拼写
    NOT_ENTERED_EXPRESSION = "not entered exoression"

    def __str__(self):
        return self.value


def error_message(kind):
    """错误种类 -> 固定的单行提示信息"""
    return kind.value


class PolishNotationError(Exception):
    """求值过程中抛出的异常，kind 为 PolishError"""

    def __init__(self, kind):
        super().__init__(kind.value)
        self.kind = kind
