"""polish_notation/validator.py"""
import re
import logging

from polish_notation.config import VALIDATOR_CONFIG
from polish_notation.errors import PolishError, PolishNotationError

logger = logging.getLogger(__name__)

# 匹配任意一个不允许的字符
_UNAVAILABLE_CHARACTER_RE = re.compile(
    "[^" + re.escape(VALIDATOR_CONFIG["allowed_characters"]) + "]"
)


class PNValidator:
    """表达式的语法检查（在解析之前执行）"""

    @staticmethod
    def is_expression(expression):
        """是否输入了表达式：只看原始字符串是否为空，纯空格也算输入"""
        return len(expression) > 0

    @staticmethod
    def has_unavailable_character(checked_string):
        """是否包含允许集合以外的字符（包括小数点、制表符、换行）"""
        return _UNAVAILABLE_CHARACTER_RE.search(checked_string) is not None

    @staticmethod
    def syntax_check(expression):
        """
        检查顺序：先检查是否为空，再检查字符
        Raises:
            PolishNotationError: NOT_ENTERED_EXPRESSION / USE_UNAVAILABLE_CHARACTER
        """
        if not PNValidator.is_expression(expression):
            raise PolishNotationError(PolishError.NOT_ENTERED_EXPRESSION)
        if PNValidator.has_unavailable_character(expression):
            logger.debug(f"Unavailable character in expression: {expression!r}")
            raise PolishNotationError(PolishError.USE_UNAVAILABLE_CHARACTER)
