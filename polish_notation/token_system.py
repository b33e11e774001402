"""polish_notation/token_system.py"""
import re
from enum import Enum
import numpy as np

from polish_notation.config import VALIDATOR_CONFIG
from polish_notation.errors import PolishError, PolishNotationError
from polish_notation.validator import PNValidator


# 只接受ASCII的十进制/科学计数法写法（不接受下划线、全角数字等）
_NUMBER_RE = re.compile(
    r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?|[+-]?(inf|infinity|nan)",
    re.IGNORECASE
)


class TokenType(Enum):
    OPERAND = "operand"  # 操作数
    OPERATOR = "operator"  # 操作符


class Token:
    def __init__(self, token_type, name, value=None, arity=0):
        self.type = token_type
        self.name = name  # 操作符对应Operators中的方法名；操作数为原始字符串
        self.value = value  # 操作数为float64，操作符为符号
        self.arity = arity

    def __repr__(self):
        return f"Token({self.type.value}, {self.name!r}, {self.value!r})"


# Token定义字典：符号 -> 操作符
TOKEN_DEFINITIONS = {
    '+': Token(TokenType.OPERATOR, 'add', value='+', arity=2),
    '-': Token(TokenType.OPERATOR, 'sub', value='-', arity=2),
    '*': Token(TokenType.OPERATOR, 'mul', value='*', arity=2),
    '/': Token(TokenType.OPERATOR, 'div', value='/', arity=2),
    '%': Token(TokenType.OPERATOR, 'mod', value='%', arity=2),
}


def parse_token(word):
    """
    把一个token分类为操作数或操作符
    先尝试解析为数字；失败时再检查字符，合法字符组成的非数字一律视为操作符，
    操作符是否存在留到计算时再判断（例如 "++"）
    Raises:
        PolishNotationError: USE_UNAVAILABLE_CHARACTER
    """
    if _NUMBER_RE.fullmatch(word):
        try:
            return Token(TokenType.OPERAND, word, value=np.float64(word))
        except ValueError:
            pass

    if PNValidator.has_unavailable_character(word):
        raise PolishNotationError(PolishError.USE_UNAVAILABLE_CHARACTER)

    if word in TOKEN_DEFINITIONS:
        return TOKEN_DEFINITIONS[word]
    return Token(TokenType.OPERATOR, word, value=word, arity=VALIDATOR_CONFIG["operator_arity"])


def tokenize(expression):
    """按空白切分并按原顺序分类"""
    return [parse_token(word) for word in expression.split()]
