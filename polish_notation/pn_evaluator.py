"""波兰表达式求值器 - 调用统一的Operators类"""
import math
import logging
from dataclasses import dataclass
from typing import Optional

from polish_notation.errors import PolishError, PolishNotationError
from polish_notation.operators import Operators
from polish_notation.token_system import TokenType, parse_token
from polish_notation.validator import PNValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """一次求值的结果：成功时value为float，失败时error为PolishError"""
    expression: str
    value: Optional[float] = None
    error: Optional[PolishError] = None

    @property
    def ok(self):
        return self.error is None

    def __eq__(self, other):
        if not isinstance(other, EvaluationResult):
            return NotImplemented
        if self.expression != other.expression or self.error is not other.error:
            return False
        # 两次求值得到的nan视为相同结果
        if self.value is not None and other.value is not None \
                and math.isnan(self.value) and math.isnan(other.value):
            return True
        return self.value == other.value

    def __hash__(self):
        return hash((self.expression, self.error))


class PNEvaluator:
    """评估波兰表达式（前缀表达式）的值"""

    @staticmethod
    def evaluate(expression):
        """
        从右向左扫描token：操作数入栈，操作符弹出最近入栈的两个值计算后再入栈
        Args:
            expression: 前缀表达式字符串，token之间用空白分隔
        Returns:
            float结果
        Raises:
            PolishNotationError: 第一次出错时立即抛出
        """
        PNValidator.syntax_check(expression)

        stack = []
        for word in reversed(expression.split()):
            logger.debug(f"token: {word!r}")
            token = parse_token(word)

            if token.type == TokenType.OPERAND:
                stack.append(token.value)
                continue

            # 操作符：先检查操作数个数，再计算
            if len(stack) < token.arity:
                logger.debug(f"Insufficient operands for {token.value!r}")
                raise PolishNotationError(PolishError.NOT_ENOUGH_OPERANDS)

            op_method = getattr(Operators, token.name, None)
            if op_method is None:
                logger.debug(f"Unknown operator: {token.value!r}")
                raise PolishNotationError(PolishError.FAILED_CALCULATE)

            # 后入栈的值是左操作数
            result = op_method(stack[-1], stack[-2])
            del stack[-2:]
            stack.append(result)

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise PolishNotationError(PolishError.FAILED_CALCULATE)
        return float(stack[0])


def pn(expression):
    """求值，失败时抛出PolishNotationError"""
    return PNEvaluator.evaluate(expression)


def evaluate(expression):
    """求值，不抛出PolishNotationError，错误放在EvaluationResult.error中"""
    try:
        value = PNEvaluator.evaluate(expression)
    except PolishNotationError as e:
        logger.debug(f"Failed to evaluate {expression!r}: {e}")
        return EvaluationResult(expression, error=e.kind)
    return EvaluationResult(expression, value=value)
