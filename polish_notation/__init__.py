"""波兰表达式求值 - 语法检查、Token系统、求值器和操作符"""
from .errors import PolishError, PolishNotationError, error_message
from .token_system import TokenType, Token, TOKEN_DEFINITIONS, parse_token, tokenize
from .validator import PNValidator
from .operators import Operators
from .pn_evaluator import PNEvaluator, EvaluationResult, pn, evaluate
from .batch import evaluate_many, results_to_frame, save_results

__all__ = [
    'PolishError', 'PolishNotationError', 'error_message',
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'parse_token', 'tokenize',
    'PNValidator', 'Operators',
    'PNEvaluator', 'EvaluationResult', 'pn', 'evaluate',
    'evaluate_many', 'results_to_frame', 'save_results'
]
