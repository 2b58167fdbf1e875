"""核心模块 - Token系统、中缀求值器和操作符"""
from .token_system import (
    TokenType, Token, Operator, OPERATOR_DEFINITIONS, tokenize
)
from .operators import Operators, apply_operator
from .infix_evaluator import InfixEvaluator, evaluate, solve
from .errors import (
    EvaluationError, UnmatchedParenthesisError, MismatchedParenthesisError,
    StackUnderflowError, EmptyResultError, MalformedExpressionError
)

__all__ = [
    'TokenType', 'Token', 'Operator', 'OPERATOR_DEFINITIONS', 'tokenize',
    'Operators', 'apply_operator', 'InfixEvaluator', 'evaluate', 'solve',
    'EvaluationError', 'UnmatchedParenthesisError', 'MismatchedParenthesisError',
    'StackUnderflowError', 'EmptyResultError', 'MalformedExpressionError'
]
