"""批量求值模块"""
from .evaluator import ExpressionEvaluator

__all__ = ['ExpressionEvaluator']
