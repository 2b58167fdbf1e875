"""core/operators.py"""
import logging

import numpy as np

from config.config import EVALUATOR_CONFIG
from core.errors import StackUnderflowError
from core.token_system import Operator

logger = logging.getLogger(__name__)


class Operators:
    """所有二元操作符的静态方法集合，统一按float64计算"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法：除零按IEEE 754得到inf或nan，不报错"""
        return np.true_divide(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def mod(operand1, operand2):
        """取余：C语言fmod语义，结果符号与被除数相同"""
        return np.fmod(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def exp(operand1, operand2):
        """实数幂：负底数配小数指数得到nan"""
        return np.power(np.float64(operand1), np.float64(operand2))


# 操作符 -> Operators中的方法名
OPERATOR_METHODS = {
    Operator.ADD: 'add',
    Operator.SUB: 'sub',
    Operator.MUL: 'mul',
    Operator.DIV: 'div',
    Operator.MOD: 'mod',
    Operator.EXP: 'exp',
}


def compute(operator, lhs, rhs):
    """计算 lhs <operator> rhs，返回Python float"""
    method_name = OPERATOR_METHODS.get(operator)
    if method_name is None:
        raise ValueError(f"Operator '{operator}' cannot be applied to operands")

    op_method = getattr(Operators, method_name)
    with np.errstate(all=EVALUATOR_CONFIG['float_errors']):
        return float(op_method(lhs, rhs))


def apply_operator(stack, operator):
    """
    弹出两个操作数，计算后把结果压回栈

    Args:
        stack: 操作数栈（list，栈顶在末尾）
        operator: 要应用的Operator
    Returns:
        同一个栈对象
    """
    if len(stack) < 2:
        raise StackUnderflowError(operator)

    rhs = stack.pop()
    lhs = stack.pop()
    result = compute(operator, lhs, rhs)
    logger.debug(f"Applied {lhs!r} {operator} {rhs!r} = {result!r}")
    stack.append(result)
    return stack
