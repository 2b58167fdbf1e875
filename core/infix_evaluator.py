"""中缀表达式求值器 - 调车场（shunting-yard）算法，直接得到数值"""
import logging

from core.errors import (
    EmptyResultError, MalformedExpressionError,
    MismatchedParenthesisError, UnmatchedParenthesisError
)
from core.operators import apply_operator
from core.token_system import Operator, TokenType, tokenize

logger = logging.getLogger(__name__)


class InfixEvaluator:
    """评估中缀Token序列的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        单遍扫描Token序列，维护操作数栈和操作符栈

        Args:
            token_sequence: tokenize()得到的Token序列
        Returns:
            float结果
        Raises:
            EvaluationError的子类（括号不匹配、操作数不足、结果为空或多余）
        """
        output = []
        operator_stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                output.append(token.value)
                continue

            op = token.operator
            if op == Operator.LPAR:
                operator_stack.append(op)

            elif op == Operator.RPAR:
                # 弹出直到遇到左括号
                while not operator_stack or operator_stack[-1] != Operator.LPAR:
                    if not operator_stack:
                        raise UnmatchedParenthesisError()
                    apply_operator(output, operator_stack.pop())
                operator_stack.pop()

            else:
                while operator_stack and not operator_stack[-1].is_parenthesis:
                    top = operator_stack[-1]
                    if top.precedence > op.precedence or (
                            top.precedence == op.precedence and op.is_left_associative):
                        apply_operator(output, operator_stack.pop())
                    else:
                        break
                operator_stack.append(op)

        # 剩余操作符按栈顶优先应用
        while operator_stack:
            op = operator_stack.pop()
            if op == Operator.LPAR:
                raise MismatchedParenthesisError()
            apply_operator(output, op)

        if len(output) == 0:
            raise EmptyResultError()
        if len(output) > 1:
            logger.debug(f"Operand stack has {len(output)} values after evaluation, expected 1")
            raise MalformedExpressionError(len(output))
        return output[0]


def evaluate(token_sequence):
    return InfixEvaluator.evaluate(token_sequence)


def solve(text):
    """tokenize + evaluate"""
    return InfixEvaluator.evaluate(tokenize(text))
