"""core/errors.py - 表达式求值错误类型"""


class EvaluationError(ValueError):
    """求值失败的基类，调用方统一捕获"""


class UnmatchedParenthesisError(EvaluationError):
    """右括号没有对应的左括号"""

    def __init__(self):
        super().__init__("Unmatched parenthesis: ')' without an open '('")


class MismatchedParenthesisError(EvaluationError):
    """输入结束时仍有未闭合的左括号"""

    def __init__(self):
        super().__init__("Mismatched parentheses: '(' was never closed")


class StackUnderflowError(EvaluationError):
    """操作符可用的操作数不足两个"""

    def __init__(self, operator=None):
        self.operator = operator
        if operator is None:
            message = "Stack underflow: operator is missing an operand"
        else:
            message = f"Stack underflow: '{operator}' is missing an operand"
        super().__init__(message)


class EmptyResultError(EvaluationError):
    """求值结束时栈中没有结果"""

    def __init__(self):
        super().__init__("Empty result: the expression contains no numbers")


class MalformedExpressionError(EvaluationError):
    """求值结束时栈中剩余多个操作数（例如 "1 2"）"""

    def __init__(self, leftover):
        self.leftover = leftover
        super().__init__(
            f"Malformed expression: {leftover} operands left without an operator"
        )
