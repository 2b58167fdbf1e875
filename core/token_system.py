"""core/token_system.py"""
import logging
import re
from enum import Enum

from config.config import TOKENIZER_CONFIG

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"  # 数值字面量
    OPERATOR = "operator"  # 操作符（含括号）


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    EXP = "^"
    LPAR = "("
    RPAR = ")"

    @classmethod
    def from_symbol(cls, symbol):
        """由符号字符得到操作符，未知符号抛出ValueError"""
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Unknown operator symbol: {symbol!r}") from None

    @property
    def precedence(self):
        return OPERATOR_DEFINITIONS[self]['precedence']

    @property
    def is_left_associative(self):
        return OPERATOR_DEFINITIONS[self]['left_associative']

    @property
    def is_parenthesis(self):
        return self in (Operator.LPAR, Operator.RPAR)

    def __str__(self):
        return self.value


# 操作符定义字典：优先级越高结合越紧
# 括号优先级为0，出栈循环把它们当作屏障，不参与比较
OPERATOR_DEFINITIONS = {
    Operator.ADD: {'precedence': 2, 'left_associative': True},
    Operator.SUB: {'precedence': 2, 'left_associative': True},
    Operator.MUL: {'precedence': 3, 'left_associative': True},
    Operator.DIV: {'precedence': 3, 'left_associative': True},
    Operator.MOD: {'precedence': 3, 'left_associative': True},
    Operator.EXP: {'precedence': 4, 'left_associative': False},  # 右结合
    Operator.LPAR: {'precedence': 0, 'left_associative': False},
    Operator.RPAR: {'precedence': 0, 'left_associative': False},
}


class Token:
    def __init__(self, token_type, name, value=None, operator=None):
        self.type = token_type
        self.name = name  # 源文本中的词素
        self.value = value
        self.operator = operator

    @classmethod
    def number(cls, lexeme):
        return cls(TokenType.NUMBER, lexeme, value=float(lexeme))

    @classmethod
    def from_operator(cls, operator):
        return cls(TokenType.OPERATOR, operator.value, operator=operator)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.operator) == (other.type, other.value, other.operator)

    def __hash__(self):
        return hash((self.type, self.value, self.operator))

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token(NUMBER, {self.value!r})"
        return f"Token(OPERATOR, {self.operator.value!r})"

    def __str__(self):
        if self.type == TokenType.NUMBER:
            from utils.formatting import format_result
            return format_result(self.value)
        return str(self.operator)


def _build_token_regex():
    operators = ''.join(re.escape(s) for s in TOKENIZER_CONFIG['operator_symbols'])
    return re.compile(rf"(?P<number>{TOKENIZER_CONFIG['number_pattern']})|(?P<operator>[{operators}])")


TOKEN_REGEX = _build_token_regex()


def tokenize(text):
    """
    把表达式文本切分为Token序列

    Args:
        text: 任意文本
    Returns:
        Token列表，顺序与源文本一致；空白、字母、逗号等不匹配的字符直接跳过
    """
    tokens = []
    for match in TOKEN_REGEX.finditer(text or ''):
        number = match.group('number')
        if number is not None:
            tokens.append(Token.number(number))
        else:
            tokens.append(Token.from_operator(Operator.from_symbol(match.group('operator'))))

    logger.debug(f"Tokenized {len(tokens)} tokens from {text!r}")
    return tokens
