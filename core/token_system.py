"""core/token_system.py"""
from enum import Enum
import numpy as np

from config.config import EVALUATOR_CONFIG

# 求值使用的数值类型（默认单精度）
NUMBER_TYPE = np.dtype(EVALUATOR_CONFIG["dtype"]).type


def to_number(value):
    """
    转换为 NUMBER_TYPE，溢出得到 inf 且不产生警告；字符串无法解析时抛 ValueError
    字符串先按双精度解析再舍入，只有接近单精度舍入中点的长字面量
    才可能与一次舍入的结果相差 1 ulp
    """
    if isinstance(value, NUMBER_TYPE):
        return value
    with np.errstate(all='ignore'):
        return NUMBER_TYPE(value)


class TokenType(Enum):
    NUMBER = "number"      # 数值
    OPERATOR = "operator"  # 操作符


class Operator(Enum):
    """四则运算操作符，value 为 (符号, 优先级)"""
    ADD = ('+', 1)
    SUB = ('-', 1)
    MUL = ('*', 2)
    DIV = ('/', 2)

    @property
    def symbol(self):
        return self.value[0]

    @property
    def precedence(self):
        return self.value[1]


# 符号 -> 操作符
OPERATOR_DEFINITIONS = {op.symbol: op for op in Operator}
OPERATOR_SYMBOLS = frozenset(OPERATOR_DEFINITIONS)
TOTAL_OPERATORS = len(OPERATOR_DEFINITIONS)


class Token:
    """RPN Token，创建后不可修改"""
    __slots__ = ('type', 'value', 'operator')

    def __init__(self, token_type, value=None, operator=None):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'operator', operator)

    def __setattr__(self, key, value):
        raise AttributeError("Token is immutable")

    def __delattr__(self, key):
        raise AttributeError("Token is immutable")

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, value=to_number(value))

    @classmethod
    def operation(cls, operator):
        if not isinstance(operator, Operator):
            operator = OPERATOR_DEFINITIONS[operator]
        return cls(TokenType.OPERATOR, operator=operator)

    @property
    def name(self):
        if self.type == TokenType.OPERATOR:
            return self.operator.symbol
        return np.format_float_positional(self.value, trim='-')

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.operator) == (other.type, other.value, other.operator)

    def __hash__(self):
        return hash((self.type, self.value, self.operator))

    def __repr__(self):
        if self.type == TokenType.OPERATOR:
            return f"Token.operation({self.operator.symbol!r})"
        return f"Token.number({self.name})"


class RPNValidator:
    @staticmethod
    def calculate_stack_size(token_sequence):
        """计算当前栈中的元素数量（不足时可能为负）"""
        stack_size = 0
        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack_size += 1
            else:
                # 二元操作符：出栈2个，入栈1个
                stack_size -= 1
        return stack_size

    @staticmethod
    def is_valid_expression(token_sequence):
        """检查RPN序列是否完整：过程中不下溢，且结束时栈中恰好1个元素"""
        stack_size = 0
        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack_size += 1
            else:
                if stack_size < 2:
                    return False
                stack_size -= 1
        return stack_size == 1

    @staticmethod
    def format_rpn(token_sequence):
        return ' '.join(token.name for token in token_sequence)
