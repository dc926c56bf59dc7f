"""core/errors.py"""
from enum import Enum


class ErrorKind(Enum):
    UNSUPPORTED_TOKEN = "unsupported_token"
    MISMATCHED_PARANTHESES = "mismatched_parantheses"
    INVALID_EXPRESSION = "invalid_expression"
    INVALID_DECIMAL = "invalid_decimal"
    ZERO_DIVISION = "zero_division"


# 每种错误对应一条固定提示
ERROR_MESSAGES = {
    ErrorKind.UNSUPPORTED_TOKEN:
        "Error: The expression contains an unsupported token",
    ErrorKind.MISMATCHED_PARANTHESES:
        "Error: Mismatched parentheses, make sure every '(' has a matching ')'.",
    ErrorKind.INVALID_EXPRESSION:
        "Error: The expression is invalid, it may be incomplete, malformed, or missing operands.",
    ErrorKind.INVALID_DECIMAL:
        "Error: The expression contains an invalid decimal number. "
        "There are more than 1 '.' within a number.",
    ErrorKind.ZERO_DIVISION:
        "Error: Trying to divide by 0 is mathematically undefined.",
}


class CalculatorError(Exception):
    """计算器统一异常，kind 区分错误类型"""

    def __init__(self, kind, position=None):
        super().__init__(ERROR_MESSAGES[kind])
        self.kind = kind
        self.position = position  # 扫描阶段出错的字符下标

    def __str__(self):
        return ERROR_MESSAGES[self.kind]

    def __repr__(self):
        if self.position is None:
            return f"CalculatorError({self.kind.name})"
        return f"CalculatorError({self.kind.name}, position={self.position})"
