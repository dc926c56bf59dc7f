"""核心模块 - Token系统、调度场转换、RPN评估器和操作符"""
from .errors import ErrorKind, CalculatorError, ERROR_MESSAGES
from .token_system import (
    TokenType, Token, Operator, OPERATOR_DEFINITIONS,
    OPERATOR_SYMBOLS, TOTAL_OPERATORS, RPNValidator,
    NUMBER_TYPE, to_number
)
from .operators import Operators
from .shunting_yard import ShuntingYardConverter
from .rpn_evaluator import RPNEvaluator
from .calculator import Calculator, calculate

__all__ = [
    'ErrorKind', 'CalculatorError', 'ERROR_MESSAGES',
    'TokenType', 'Token', 'Operator', 'OPERATOR_DEFINITIONS',
    'OPERATOR_SYMBOLS', 'TOTAL_OPERATORS', 'RPNValidator',
    'NUMBER_TYPE', 'to_number',
    'Operators', 'ShuntingYardConverter', 'RPNEvaluator',
    'Calculator', 'calculate'
]
