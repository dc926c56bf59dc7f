"""core/operators.py"""
import numpy as np
import logging

from core.errors import CalculatorError, ErrorKind
from core.token_system import Operator, to_number

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合"""

    @staticmethod
    def ensure_number(operand):
        """确保操作数是配置的浮点类型（默认单精度）"""
        return to_number(operand)

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(all='ignore'):
            return Operators.ensure_number(operand1) + Operators.ensure_number(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(all='ignore'):
            return Operators.ensure_number(operand1) - Operators.ensure_number(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(all='ignore'):
            return Operators.ensure_number(operand1) * Operators.ensure_number(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除数为0时报错，不返回inf/nan"""
        operand2 = Operators.ensure_number(operand2)
        if operand2 == 0.0:
            logger.debug(f"Division by zero: {operand1} / {operand2}")
            raise CalculatorError(ErrorKind.ZERO_DIVISION)
        with np.errstate(all='ignore'):
            return Operators.ensure_number(operand1) / operand2

    @staticmethod
    def apply(operator, operand1, operand2):
        """按操作符分派"""
        op_method = _DISPATCH[operator]
        return op_method(operand1, operand2)


_DISPATCH = {
    Operator.ADD: Operators.add,
    Operator.SUB: Operators.sub,
    Operator.MUL: Operators.mul,
    Operator.DIV: Operators.div,
}
