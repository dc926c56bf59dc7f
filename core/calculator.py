"""core/calculator.py - 表达式 -> RPN -> 数值"""
import logging

from config.config import EVALUATOR_CONFIG
from core.shunting_yard import ShuntingYardConverter
from core.rpn_evaluator import RPNEvaluator

logger = logging.getLogger(__name__)


class Calculator:

    def __init__(self, expression, allow_partial=None):
        self.expression = expression
        if allow_partial is None:
            allow_partial = EVALUATOR_CONFIG["allow_partial"]
        self.allow_partial = allow_partial
        self._tokens = ()

    @property
    def tokens(self):
        """最近一次 eval 生成的RPN序列"""
        return self._tokens

    def eval(self):
        """
        先转换为RPN，再求值
        Returns:
            NUMBER_TYPE 结果（默认 np.float32）
        Raises:
            CalculatorError: 遇到的第一个错误
        """
        self._tokens = ()
        tokens = ShuntingYardConverter.convert(self.expression)
        self._tokens = tuple(tokens)
        result = RPNEvaluator.evaluate(tokens, allow_partial=self.allow_partial)
        logger.debug(f"{self.expression!r} = {result}")
        return result


def calculate(expression, allow_partial=None):
    return Calculator(expression, allow_partial=allow_partial).eval()
