"""RPN表达式求值器 - 调用统一的Operators类"""
import logging
from core.errors import CalculatorError, ErrorKind
from core.token_system import TokenType, RPNValidator
from core.operators import Operators

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, allow_partial=False):
        """
        评估RPN表达式
        Args:
            token_sequence: Token序列（RPN顺序）
            allow_partial: 是否允许部分表达式（结束时栈中有多个元素，返回栈顶）
        Returns:
            NUMBER_TYPE 结果（默认 np.float32）
        Raises:
            CalculatorError: 操作数不足、空栈、除零
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)
                continue

            # ================== 二元操作符处理 ==================
            if len(stack) < 2:
                logger.debug(f"Insufficient operands for {token.name}")
                raise CalculatorError(ErrorKind.INVALID_EXPRESSION)
            operand2 = stack.pop()
            operand1 = stack.pop()
            stack.append(Operators.apply(token.operator, operand1, operand2))

        # 返回结果处理
        if len(stack) == 0:
            logger.debug("Empty stack after evaluation")
            raise CalculatorError(ErrorKind.INVALID_EXPRESSION)
        if len(stack) > 1:
            if not allow_partial:
                logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
                logger.debug(f"RPN expression: {RPNValidator.format_rpn(token_sequence)}")
                raise CalculatorError(ErrorKind.INVALID_EXPRESSION)
            logger.debug(f"Partial expression with {len(stack)} stack elements, returning top")
        return stack[-1]
