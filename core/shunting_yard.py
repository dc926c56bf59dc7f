"""core/shunting_yard.py - 中缀表达式 -> RPN Token序列"""
import logging

from core.errors import CalculatorError, ErrorKind
from core.token_system import Token, OPERATOR_DEFINITIONS, OPERATOR_SYMBOLS, RPNValidator

logger = logging.getLogger(__name__)

LEFT_PAREN = '('
RIGHT_PAREN = ')'
DECIMAL_POINT = '.'

# 这些字符之后的 '-' 视为一元负号
UNARY_PRECEDERS = OPERATOR_SYMBOLS | {LEFT_PAREN}


def _is_digit(c):
    return '0' <= c <= '9'


class ShuntingYardConverter:
    """用调度场算法把表达式字符串转换为RPN"""

    @staticmethod
    def _parse_number(chars, i, is_negative=False):
        """
        从下标 i 开始读取数字字面量
        Returns:
            (number_token, 下一个未读取的下标)
        """
        start = i
        num_str = '-' if is_negative else ''
        dotted = False

        while i < len(chars) and (_is_digit(chars[i]) or chars[i] == DECIMAL_POINT):
            if chars[i] == DECIMAL_POINT:
                if dotted:
                    logger.debug(f"Second decimal point at position {i}")
                    raise CalculatorError(ErrorKind.INVALID_DECIMAL, position=i)
                dotted = True
            num_str += chars[i]
            i += 1

        try:
            token = Token.number(num_str)
        except ValueError:
            logger.debug(f"Malformed number literal {num_str!r} at position {start}")
            raise CalculatorError(ErrorKind.INVALID_EXPRESSION, position=start) from None
        return token, i

    @staticmethod
    def _is_unary_minus(chars, i):
        """
        '-' 位于开头，或前一个非空白字符是 ( + - * /，
        且后面紧跟数字时，视为数字的一部分
        """
        if i + 1 >= len(chars) or not _is_digit(chars[i + 1]):
            return False
        j = i - 1
        while j >= 0 and chars[j].isspace():
            j -= 1
        return j < 0 or chars[j] in UNARY_PRECEDERS

    @staticmethod
    def convert(expression):
        """
        Args:
            expression: 中缀表达式字符串
        Returns:
            RPN顺序的Token列表
        Raises:
            CalculatorError
        """
        chars = list(expression)
        output = []
        operations = []  # 操作符栈，包含 Operator 和 '(' 标记
        i = 0

        while i < len(chars):
            c = chars[i]

            if c.isspace():
                i += 1
                continue

            if c == '-' and ShuntingYardConverter._is_unary_minus(chars, i):
                token, i = ShuntingYardConverter._parse_number(chars, i + 1, is_negative=True)
                output.append(token)
                continue

            if _is_digit(c) or c == DECIMAL_POINT:
                token, i = ShuntingYardConverter._parse_number(chars, i)
                output.append(token)
                continue

            if c in OPERATOR_DEFINITIONS:
                incoming = OPERATOR_DEFINITIONS[c]
                # 弹出优先级 >= 当前操作符的栈顶元素（左结合）
                while operations and operations[-1] != LEFT_PAREN \
                        and operations[-1].precedence >= incoming.precedence:
                    output.append(Token.operation(operations.pop()))
                operations.append(incoming)
            elif c == LEFT_PAREN:
                operations.append(LEFT_PAREN)
            elif c == RIGHT_PAREN:
                while True:
                    if not operations:
                        logger.debug(f"Unmatched ')' at position {i}")
                        raise CalculatorError(ErrorKind.MISMATCHED_PARANTHESES, position=i)
                    top = operations.pop()
                    if top == LEFT_PAREN:
                        break
                    output.append(Token.operation(top))
            else:
                logger.debug(f"Unsupported character {c!r} at position {i}")
                raise CalculatorError(ErrorKind.UNSUPPORTED_TOKEN, position=i)

            i += 1

        while operations:
            top = operations.pop()
            if top == LEFT_PAREN:
                logger.debug("Unclosed '(' left on operator stack")
                raise CalculatorError(ErrorKind.MISMATCHED_PARANTHESES)
            output.append(Token.operation(top))

        logger.debug(f"RPN expression: {RPNValidator.format_rpn(output)}")
        return output
