from __future__ import annotations

import sys
import unittest
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.errors import CalculatorError, ErrorKind
from core.operators import Operators
from core.rpn_evaluator import RPNEvaluator
from core.token_system import Operator, Token


def _rpn(*items):
    return [Token.number(x) if isinstance(x, (int, float)) else Token.operation(x) for x in items]


class EvaluateTests(unittest.TestCase):
    def assertFails(self, tokens, kind: ErrorKind, **kwargs) -> None:
        with self.assertRaises(CalculatorError) as ctx:
            RPNEvaluator.evaluate(tokens, **kwargs)
        self.assertEqual(ctx.exception.kind, kind)

    def test_basic_operations(self) -> None:
        self.assertEqual(RPNEvaluator.evaluate(_rpn(2, 3, '+')), 5.0)
        self.assertEqual(RPNEvaluator.evaluate(_rpn(2, 3, '-')), -1.0)
        self.assertEqual(RPNEvaluator.evaluate(_rpn(2, 3, '*')), 6.0)
        self.assertEqual(RPNEvaluator.evaluate(_rpn(3, 2, '/')), 1.5)

    def test_operand_order(self) -> None:
        # b 为后入栈的操作数
        self.assertEqual(RPNEvaluator.evaluate(_rpn(10, 2, '/', 5, '/')), 1.0)

    def test_result_is_float32(self) -> None:
        self.assertIsInstance(RPNEvaluator.evaluate(_rpn(1, 3, '/')), np.float32)

    def test_single_number(self) -> None:
        self.assertEqual(RPNEvaluator.evaluate(_rpn(7)), 7.0)

    def test_insufficient_operands(self) -> None:
        self.assertFails(_rpn(1, '+'), ErrorKind.INVALID_EXPRESSION)
        self.assertFails(_rpn('*'), ErrorKind.INVALID_EXPRESSION)

    def test_empty_sequence(self) -> None:
        self.assertFails([], ErrorKind.INVALID_EXPRESSION)
        self.assertFails([], ErrorKind.INVALID_EXPRESSION, allow_partial=True)

    def test_zero_division(self) -> None:
        self.assertFails(_rpn(5, 0, '/'), ErrorKind.ZERO_DIVISION)
        self.assertFails(_rpn(5, -0.0, '/'), ErrorKind.ZERO_DIVISION)

    def test_residual_stack_strict(self) -> None:
        self.assertFails(_rpn(1, 2), ErrorKind.INVALID_EXPRESSION)

    def test_residual_stack_partial_returns_top(self) -> None:
        self.assertEqual(RPNEvaluator.evaluate(_rpn(1, 2), allow_partial=True), 2.0)

    def test_overflow_is_not_checked(self) -> None:
        result = RPNEvaluator.evaluate(_rpn(3e38, 10, '*'))
        self.assertTrue(np.isinf(result))


class OperatorsTests(unittest.TestCase):
    def test_apply_dispatch(self) -> None:
        self.assertEqual(Operators.apply(Operator.SUB, 7, 2), 5.0)
        self.assertEqual(Operators.apply(Operator.DIV, 1, 4), 0.25)

    def test_single_precision(self) -> None:
        result = Operators.add(np.float32(0.1), np.float32(0.2))
        self.assertIsInstance(result, np.float32)
        self.assertAlmostEqual(float(result), 0.3, places=6)

    def test_div_by_zero_raises(self) -> None:
        with self.assertRaises(CalculatorError) as ctx:
            Operators.div(1, 0)
        self.assertEqual(ctx.exception.kind, ErrorKind.ZERO_DIVISION)


if __name__ == "__main__":
    unittest.main()
