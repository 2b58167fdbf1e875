import math
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core.errors import StackUnderflowError
from core.operators import apply_operator, compute
from core.token_system import Operator


class TestCompute(unittest.TestCase):
    def test_basic_arithmetic(self):
        self.assertEqual(compute(Operator.ADD, 2.0, 3.0), 5.0)
        self.assertEqual(compute(Operator.SUB, 2.0, 3.0), -1.0)
        self.assertEqual(compute(Operator.MUL, 2.0, 3.0), 6.0)
        self.assertEqual(compute(Operator.DIV, 3.0, 2.0), 1.5)
        self.assertEqual(compute(Operator.EXP, 2.0, 10.0), 1024.0)

    def test_returns_python_float(self):
        self.assertIs(type(compute(Operator.MUL, 2.0, 3.0)), float)

    def test_division_by_zero(self):
        self.assertEqual(compute(Operator.DIV, 1.0, 0.0), math.inf)
        self.assertEqual(compute(Operator.DIV, -1.0, 0.0), -math.inf)
        self.assertTrue(math.isnan(compute(Operator.DIV, 0.0, 0.0)))

    def test_modulo_takes_sign_of_dividend(self):
        self.assertEqual(compute(Operator.MOD, 7.0, 3.0), 1.0)
        self.assertEqual(compute(Operator.MOD, -7.0, 3.0), -1.0)
        self.assertEqual(compute(Operator.MOD, 5.5, 2.0), 1.5)
        self.assertTrue(math.isnan(compute(Operator.MOD, 1.0, 0.0)))

    def test_power_edge_cases(self):
        self.assertTrue(math.isnan(compute(Operator.EXP, -8.0, 1.0 / 3.0)))
        self.assertEqual(compute(Operator.EXP, 10.0, 400.0), math.inf)
        self.assertEqual(compute(Operator.EXP, 2.0, -1.0), 0.5)

    def test_parenthesis_is_not_applicable(self):
        with self.assertRaises(ValueError):
            compute(Operator.LPAR, 1.0, 2.0)


class TestApplyOperator(unittest.TestCase):
    def test_pops_two_pushes_one(self):
        stack = [10.0, 1.0, 2.0]
        result = apply_operator(stack, Operator.SUB)
        self.assertIs(result, stack)
        self.assertEqual(stack, [10.0, -1.0])

    def test_underflow(self):
        for stack in ([], [1.0]):
            with self.assertRaises(StackUnderflowError) as ctx:
                apply_operator(stack, Operator.MUL)
            self.assertEqual(ctx.exception.operator, Operator.MUL)


if __name__ == "__main__":
    unittest.main()
