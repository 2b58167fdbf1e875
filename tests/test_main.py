import contextlib
import io
import math
import os
import tempfile
import unittest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import main
from config.config import validate_config
from utils.formatting import format_error, format_result


def line_reader(lines):
    """模拟input()：读完后抛出EOFError"""
    iterator = iter(lines)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError

    return read_line, prompts


class TestFormatting(unittest.TestCase):
    def test_integral_values(self):
        self.assertEqual(format_result(14.0), "14")
        self.assertEqual(format_result(-3.0), "-3")
        self.assertEqual(format_result(1e20), "100000000000000000000")

    def test_fractional_values(self):
        self.assertEqual(format_result(0.5), "0.5")
        self.assertEqual(format_result(0.1 + 0.2), "0.30000000000000004")

    def test_special_values(self):
        self.assertEqual(format_result(math.inf), "inf")
        self.assertEqual(format_result(-math.inf), "-inf")
        self.assertEqual(format_result(math.nan), "NaN")

    def test_format_error(self):
        self.assertEqual(format_error(ValueError("boom")), "Error: boom")


class TestConfig(unittest.TestCase):
    def test_validate_config(self):
        validate_config()


class TestRunExpression(unittest.TestCase):
    def test_prints_result(self):
        out, err = io.StringIO(), io.StringIO()
        self.assertEqual(main.run_expression("2+3*4", out=out, err=err), 0)
        self.assertEqual(out.getvalue(), "14\n")
        self.assertEqual(err.getvalue(), "")

    def test_reports_error(self):
        out, err = io.StringIO(), io.StringIO()
        self.assertEqual(main.run_expression("(1", out=out, err=err), 1)
        self.assertEqual(out.getvalue(), "")
        self.assertTrue(err.getvalue().startswith("Error: Mismatched parentheses"))


class TestConsole(unittest.TestCase):
    def test_loop_until_exit_command(self):
        read_line, prompts = line_reader(["1+1", "1/0", "(", "", "q", "3"])
        out = io.StringIO()
        main.run_console(read_line=read_line, out=out)

        lines = out.getvalue().splitlines()
        self.assertEqual(lines[0], "2")
        self.assertEqual(lines[1], "inf")
        self.assertTrue(lines[2].startswith("Error: "))
        self.assertEqual(len(lines), 3)
        self.assertTrue(all(p == "> " for p in prompts))
        self.assertEqual(len(prompts), 5)

    def test_exit_keyword(self):
        read_line, _ = line_reader(["  exit  ", "1"])
        out = io.StringIO()
        main.run_console(read_line=read_line, out=out)
        self.assertEqual(out.getvalue(), "")

    def test_stops_on_eof(self):
        read_line, _ = line_reader(["2^3^2"])
        out = io.StringIO()
        self.assertEqual(main.run_console(read_line=read_line, out=out), 0)
        self.assertEqual(out.getvalue(), "512\n\n")


class TestMain(unittest.TestCase):
    def test_parser(self):
        args = main.build_parser().parse_args(["1+2"])
        self.assertEqual(args.expr, "1+2")
        self.assertIsNone(args.input_path)
        self.assertEqual(args.column, "expression")

    def test_main_with_expression(self):
        args = main.build_parser().parse_args(["(2+3)*4"])
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            code = main.main(args)
        self.assertEqual(code, 0)
        self.assertEqual(buffer.getvalue(), "20\n")

    def test_cli_exit_code_on_error(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main.cli(["1+2)"])
        self.assertEqual(ctx.exception.code, 1)

    def test_batch_mode(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            input_path = os.path.join(tmpdir, "exprs.txt")
            output_path = os.path.join(tmpdir, "out.csv")
            with open(input_path, 'w', encoding='utf-8') as f:
                f.write("10-2-3\n1 2\n")

            args = main.build_parser().parse_args(
                ["--input_path", input_path, "--output_path", output_path])
            self.assertEqual(main.main(args), 0)

            with open(output_path, encoding='utf-8') as f:
                content = f.read().splitlines()
            self.assertEqual(content, ["expression,result", "10-2-3,5", "1 2,NaN"])

    def test_batch_mode_prints(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            input_path = os.path.join(tmpdir, "exprs.txt")
            with open(input_path, 'w', encoding='utf-8') as f:
                f.write("2^10\n")

            args = main.build_parser().parse_args(["--input_path", input_path])
            out = io.StringIO()
            self.assertEqual(main.run_batch(args, out=out), 0)
            self.assertEqual(out.getvalue(), "2^10 = 1024\n")


if __name__ == "__main__":
    unittest.main()
