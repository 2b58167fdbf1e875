"""主程序入口 - 命令行求值、交互控制台和批量文件求值"""
import argparse
import logging
import sys

from config.config import *
from core import EvaluationError, solve
from batch import ExpressionEvaluator
from data.data_loader import load_expressions, save_results
from utils.formatting import format_result, format_error

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def run_expression(expr, out=None, err=None):
    """求值单个表达式并打印，返回进程退出码"""
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        result = solve(expr)
    except EvaluationError as e:
        print(format_error(e), file=err)
        return 1
    print(format_result(result), file=out)
    return 0


def run_console(read_line=input, out=None):
    """
    交互式读取-求值-打印循环

    Args:
        read_line: 读取一行输入的函数，接收提示符参数
        out: 输出流
    """
    out = out or sys.stdout
    exit_commands = CONSOLE_CONFIG['exit_commands']

    while True:
        try:
            line = read_line(CONSOLE_CONFIG['prompt'])
        except (EOFError, KeyboardInterrupt):
            print(file=out)
            break

        line = line.strip()
        if line in exit_commands:
            break
        if not line:
            continue

        try:
            print(format_result(solve(line)), file=out)
        except EvaluationError as e:
            print(format_error(e), file=out)

    return 0


def run_batch(args, out=None):
    """从文件批量求值"""
    out = out or sys.stdout

    expressions = load_expressions(args.input_path, args.column)
    evaluator = ExpressionEvaluator()
    results = evaluator.evaluate_many(expressions)

    info = evaluator.cache_info()
    logger.info(f"Evaluated {len(results)} expressions "
                f"(cache hits: {info['hits']}, misses: {info['misses']})")

    if args.output_path:
        save_results(expressions, results, args.output_path)
    else:
        for expr, result in zip(expressions, results):
            print(f"{expr} = {format_result(result)}", file=out)

    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        description="Evaluate arithmetic expressions (+ - * / % ^ and parentheses)"
    )

    parser.add_argument(
        "expr",
        nargs="?",
        default=None,
        help="The expression to be evaluated; starts an interactive console when omitted"
    )
    parser.add_argument(
        "--input_path",
        type=str,
        default=None,
        help="Evaluate every expression in a text file (one per line) or CSV file"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=BATCH_CONFIG['expression_column'],
        help="Name of the expression column when --input_path is a CSV file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save batch results as CSV (printed to stdout when omitted)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    if args.input_path:
        if args.expr is not None:
            logger.warning("Both an expression and --input_path were given; ignoring the expression")
        return run_batch(args)

    if args.expr is not None:
        return run_expression(args.expr)

    return run_console()


def cli(argv=None):
    args = build_parser().parse_args(argv)
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
