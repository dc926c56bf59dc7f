"""主程序入口 - 计算单个算术表达式"""
import argparse
import logging
import sys
import numpy as np

from config.config import EVALUATOR_CONFIG, LOGGING_CONFIG, CLI_CONFIG
from core import Calculator, CalculatorError, RPNValidator
from core.token_system import to_number

logger = logging.getLogger(__name__)


def format_result(value):
    """按配置精度的最短表示，去掉多余的 .0"""
    return np.format_float_positional(to_number(value), trim='-')


def build_parser():
    parser = argparse.ArgumentParser(
        prog="rpn-calc",
        description="Evaluate an arithmetic expression (+ - * / and parentheses)",
        epilog="When combined with options, put -- before an expression that starts with '-'"
    )
    parser.add_argument(
        "expression",
        type=str,
        help="Expression to evaluate, e.g. \"(2+3)*4\""
    )
    parser.add_argument(
        "--show_rpn",
        action="store_true",
        help="Also print the expression in Reverse Polish Notation"
    )
    parser.add_argument(
        "--allow_partial",
        action="store_true",
        default=EVALUATOR_CONFIG["allow_partial"],
        help="Return the top of the stack when operands are left over instead of failing"
    )
    parser.add_argument(
        "--log_level",
        type=str.upper,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: %(default)s)"
    )
    return parser


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    # 单个参数一律视为表达式，"-3+4" 不能被当成选项
    if len(argv) == 1 and argv[0] not in ("-h", "--help"):
        argv = ["--", *argv]
    args = build_parser().parse_args(argv)

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )

    calculator = Calculator(args.expression, allow_partial=args.allow_partial)
    try:
        result = calculator.eval()
    except CalculatorError as e:
        logger.info(f"Evaluation failed: {e!r}")
        print(f"\n{e}\n", file=sys.stderr)
        return CLI_CONFIG["exit_error"]

    if args.show_rpn:
        print(f"{CLI_CONFIG['rpn_prefix']}{RPNValidator.format_rpn(calculator.tokens)}")
    print(f"{CLI_CONFIG['result_prefix']}{format_result(result)}")
    return CLI_CONFIG["exit_ok"]


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
