"""主程序入口 - 对命令行或文件中的波兰表达式求值"""
import argparse
import logging
import math
import sys

import numpy as np

from polish_notation.config import LOGGING_CONFIG, validate_config
from polish_notation import evaluate, results_to_frame, save_results

# 设置日志
logging.basicConfig(
    level=LOGGING_CONFIG["level"],
    format=LOGGING_CONFIG["format"]
)
logger = logging.getLogger(__name__)


def format_value(value):
    """定点表示（不用科学计数法），inf/-inf/NaN 单独处理"""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # 不使用科学计数法，去掉多余的0和小数点
    return np.format_float_positional(value, trim='-')


def load_expressions(file_path):
    """每行一个表达式，跳过空行"""
    with open(file_path, encoding="utf-8") as fh:
        return [line.rstrip("\r\n") for line in fh if line.strip("\r\n")]


def main(args):
    if args.debug:
        logging.getLogger().setLevel(LOGGING_CONFIG["debug_level"])
    validate_config()

    expressions = list(args.expressions)
    if args.file:
        try:
            expressions.extend(load_expressions(args.file))
        except OSError as exc:
            logger.error(f"Error reading '{args.file}': {exc}")
            return 1

    if not expressions:
        logger.error("No expression given")
        return 2

    results = [evaluate(expression) for expression in expressions]
    all_ok = True
    for result in results:
        expression = result.expression
        if result.ok:
            print(f"{expression} = {format_value(result.value)}")
        else:
            all_ok = False
            print(f"{expression}: {result.error}", file=sys.stderr)

    if args.output_path:
        save_results(results_to_frame(results), args.output_path)

    return 0 if all_ok else 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Polish Notation Calculator")
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions in prefix notation, e.g. \"+ 5 2\""
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Read expressions from a file, one per line"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Save the results to a CSV file"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show every token while evaluating"
    )
    args = parser.parse_args()
    sys.exit(main(args))
