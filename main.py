"""主程序入口 - 单个表达式或批量文件的记法转换"""
import argparse
import logging
import sys

from config.config import *
from converter import ConversionKind, convert, load_expressions, convert_frame, save_results
from utils.metrics import summarize_batch

logger = logging.getLogger(__name__)


def run_single(kind, expression):
    """转换单个表达式；成功返回0，失败返回1"""
    result = convert(kind, expression)
    if not result.ok:
        logger.error(f"{result.error.kind.value}: {result.error}")
        return 1
    if result.value:
        print(result.value)
    else:
        logger.info("Empty input, nothing to convert")
    return 0


def run_batch(args):
    logger.info("=== Batch conversion ===")
    dataset = load_expressions(args.input_path, args.column)
    converted = convert_frame(dataset, kind=args.kind, column=args.column)

    summary = summarize_batch(converted, column=args.column)
    logger.info(f"Total expressions: {summary['total']}")
    logger.info(f"Success rate: {summary['success_rate'] * 100:.2f}%")
    for kind, count in summary['error_kinds'].items():
        logger.info(f"  {kind}: {count}")
    logger.info(f"Output tokens: mean={summary['token_count']['mean']:.2f}, "
                f"max={summary['token_count']['max']}")
    logger.info(f"Deepest input nesting: {summary['max_input_depth']}")

    if args.save_results:
        save_results(converted, args.output_path)
    else:
        for _, row in converted.iterrows():
            if isinstance(row[BATCH_CONFIG["error_column"]], str):
                print(f"{row[args.column]}\t! {row[BATCH_CONFIG['message_column']]}")
            else:
                print(f"{row[args.column]}\t{row[BATCH_CONFIG['result_column']]}")
    return 0


def main(args):
    validate_config()
    ConversionKind.parse(args.kind)

    if args.expression is not None:
        return run_single(args.kind, args.expression)
    if args.input_path:
        return run_batch(args)

    logger.error("Either --expression or --input_path is required")
    return 2


def build_parser():
    parser = argparse.ArgumentParser(description="Infix / Prefix / Postfix expression converter")

    parser.add_argument(
        "--kind",
        type=str,
        default=CONVERTER_CONFIG["default_kind"],
        choices=[kind.value for kind in ConversionKind],
        help="Conversion to perform (default: infix-to-postfix)"
    )
    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Single expression to convert"
    )
    parser.add_argument(
        "--input_path",
        type=str,
        default=None,
        help="Path to a CSV or text file with one expression per line"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=BATCH_CONFIG["expression_column"],
        help="Name of the expression column in CSV input"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save the converted expressions to a CSV file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=BATCH_CONFIG["default_output_path"],
        help="Path to save the converted expressions"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: INFO)"
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main(args))
