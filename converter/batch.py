"""批量转换模块 - 读取表达式文件并逐行转换"""
import logging

import numpy as np
import pandas as pd

from config.config import BATCH_CONFIG, CONVERTER_CONFIG
from converter.facade import ConversionKind, convert

logger = logging.getLogger(__name__)


def load_expressions(file_path, column=None):
    """
    加载表达式数据集。

    Parameters:
    - file_path: CSV文件（需包含表达式列）或纯文本文件（每行一个表达式）
    - column: 表达式列名称, 默认为 BATCH_CONFIG['expression_column']

    Returns:
    - DataFrame，至少包含表达式列
    """
    column = column or BATCH_CONFIG["expression_column"]
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        dataset = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if column not in dataset.columns:
            raise ValueError(f"Expression column '{column}' not found in dataset.")
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        # 丢弃空行
        dataset = pd.DataFrame({column: [line for line in lines if line]})

    logger.info(f"Loaded {len(dataset)} expressions")
    return dataset


def _row_kinds(dataset, default_kind):
    """逐行的转换类型；kind列为空的行使用默认类型"""
    kind_column = BATCH_CONFIG["kind_column"]
    default_kind = ConversionKind.parse(default_kind)
    if kind_column not in dataset.columns:
        return [default_kind] * len(dataset)

    kinds = []
    for value in dataset[kind_column]:
        if isinstance(value, str) and value.strip():
            kinds.append(ConversionKind.parse(value))
        else:
            kinds.append(default_kind)
    return kinds


def convert_frame(dataset, kind=None, column=None):
    """
    对数据集中的每个表达式执行转换

    Parameters:
    - dataset: 包含表达式列的DataFrame
    - kind: 默认转换类型，可被逐行的kind列覆盖
    - column: 表达式列名称

    Returns:
    - converted: 原数据集副本，附加结果列、错误类型列和错误信息列
    """
    column = column or BATCH_CONFIG["expression_column"]
    if column not in dataset.columns:
        raise ValueError(f"Expression column '{column}' not found in dataset.")

    # 先解析全部类型，未知类型直接报错
    kinds = _row_kinds(dataset, kind or CONVERTER_CONFIG["default_kind"])

    results, errors, messages = [], [], []
    for row_kind, text in zip(kinds, dataset[column]):
        # NaN等非字符串单元格按空白输入处理
        if not isinstance(text, str):
            text = ""
        outcome = convert(row_kind, text)
        if outcome.ok:
            results.append(outcome.value)
            errors.append(np.nan)
            messages.append(np.nan)
        else:
            logger.warning(f"Failed to convert '{text}' ({row_kind.value}): {outcome.error}")
            results.append(np.nan)
            errors.append(outcome.error.kind.value)
            messages.append(str(outcome.error))

    converted = dataset.copy()
    converted[BATCH_CONFIG["result_column"]] = results
    converted[BATCH_CONFIG["error_column"]] = errors
    converted[BATCH_CONFIG["message_column"]] = messages

    failed = converted[BATCH_CONFIG["error_column"]].notna().sum()
    logger.info(f"Converted {len(converted) - failed}/{len(converted)} expressions")
    return converted


def save_results(converted, output_path=None):
    output_path = output_path or BATCH_CONFIG["default_output_path"]
    logger.info(f"Saving converted expressions to {output_path}")
    converted.to_csv(output_path, index=False)
    return output_path
