"""utils/metrics.py"""
import numpy as np
import pandas as pd

from config.config import BATCH_CONFIG, CONVERTER_CONFIG


def success_rate(errors):
    """错误列中为空的比例；空数据返回0"""
    arr = pd.Series(errors, dtype=object)
    if len(arr) == 0:
        return 0.0
    return float(np.mean(arr.isna().values))


def error_kind_counts(errors):
    """各错误类型出现次数，按次数降序"""
    arr = pd.Series(errors, dtype=object).dropna()
    return {str(kind): int(count) for kind, count in arr.value_counts().items()}


def token_count_stats(outputs):
    """成功输出（前缀/后缀）的记号数量统计；空字符串结果不计入"""
    separator = CONVERTER_CONFIG["token_separator"]
    counts = np.array(
        [len(text.split(separator)) for text in pd.Series(outputs, dtype=object).dropna() if text],
        dtype=float
    )
    if counts.size == 0:
        return {'mean': 0.0, 'max': 0}
    return {'mean': float(np.mean(counts)), 'max': int(np.max(counts))}


def max_nesting_depth(text):
    """中缀字符串的最大括号嵌套深度（只计数，不校验配对）"""
    if not text:
        return 0
    steps = np.array([
        1 if char == CONVERTER_CONFIG["left_paren"] else -1
        for char in text
        if char in (CONVERTER_CONFIG["left_paren"], CONVERTER_CONFIG["right_paren"])
    ])
    if steps.size == 0:
        return 0
    return int(max(np.max(np.cumsum(steps)), 0))


def summarize_batch(converted, column=None):
    """
    汇总一次批量转换
    Args:
        column: 表达式列名称, 默认为 BATCH_CONFIG['expression_column']
    Returns:
        dict: total / success_rate / error_kinds / token_count / max_input_depth
    """
    column = column or BATCH_CONFIG["expression_column"]
    errors = converted[BATCH_CONFIG["error_column"]]
    outputs = converted[BATCH_CONFIG["result_column"]]
    expressions = converted[column] if column in converted.columns else pd.Series(dtype=object)

    depths = [max_nesting_depth(text) for text in expressions if isinstance(text, str)]
    return {
        'total': int(len(converted)),
        'success_rate': success_rate(errors),
        'error_kinds': error_kind_counts(errors),
        'token_count': token_count_stats(outputs),
        'max_input_depth': int(np.max(depths)) if depths else 0,
    }
