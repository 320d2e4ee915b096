"""转换模块 - 门面操作和批量转换"""
from .facade import (
    ConversionKind, ConversionResult, convert,
    infix_to_postfix, infix_to_prefix, prefix_to_postfix,
    postfix_to_prefix, prefix_to_infix, postfix_to_infix
)
from .batch import load_expressions, convert_frame, save_results

__all__ = [
    'ConversionKind', 'ConversionResult', 'convert',
    'infix_to_postfix', 'infix_to_prefix', 'prefix_to_postfix',
    'postfix_to_prefix', 'prefix_to_infix', 'postfix_to_infix',
    'load_expressions', 'convert_frame', 'save_results'
]
