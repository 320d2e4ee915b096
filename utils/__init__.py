"""工具模块"""
from .metrics import success_rate, error_kind_counts, token_count_stats, max_nesting_depth, summarize_batch

__all__ = ['success_rate', 'error_kind_counts', 'token_count_stats', 'max_nesting_depth', 'summarize_batch']
