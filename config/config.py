"""配置文件"""

# 转换器参数
CONVERTER_CONFIG = {
    # 操作符优先级表（数值越大结合越紧，全部左结合）
    "operator_precedence": {
        "+": 1,
        "-": 1,
        "*": 2,
        "/": 2,
    },
    "left_paren": "(",
    "right_paren": ")",
    "token_separator": " ",  # 前缀/后缀输出的分隔符
    "default_kind": "infix-to-postfix",
}

# 批量转换配置
BATCH_CONFIG = {
    "expression_column": "expression",
    "kind_column": "kind",  # 可选：逐行指定转换类型
    "result_column": "result",
    "error_column": "error",  # 错误类型（ErrorKind取值）
    "message_column": "error_message",
    "default_output_path": "converted_expressions.csv",
}

# 日志配置
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    precedence = CONVERTER_CONFIG["operator_precedence"]
    assert set(precedence) == {"+", "-", "*", "/"}, "只支持四个二元操作符"
    assert len(set(precedence.values())) == 2, "只有两个优先级"
    assert all(rank > 0 for rank in precedence.values()), "优先级0保留给括号"
    assert CONVERTER_CONFIG["token_separator"] == " ", "输出以单个空格分隔"
    assert CONVERTER_CONFIG["left_paren"] != CONVERTER_CONFIG["right_paren"]
    return True
