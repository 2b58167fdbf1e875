"""配置文件"""

# 分词参数
TOKENIZER_CONFIG = {
    # 只接受 digits(.digits)?，不接受科学计数法
    "number_pattern": r"[0-9]+(?:\.[0-9]+)?",
    "operator_symbols": "+-*/%^()",
}

# 求值参数
EVALUATOR_CONFIG = {
    "float_errors": "ignore",  # np.errstate：除零/溢出/无效运算按IEEE 754返回inf或nan
}

# 交互控制台
CONSOLE_CONFIG = {
    "prompt": "> ",
    "exit_commands": ("q", "exit"),
}

# 批量求值
BATCH_CONFIG = {
    "cache_size": 1000,
    "expression_column": "expression",
    "result_column": "result",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from core.token_system import OPERATOR_DEFINITIONS, Operator

    assert set(TOKENIZER_CONFIG["operator_symbols"]) == {op.value for op in Operator}, \
        "operator_symbols must match the Operator enum"
    assert OPERATOR_DEFINITIONS[Operator.ADD]["precedence"] == 2, "+/- precedence is 2"
    assert OPERATOR_DEFINITIONS[Operator.MUL]["precedence"] == 3, "*,/,% precedence is 3"
    assert OPERATOR_DEFINITIONS[Operator.EXP]["precedence"] == 4, "^ precedence is 4"
    assert not OPERATOR_DEFINITIONS[Operator.EXP]["left_associative"], "^ is right-associative"
    assert CONSOLE_CONFIG["exit_commands"], "at least one exit command is required"
    assert BATCH_CONFIG["cache_size"] > 0, "cache_size must be positive"
    assert EVALUATOR_CONFIG["float_errors"] in ("ignore", "warn", "raise", "call", "print", "log")
