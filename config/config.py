"""配置文件"""
import copy

# 表达式构造参数
EXPRESSION_CONFIG = {
    "variable_sigil": "$",          # 变量前缀: $0, $close
    "default_operand_type": "float64",
    "default_evaluator": "float",    # float / int
    # 未指定操作数类型时，按求值器家族选择默认值
    "family_operand_types": {"float": "float64", "int": "int64"},
    "token_separator": " ",          # 渲染时Token之间的分隔符
}

# 公式求值器参数
FORMULA_CONFIG = {
    "cache_size": 1000,              # 已解析表达式的 LRU 缓存大小
    "nan_on_error": True,            # DataFrame 逐行求值时，出错行填 NaN
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

SUPPORTED_OPERAND_TYPES = ("int8", "int16", "int32", "int64", "float32", "float64")
SUPPORTED_EVALUATORS = ("float", "int")


def get_config():
    """返回所有配置的深拷贝，调用方修改不会影响全局"""
    return {
        "expression": copy.deepcopy(EXPRESSION_CONFIG),
        "formula": copy.deepcopy(FORMULA_CONFIG),
        "logging": copy.deepcopy(LOGGING_CONFIG),
    }


# 验证配置
def validate_config():
    """验证配置的合理性"""
    sigil = EXPRESSION_CONFIG["variable_sigil"]
    assert sigil and not sigil.isalnum() and not sigil.isspace(), "变量前缀必须是非字母数字的符号"
    assert sigil not in "+-.", "变量前缀不能与数值字面量冲突"
    assert EXPRESSION_CONFIG["default_operand_type"] in SUPPORTED_OPERAND_TYPES
    assert EXPRESSION_CONFIG["default_evaluator"] in SUPPORTED_EVALUATORS
    assert FORMULA_CONFIG["cache_size"] > 0, "缓存大小必须为正"
    # 整数求值器只支持整数操作数
    if EXPRESSION_CONFIG["default_evaluator"] == "int":
        assert EXPRESSION_CONFIG["default_operand_type"].startswith("int")
    for family, operand_type in EXPRESSION_CONFIG["family_operand_types"].items():
        assert family in SUPPORTED_EVALUATORS and operand_type in SUPPORTED_OPERAND_TYPES
    return True
