"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 语法检查参数
VALIDATOR_CONFIG = {
    # 允许出现在表达式中的字符（小数点不在其中）
    "allowed_characters": "+-*/%0123456789 ",
    "operator_symbols": ["+", "-", "*", "/", "%"],
    "operator_arity": 2,  # 所有操作符都是二元的
}

# 日志参数
LOGGING_CONFIG = {
    "level": logging.INFO,
    "debug_level": logging.DEBUG,  # --debug 时显示每个token
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 批量求值参数
BATCH_CONFIG = {
    "columns": ["expression", "value", "error"],
    "csv_index": False,
}


def validate_config():
    """验证配置的合理性"""
    allowed = VALIDATOR_CONFIG["allowed_characters"]
    assert "." not in allowed, "小数点不允许出现在表达式中"
    assert " " in allowed, "空格用于分隔token"
    for symbol in VALIDATOR_CONFIG["operator_symbols"]:
        assert len(symbol) == 1, "只支持单字符操作符"
        assert symbol in allowed, f"操作符 {symbol} 必须是允许字符"
    assert VALIDATOR_CONFIG["operator_arity"] == 2, "波兰表达式只支持二元操作符"
    assert len(BATCH_CONFIG["columns"]) == 3
    logger.info("Configuration validated successfully!")
