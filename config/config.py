"""配置文件"""
import numpy as np

# 求值器参数
EVALUATOR_CONFIG = {
    "allow_partial": False,  # 结束时栈中多于1个元素是否直接返回栈顶
    "dtype": "float32",      # 数值类型，默认单精度
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 命令行输出
CLI_CONFIG = {
    "result_prefix": "Result: ",
    "rpn_prefix": "RPN: ",
    "exit_ok": 0,
    "exit_error": 1,
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from core.token_system import Operator, OPERATOR_DEFINITIONS

    assert np.issubdtype(np.dtype(EVALUATOR_CONFIG["dtype"]), np.floating), "dtype必须是浮点类型"
    assert set(OPERATOR_DEFINITIONS.values()) == set(Operator), "优先级表必须覆盖全部操作符"
    assert CLI_CONFIG["exit_ok"] != CLI_CONFIG["exit_error"], "成功/失败退出码不能相同"
    return True
