"""utils/formatting.py"""
import math

import numpy as np


def format_result(value):
    """
    把求值结果渲染为字符串

    整数值不带小数部分（14.0 -> "14"），其他有限值用最短可还原的定点表示，
    不使用科学计数法；inf/-inf/NaN 单独处理
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return np.format_float_positional(value, unique=True, trim='-')


def format_error(error):
    return f"Error: {error}"
