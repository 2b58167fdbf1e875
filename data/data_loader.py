"""数据加载和结果保存模块"""
import logging

import pandas as pd

from config.config import BATCH_CONFIG
from utils.formatting import format_result

logger = logging.getLogger(__name__)


def load_expressions(file_path, column=None):
    """
    加载待求值的表达式

    Parameters:
    - file_path: 表达式文件路径。CSV文件按列读取，其他文件每行一个表达式
    - column: CSV中的表达式列名，默认为 BATCH_CONFIG['expression_column']

    Returns:
    - expressions (pd.Series，dtype=object)
    """
    column = column or BATCH_CONFIG['expression_column']
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        # keep_default_na=False：空字符串保留为空表达式，不转成NaN
        dataset = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if column not in dataset.columns:
            raise ValueError(f"Column '{column}' not found in {file_path}. "
                             f"Available columns: {list(dataset.columns)}")
        expressions = dataset[column]
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        # 去掉空行
        expressions = pd.Series([line for line in lines if line], dtype=object)

    expressions = expressions.rename(BATCH_CONFIG['expression_column'])
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def save_results(expressions, results, output_path):
    """
    保存表达式及其结果为CSV

    Parameters:
    - expressions: 表达式序列
    - results: 与expressions对齐的结果序列
    - output_path: 输出文件路径
    """
    expressions = pd.Series(expressions)
    results = pd.Series(results, index=expressions.index)

    table = pd.DataFrame({
        BATCH_CONFIG['expression_column']: expressions.values,
        BATCH_CONFIG['result_column']: [format_result(r) for r in results.values],
    })
    table.to_csv(output_path, index=False)
    logger.info(f"Saved {len(table)} results to {output_path}")
    return table
