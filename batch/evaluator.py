import logging
from collections import OrderedDict
from typing import Dict, Iterable, Union

import numpy as np
import pandas as pd

from config.config import BATCH_CONFIG
from core import InfixEvaluator, EvaluationError, tokenize

logger = logging.getLogger(__name__)


class ExpressionEvaluator:

    def __init__(self, cache_size=None):
        self.infix_evaluator = InfixEvaluator
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = cache_size if cache_size is not None else BATCH_CONFIG['cache_size']
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def cache_info(self) -> Dict[str, int]:
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._result_cache),
        }

    def evaluate(self, expression: str) -> float:
        """
        Args:
            expression: 中缀表达式文本
        Returns:
            float结果，失败时返回NaN
        """
        if expression in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(expression)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {expression[:50]}")
            return self._result_cache[expression]

        self._cache_misses += 1

        try:
            result = self.infix_evaluator.evaluate(tokenize(expression))
        except EvaluationError as e:
            logger.error(f"Error evaluating expression '{expression[:50]}': {e}")
            return np.nan

        self._result_cache[expression] = result
        self._manage_cache()
        return result

    def evaluate_many(self, expressions: Union[pd.Series, Iterable[str]]) -> pd.Series:
        """
        批量求值，传入Series时保留其索引；失败的行为NaN
        """
        if not isinstance(expressions, pd.Series):
            expressions = pd.Series(list(expressions), dtype=object)

        results = [self.evaluate(str(expr)) for expr in expressions]
        series_result = pd.Series(results, index=expressions.index, dtype=np.float64,
                                  name=BATCH_CONFIG['result_column'])

        failed = int(series_result.isna().sum())
        if failed:
            logger.warning(f"{failed}/{len(series_result)} expressions produced NaN")
        return series_result
