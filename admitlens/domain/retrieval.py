"""
相似案例检索
按总分差值从历史案例中找出与目标总分最接近的 N 个案例。
"""

import math
import re
from typing import Optional, Sequence, Union

from loguru import logger

from admitlens.schemas.historical import HistoricalCase, ScoredCase

# 与 parseInt 相同的宽松解析: 取开头的整数部分，其余忽略 ("390分" -> 390)
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_target_score(
    target_score: Union[int, float, str, None],
) -> Optional[Union[int, float]]:
    """
    目标总分解析

    Returns:
        整数总分，无法解析时返回 None。
        位数超出整数转换上限时返回带符号的无穷大 (所有案例差值相同)。
    """
    if isinstance(target_score, bool) or target_score is None:
        return None
    if isinstance(target_score, int):
        return target_score
    if isinstance(target_score, float):
        if math.isnan(target_score) or math.isinf(target_score):
            return None
        return int(target_score)
    if isinstance(target_score, str):
        match = _LEADING_INT.match(target_score)
        if not match:
            return None
        digits = match.group(1)
        try:
            return int(digits)
        except ValueError:
            logger.debug(f"Target score too long ({len(digits)} chars)")
            return -math.inf if digits.startswith("-") else math.inf
    return None


class CaseRetriever:
    """
    相似案例检索器

    差值相同的案例保持原有相对顺序 (稳定排序)。
    任何输入都不会抛出异常: 无法解析的目标分数、空案例池、
    count <= 0 均返回空列表。
    """

    DEFAULT_COUNT = 5

    def find_similar(
        self,
        target_score: Union[int, float, str, None],
        cases: Sequence[HistoricalCase],
        count: int = DEFAULT_COUNT,
    ) -> list[HistoricalCase]:
        """
        最相似的 N 个历史案例

        Args:
            target_score: 目标总分 (可以是文本)
            cases: 检索范围内的历史案例
            count: 返回数量

        Returns:
            按差值升序排列的案例，最多 count 个
        """
        target = parse_target_score(target_score)
        if target is None:
            logger.debug(f"Unparseable target score: {target_score!r}")
            return []
        if count <= 0:
            return []

        ranked = sorted(cases, key=lambda c: abs(c.total - target))
        return ranked[:count]

    def find_scored(
        self,
        target_score: Union[int, float, str, None],
        cases: Sequence[HistoricalCase],
        count: int = DEFAULT_COUNT,
    ) -> list[ScoredCase]:
        """find_similar 的结果附带差值 (用于展示)"""
        target = parse_target_score(target_score)
        if target is None:
            return []

        return [
            ScoredCase(
                **case.model_dump(exclude={"difference"}),
                difference=_difference(case, target),
            )
            for case in self.find_similar(target_score, cases, count)
        ]


def _difference(case: HistoricalCase, target: Union[int, float]) -> Optional[int]:
    # 只有超长数字串会解析为无穷大
    if isinstance(target, float):
        return None
    return abs(case.total - target)
