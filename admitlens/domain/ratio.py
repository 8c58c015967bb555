"""
复录比估算引擎
基于近三年历史数据，按时间衰减权重计算加权复录比。
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from loguru import logger

from admitlens.schemas.historical import YearlyData
from admitlens.schemas.analysis import SkipReason, YearContribution


class RatioEstimator:
    """
    加权复录比估算

    对每一年独立计算复录比:
    1. 当年录取考生中的最低总分作为预估复试线
    2. 统计总分 >= 复试线的全部考生 (复试池人数)
    3. 复录比 = 复试池人数 / 实际录取人数

    复录比 < 1.0 的年份视为噪声直接排除 (不做修正)，
    最终结果按实际使用的权重重新归一化。
    """

    # 位置权重: 最近一年 60%, 前一年 25%, 大前年 15%
    WEIGHTS = (0.60, 0.25, 0.15)
    MIN_PLAUSIBLE_RATIO = 1.0
    # 没有任何有效年份时返回的保守默认值
    FALLBACK_RATIO = "1.20"

    def estimate(self, yearly_data: Sequence[YearlyData]) -> str:
        """
        加权复录比

        Args:
            yearly_data: 多年数据，应按年份降序排列

        Returns:
            两位小数的复录比字符串，例如 "1.35"
        """
        weighted_ratio_sum = 0.0
        total_weight_used = 0.0

        for contribution in self.breakdown(yearly_data):
            if not contribution.included:
                continue
            weighted_ratio_sum += contribution.single_year_ratio * contribution.weight
            total_weight_used += contribution.weight

        if total_weight_used == 0:
            logger.debug("No usable year, falling back to default ratio")
            return self.FALLBACK_RATIO

        return _two_decimals(weighted_ratio_sum / total_weight_used)

    def breakdown(self, yearly_data: Sequence[YearlyData]) -> list[YearContribution]:
        """最近三年每一年的计算明细 (包括被排除的年份)"""
        recent = self._ordered(yearly_data)[:len(self.WEIGHTS)]
        return [
            self._evaluate_year(year_data, weight)
            for year_data, weight in zip(recent, self.WEIGHTS)
        ]

    def _ordered(self, yearly_data: Sequence[YearlyData]) -> list[YearlyData]:
        """按年份降序重排 (输入顺序错误时记录警告)"""
        data = list(yearly_data)
        ordered = sorted(data, key=lambda y: y.year, reverse=True)
        if ordered != data:
            logger.warning(
                f"Yearly data not in descending order: {[y.year for y in data]}"
            )
        return ordered

    def _evaluate_year(self, year_data: YearlyData, weight: float) -> YearContribution:
        admitted = year_data.admitted_cases

        if not admitted:
            return self._skipped(year_data, weight, SkipReason.NO_ADMITTED_CASES)
        if year_data.actual_admissions == 0:
            return self._skipped(year_data, weight, SkipReason.ZERO_ACTUAL_ADMISSIONS)

        cutoff = min(c.total for c in admitted)
        pool_count = sum(1 for c in year_data.cases if c.total >= cutoff)
        ratio = pool_count / year_data.actual_admissions

        if math.isnan(ratio) or ratio < self.MIN_PLAUSIBLE_RATIO:
            logger.debug(f"{year_data.year}: ratio {ratio:.3f} discarded")
            return YearContribution(
                year=year_data.year,
                weight=weight,
                included=False,
                admission_cutoff=cutoff,
                re_exam_pool_count=pool_count,
                single_year_ratio=ratio,
                skip_reason=SkipReason.IMPLAUSIBLE_RATIO,
            )

        return YearContribution(
            year=year_data.year,
            weight=weight,
            included=True,
            admission_cutoff=cutoff,
            re_exam_pool_count=pool_count,
            single_year_ratio=ratio,
        )

    @staticmethod
    def _skipped(
        year_data: YearlyData, weight: float, reason: SkipReason
    ) -> YearContribution:
        return YearContribution(
            year=year_data.year,
            weight=weight,
            included=False,
            skip_reason=reason,
        )


def _two_decimals(value: float) -> str:
    """两位小数，恰好位于中间时向上舍入 (1.125 -> "1.13")"""
    return str(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def expected_re_exam_count(planned_admissions: int, ratio: str) -> int:
    """预计进入复试人数，四舍五入 (half up)"""
    value = Decimal(planned_admissions) * Decimal(ratio)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
