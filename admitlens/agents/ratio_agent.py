"""
Ratio Agent
计算专业的加权复录比。
"""

from .base import BaseAgent
from admitlens.schemas.historical import MajorDataset
from admitlens.schemas.analysis import RatioReport
from admitlens.domain.ratio import RatioEstimator


class RatioAgent(BaseAgent[MajorDataset, RatioReport]):
    """
    复录比 Agent

    使用规则型 RatioEstimator，不调用 LLM。
    """

    name = "RatioAgent"
    input_type = MajorDataset

    def __init__(self):
        super().__init__()
        self.estimator = RatioEstimator()

    def describe(self, input_data: MajorDataset) -> str:
        return f"major={input_data.name}, years={len(input_data.yearly_data)}"

    def _process(self, input_data: MajorDataset) -> RatioReport:
        """复录比计算"""
        report = RatioReport(
            major=input_data.name,
            ratio=self.estimator.estimate(input_data.yearly_data),
            contributions=self.estimator.breakdown(input_data.yearly_data),
        )
        used = sum(1 for c in report.contributions if c.included)
        self.logger.debug(f"{input_data.name}: ratio {report.ratio} ({used} years used)")
        return report
