"""
Retrieval Agent
从历史案例中检索与目标总分最接近的案例。
"""

from typing import Sequence, Union

from .base import BaseAgent
from admitlens.schemas.historical import HistoricalCase, ScoredCase
from admitlens.domain.retrieval import CaseRetriever


class RetrievalInput:
    """Retrieval Agent 输入"""
    def __init__(
        self,
        target_score: Union[int, float, str],
        cases: Sequence[HistoricalCase],
        count: int = CaseRetriever.DEFAULT_COUNT,
    ):
        self.target_score = target_score
        self.cases = cases
        self.count = count


class RetrievalAgent(BaseAgent[RetrievalInput, list[ScoredCase]]):
    """
    相似案例检索 Agent

    使用规则型 CaseRetriever，不调用 LLM。
    """

    name = "RetrievalAgent"
    input_type = RetrievalInput

    def __init__(self):
        super().__init__()
        self.retriever = CaseRetriever()

    def describe(self, input_data: RetrievalInput) -> str:
        target = str(input_data.target_score)
        if len(target) > 20:
            target = target[:20] + "..."
        return f"target={target}, pool={len(input_data.cases)}, count={input_data.count}"

    def _process(self, input_data: RetrievalInput) -> list[ScoredCase]:
        """检索执行"""
        cases = self.retriever.find_scored(
            target_score=input_data.target_score,
            cases=input_data.cases,
            count=input_data.count,
        )
        self.logger.debug(f"Retrieved {len(cases)}/{len(input_data.cases)} cases")
        return cases
