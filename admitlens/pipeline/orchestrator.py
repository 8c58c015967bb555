"""
Pipeline Orchestrator
控制 Agent 的执行顺序并组装最终结果。
"""

from typing import Optional

from loguru import logger

from admitlens.config import settings
from admitlens.schemas.prediction import (
    InferenceRequest,
    PredictionReport,
    PredictionRequest,
)
from admitlens.data_sources.repository import HistoricalDataRepository, get_repository
from admitlens.domain.ratio import expected_re_exam_count
from admitlens.llm import InferenceClient
from admitlens.agents.retrieval_agent import RetrievalAgent, RetrievalInput
from admitlens.agents.ratio_agent import RatioAgent
from admitlens.agents.inference_agent import InferenceAgent


class PredictionOrchestrator:
    """
    预测流水线

    [Phase 1: 确定性计算] ← 不访问网络
    Retrieval (所有年份的案例) → Ratio (近三年加权)

    [Phase 2: 推理]
    组装 InferenceRequest → Inference → PredictionReport

    推理失败时 InferenceError 直接向上抛出，不返回部分结果。
    """

    def __init__(
        self,
        client: InferenceClient,
        repository: Optional[HistoricalDataRepository] = None,
        case_count: Optional[int] = None,
    ):
        self.repository = repository or get_repository()
        self.case_count = (
            settings.SIMILAR_CASE_COUNT if case_count is None else case_count
        )

        self.retrieval_agent = RetrievalAgent()
        self.ratio_agent = RatioAgent()
        self.inference_agent = InferenceAgent(client)

        self.logger = logger.bind(component="Pipeline")

    def build_request(self, request: PredictionRequest) -> InferenceRequest:
        """确定性计算部分: 检索 + 复录比 → 推理请求"""
        dataset = self.repository.get(request.major)

        self.logger.info("Step 1: Retrieving similar cases...")
        similar = self.retrieval_agent.run(RetrievalInput(
            target_score=request.target_score,
            cases=dataset.all_cases,
            count=self.case_count,
        ))

        self.logger.info("Step 2: Estimating re-exam ratio...")
        ratio_report = self.ratio_agent.run(dataset)

        # 最新一年的计划招生人数作为参考基准
        planned = dataset.latest.planned_admissions

        return InferenceRequest(
            major=request.major,
            scores=request.scores,
            target_score=str(request.target_score),
            re_exam_ratio=ratio_report.ratio,
            similar_cases=tuple(similar),
            planned_admissions=planned,
            expected_re_exam_count=expected_re_exam_count(planned, ratio_report.ratio),
        )

    def run(self, request: PredictionRequest) -> PredictionReport:
        """
        完整流水线执行
        """
        self.logger.info(f"Starting prediction pipeline: {request.major}")

        inference_request = self.build_request(request)

        self.logger.info("Step 3: Requesting inference...")
        result = self.inference_agent.run(inference_request)

        report = PredictionReport(
            major=inference_request.major,
            target_score=inference_request.target_score,
            re_exam_ratio=inference_request.re_exam_ratio,
            planned_admissions=inference_request.planned_admissions,
            expected_re_exam_count=inference_request.expected_re_exam_count,
            result=result,
            similar_cases=list(inference_request.similar_cases),
        )

        self.logger.info(
            f"Pipeline complete: re-exam {result.re_examination_chance}, "
            f"final {result.probability}"
        )
        return report
