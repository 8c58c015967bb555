"""
AdmitLens API 路由
"""

from fastapi import APIRouter, Depends, HTTPException

from admitlens.schemas.analysis import RatioReport
from admitlens.schemas.historical import ScoredCase
from admitlens.schemas.prediction import (
    PredictionRequest,
    PredictionReport,
    SimilarCasesRequest,
)
from admitlens.data_sources import HistoricalDataRepository, MajorNotFoundError, get_repository
from admitlens.agents import RatioAgent, RetrievalAgent, RetrievalInput
from admitlens.llm import InferenceClient, InferenceError, get_inference_client
from admitlens.pipeline import PredictionOrchestrator

router = APIRouter()


def _get_dataset(repository: HistoricalDataRepository, major: str):
    try:
        return repository.get(major)
    except MajorNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/majors")
async def list_majors(
    repository: HistoricalDataRepository = Depends(get_repository),
):
    """专业列表 (含最新年份计划招生人数与加权复录比)"""
    agent = RatioAgent()
    majors = []
    for name in repository.list_majors():
        dataset = repository.get(name)
        majors.append({
            "name": name,
            "latest_year": dataset.latest.year,
            "planned_admissions": dataset.latest.planned_admissions,
            "re_exam_ratio": agent.run(dataset).ratio,
        })
    return {"majors": majors}


@router.get("/majors/{major}/ratio", response_model=RatioReport)
async def get_ratio(
    major: str,
    repository: HistoricalDataRepository = Depends(get_repository),
) -> RatioReport:
    """加权复录比及逐年明细"""
    dataset = _get_dataset(repository, major)
    return RatioAgent().run(dataset)


@router.post("/similar-cases", response_model=list[ScoredCase])
async def find_similar_cases(
    request: SimilarCasesRequest,
    repository: HistoricalDataRepository = Depends(get_repository),
) -> list[ScoredCase]:
    """
    相似案例检索

    目标总分无法解析时返回空列表。
    """
    dataset = _get_dataset(repository, request.major)
    return RetrievalAgent().run(RetrievalInput(
        target_score=request.target_score,
        cases=dataset.all_cases,
        count=request.count,
    ))


@router.post("/predict", response_model=PredictionReport)
async def predict(
    request: PredictionRequest,
    repository: HistoricalDataRepository = Depends(get_repository),
    client: InferenceClient = Depends(get_inference_client),
) -> PredictionReport:
    """
    录取可能性预测

    - 相似案例检索 (所有年份)
    - 近三年加权复录比
    - 外部推理服务生成分析报告
    """
    _get_dataset(repository, request.major)

    try:
        orchestrator = PredictionOrchestrator(client=client, repository=repository)
        return orchestrator.run(request)
    except InferenceError as e:
        raise HTTPException(status_code=502, detail=e.message)


@router.get("/schema/prediction-request")
async def get_prediction_request_schema():
    """预测请求 schema"""
    return PredictionRequest.model_json_schema()


@router.get("/schema/prediction-report")
async def get_prediction_report_schema():
    """预测结果 schema"""
    return PredictionReport.model_json_schema()
