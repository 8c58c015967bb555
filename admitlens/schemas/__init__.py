"""
AdmitLens 数据模型包
历史数据、分析结果与推理请求/结果的 schema 定义。
"""

from .historical import (
    AdmissionResult,
    HistoricalCase,
    ScoredCase,
    YearlyData,
    MajorDataset,
)
from .analysis import SkipReason, YearContribution, RatioReport
from .prediction import (
    ChanceLevel,
    SubjectScores,
    SubjectAnalysis,
    PredictionResult,
    InferenceRequest,
    PredictionRequest,
    SimilarCasesRequest,
    PredictionReport,
)

__all__ = [
    "AdmissionResult",
    "HistoricalCase",
    "ScoredCase",
    "YearlyData",
    "MajorDataset",
    "SkipReason",
    "YearContribution",
    "RatioReport",
    "ChanceLevel",
    "SubjectScores",
    "SubjectAnalysis",
    "PredictionResult",
    "InferenceRequest",
    "PredictionRequest",
    "SimilarCasesRequest",
    "PredictionReport",
]
