"""
预测相关模型
推理请求 / 推理结果 / API 输入输出。
"""

from datetime import datetime
from enum import Enum
from typing import Union
from pydantic import BaseModel, Field, ConfigDict

from .historical import HistoricalCase, ScoredCase


class ChanceLevel(str, Enum):
    """概率等级"""
    HIGH = "高"
    MEDIUM = "中"
    LOW = "低"


class SubjectScores(BaseModel):
    """考生四门科目成绩"""
    model_config = ConfigDict(frozen=True)

    politics: int = Field(ge=0, le=100, description="思想政治理论", examples=[75])
    english: int = Field(ge=0, le=100, description="外国语", examples=[70])
    math: int = Field(ge=0, le=150, description="业务课一 (数学)", examples=[125])
    professional: int = Field(
        ge=0, le=150, description="业务课二 (计算机专业基础)", examples=[130]
    )


class SubjectAnalysis(BaseModel):
    """单科点评"""
    politics: str
    english: str
    math: str
    professional: str


class PredictionResult(BaseModel):
    """
    推理服务返回的结构化结果

    六个字段全部必填，缺失任何一个都视为推理失败，不做默认值填充。
    """
    model_config = ConfigDict(use_enum_values=True, populate_by_name=True)

    re_examination_chance: ChanceLevel = Field(
        alias="reExaminationChance",
        description="进入复试的概率等级"
    )
    re_examination_analysis: str = Field(
        alias="reExaminationAnalysis",
        description="能否进入复试的分析"
    )
    probability: ChanceLevel = Field(description="最终录取概率等级")
    overall_analysis: str = Field(
        alias="overallAnalysis",
        description="综合分析"
    )
    subject_analysis: SubjectAnalysis = Field(alias="subjectAnalysis")
    suggestions: str = Field(description="备考建议")


class InferenceRequest(BaseModel):
    """
    发送给推理服务的请求

    核心计算 (检索 + 复录比) 在推理调用之前完成，
    结果以不可变值的形式传入。
    """
    model_config = ConfigDict(frozen=True)

    major: str
    scores: SubjectScores
    target_score: str
    re_exam_ratio: str = Field(examples=["1.20"])
    similar_cases: tuple[HistoricalCase, ...] = Field(default_factory=tuple)
    planned_admissions: int = Field(ge=0, description="最新一年计划招生人数")
    expected_re_exam_count: int = Field(
        ge=0,
        description="预计进入复试人数 = round(计划招生人数 * 复录比)"
    )


class PredictionRequest(BaseModel):
    """预测 API 请求"""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "major": "计算机科学与技术",
                "scores": {
                    "politics": 75,
                    "english": 70,
                    "math": 125,
                    "professional": 130,
                },
                "target_score": "390",
            }
        }
    )

    major: str
    scores: SubjectScores
    target_score: Union[int, str] = Field(description="目标总分 (允许文本输入)")


class SimilarCasesRequest(BaseModel):
    """相似案例检索请求"""
    major: str
    target_score: Union[int, str]
    count: int = 5


class PredictionReport(BaseModel):
    """预测 API 最终输出"""
    created_at: datetime = Field(default_factory=datetime.now)
    major: str
    target_score: str
    re_exam_ratio: str
    planned_admissions: int
    expected_re_exam_count: int
    result: PredictionResult
    similar_cases: list[ScoredCase] = Field(default_factory=list)
