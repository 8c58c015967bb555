"""
历史录取数据模型

知识库中的所有实体均为只读:
加载一次后在整个进程内共享，请求处理期间不会被修改。
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator


class AdmissionResult(str, Enum):
    """录取结果"""
    ADMITTED = "录取"
    NOT_ADMITTED = "未录取"


class HistoricalCase(BaseModel):
    """
    单个考生的历史记录

    total 是权威字段，不会由四门单科成绩重新求和得出。
    """
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    politics: int = Field(ge=0, le=100, description="思想政治理论")
    english: int = Field(ge=0, le=100, description="外国语")
    math: int = Field(ge=0, le=150, description="业务课一 (数学)")
    professional: int = Field(ge=0, le=150, description="业务课二 (计算机专业基础)")
    total: int = Field(ge=0, description="总分")
    result: AdmissionResult

    @property
    def is_admitted(self) -> bool:
        return self.result == AdmissionResult.ADMITTED


class ScoredCase(HistoricalCase):
    """检索时附带与目标总分差值的案例 (仅在检索过程中存在)"""
    difference: Optional[int] = Field(
        ge=0, description="与目标总分的绝对差值 (目标总分超出整数范围时为 None)"
    )


class YearlyData(BaseModel):
    """单个专业某一年的招生数据"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    year: int
    planned_admissions: int = Field(
        ge=0,
        alias="plannedAdmissions",
        description="计划招生人数",
    )
    actual_admissions: int = Field(
        ge=0,
        alias="actualAdmissions",
        description="实际录取人数",
    )
    cases: tuple[HistoricalCase, ...] = Field(
        default_factory=tuple,
        description="当年的历史案例",
    )

    @property
    def admitted_cases(self) -> list[HistoricalCase]:
        return [c for c in self.cases if c.is_admitted]


class MajorDataset(BaseModel):
    """
    单个专业的多年数据

    yearly_data 必须按年份降序排列 (index 0 = 最近一年)，
    复录比的位置权重依赖这一顺序，因此在构建时校验。
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    yearly_data: tuple[YearlyData, ...] = Field(
        alias="yearlyData",
        min_length=1,
    )

    @model_validator(mode="after")
    def _check_descending_years(self) -> "MajorDataset":
        years = [y.year for y in self.yearly_data]
        for newer, older in zip(years, years[1:]):
            if newer <= older:
                raise ValueError(
                    f"{self.name}: 年份必须严格降序排列, 实际顺序 {years}"
                )
        return self

    @property
    def latest(self) -> YearlyData:
        return self.yearly_data[0]

    @property
    def all_cases(self) -> list[HistoricalCase]:
        """所有年份的案例 (最近一年在前)"""
        return [c for year in self.yearly_data for c in year.cases]
