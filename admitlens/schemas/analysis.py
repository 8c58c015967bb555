"""
分析结果模型
复录比估算的逐年明细。
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class SkipReason(str, Enum):
    """年份被排除的原因"""
    NO_ADMITTED_CASES = "no_admitted_cases"
    ZERO_ACTUAL_ADMISSIONS = "zero_actual_admissions"
    IMPLAUSIBLE_RATIO = "implausible_ratio"


class YearContribution(BaseModel):
    """
    单一年份对加权复录比的贡献

    included=False 时该年份不参与加权，也不占用权重。
    """
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    year: int
    weight: float = Field(description="位置权重")
    included: bool
    admission_cutoff: Optional[int] = Field(
        default=None,
        description="当年录取考生最低总分 (预估复试线)"
    )
    re_exam_pool_count: Optional[int] = Field(
        default=None,
        description="总分不低于复试线的考生数"
    )
    single_year_ratio: Optional[float] = Field(
        default=None,
        description="当年复录比"
    )
    skip_reason: Optional[SkipReason] = None


class RatioReport(BaseModel):
    """某专业的加权复录比及其明细"""
    major: str
    ratio: str = Field(
        description="加权复录比 (两位小数)",
        examples=["1.35"]
    )
    contributions: list[YearContribution] = Field(default_factory=list)
