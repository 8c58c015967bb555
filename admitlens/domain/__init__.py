"""
AdmitLens 领域逻辑包
复录比估算与相似案例检索，均为纯函数式的确定性计算。
LLM 不参与这一层。
"""

from .ratio import RatioEstimator, expected_re_exam_count
from .retrieval import CaseRetriever, parse_target_score

__all__ = [
    "RatioEstimator",
    "expected_re_exam_count",
    "CaseRetriever",
    "parse_target_score",
]
