"""
AdmitLens Agent 包
每个 Agent 只负责一件事，并遵循固定的输入输出 schema。
"""

from .base import BaseAgent
from .retrieval_agent import RetrievalAgent, RetrievalInput
from .ratio_agent import RatioAgent
from .inference_agent import InferenceAgent

__all__ = [
    "BaseAgent",
    "RetrievalAgent",
    "RetrievalInput",
    "RatioAgent",
    "InferenceAgent",
]
