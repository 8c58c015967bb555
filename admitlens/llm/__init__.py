"""
推理客户端模块
"""

from typing import Optional

from admitlens.config import settings
from .base import (
    InferenceClient,
    InferenceError,
    InferenceConfigError,
    InferenceServiceError,
    InferenceResponseError,
    parse_prediction,
)
from .gemini_client import GeminiInferenceClient
from .runner import LlamaInferenceClient
from .prompts import build_prompt, format_similar_cases

_BACKENDS = {
    "gemini": GeminiInferenceClient,
    "llama": LlamaInferenceClient,
}

# 单例
_client: Optional[InferenceClient] = None


def get_inference_client() -> InferenceClient:
    """按 LLM_BACKEND 配置返回推理客户端单例"""
    global _client
    if _client is None:
        backend = settings.LLM_BACKEND.lower()
        if backend not in _BACKENDS:
            raise InferenceConfigError(f"不支持的推理后端: {settings.LLM_BACKEND}")
        _client = _BACKENDS[backend]()
    return _client


__all__ = [
    "InferenceClient",
    "InferenceError",
    "InferenceConfigError",
    "InferenceServiceError",
    "InferenceResponseError",
    "parse_prediction",
    "GeminiInferenceClient",
    "LlamaInferenceClient",
    "build_prompt",
    "format_similar_cases",
    "get_inference_client",
]
