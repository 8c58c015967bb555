"""
推理客户端接口
外部叙述性分析服务的窄接口: 提交结构化请求，返回结构化结果或抛出异常。
"""

import json
from abc import ABC, abstractmethod

from loguru import logger
from pydantic import ValidationError

from admitlens.schemas.prediction import InferenceRequest, PredictionResult


class InferenceError(Exception):
    """
    推理失败

    message 面向最终用户，可以直接展示。
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InferenceConfigError(InferenceError):
    """推理后端未配置 (缺少 API 密钥 / 模型文件)"""
    pass


class InferenceServiceError(InferenceError):
    """推理服务调用失败 (网络 / SDK 错误)"""
    pass


class InferenceResponseError(InferenceError):
    """推理结果不符合约定结构"""
    pass


class InferenceClient(ABC):
    """
    推理客户端基类

    实现类不做自动重试，失败一律以 InferenceError 抛出。
    """

    name: str = "InferenceClient"

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """后端是否已配置"""

    @abstractmethod
    def submit(self, request: InferenceRequest) -> PredictionResult:
        """
        提交推理请求

        Raises:
            InferenceError: 任何失败
        """


def parse_prediction(text: str) -> PredictionResult:
    """
    模型输出文本 -> PredictionResult

    Raises:
        InferenceResponseError: 非 JSON 或缺少必填字段
    """
    payload = (text or "").strip()

    # ```json ... ``` 包裹的情况
    if "```json" in payload:
        payload = payload.split("```json")[1].split("```")[0]
    elif "```" in payload:
        payload = payload.split("```")[1].split("```")[0]

    try:
        data = json.loads(payload.strip())
    except json.JSONDecodeError as e:
        logger.warning(f"JSON parse failed: {payload[:100]}")
        raise InferenceResponseError("AI 返回的结果无法解析，请稍后重试。") from e

    try:
        return PredictionResult.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Prediction schema violation: {e.error_count()} errors")
        raise InferenceResponseError("AI 返回的结果不完整，请稍后重试。") from e
