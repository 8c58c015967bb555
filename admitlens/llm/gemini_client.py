"""
Gemini 推理客户端
google-generativeai SDK 调用，强制 JSON 输出。
"""

import copy
from typing import Optional

import google.generativeai as genai
from loguru import logger

from admitlens.config import settings
from admitlens.schemas.prediction import InferenceRequest, PredictionResult
from .base import (
    InferenceClient,
    InferenceConfigError,
    InferenceServiceError,
    parse_prediction,
)
from .prompts import RESPONSE_SCHEMA, SYSTEM_INSTRUCTION, build_prompt


class GeminiInferenceClient(InferenceClient):
    """
    Gemini 推理客户端

    - temperature 0.2 (结果尽量稳定)
    - response_mime_type=application/json + response_schema (生成时约束结构)
    - 不重试 (retry=None)
    """

    name = "gemini"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        temperature: Optional[float] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = settings.GEMINI_API_KEY if api_key is None else api_key
        self.model_name = model_name or settings.GEMINI_MODEL
        self.temperature = (
            settings.GEMINI_TEMPERATURE if temperature is None else temperature
        )
        self.timeout = timeout or settings.GEMINI_TIMEOUT
        self._model = None
        self.logger = logger.bind(component="GeminiClient")

    @property
    def is_available(self) -> bool:
        return bool(self.api_key)

    def _get_model(self):
        if self._model is None:
            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(
                model_name=self.model_name,
                system_instruction=SYSTEM_INSTRUCTION,
            )
        return self._model

    def submit(self, request: InferenceRequest) -> PredictionResult:
        if not self.api_key:
            raise InferenceConfigError("GEMINI_API_KEY 环境变量未设置")

        prompt = build_prompt(request)
        self.logger.info(
            f"Requesting prediction: {request.major} / target {request.target_score}"
        )

        try:
            response = self._get_model().generate_content(
                prompt,
                generation_config={
                    "temperature": self.temperature,
                    "response_mime_type": "application/json",
                    # 传入副本，模块常量保持不变
                    "response_schema": copy.deepcopy(RESPONSE_SCHEMA),
                },
                request_options=genai.types.RequestOptions(
                    retry=None,
                    timeout=self.timeout,
                ),
            )
            text = response.text
        except Exception as e:
            self.logger.error(f"Gemini call failed: {e}")
            raise InferenceServiceError(
                "AI 预测服务失败。请检查您的网络连接或 API 密钥。"
            ) from e

        return parse_prediction(text)
