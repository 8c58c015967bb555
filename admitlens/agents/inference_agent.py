"""
Inference Agent
把核心计算结果提交给外部推理服务。
"""

from .base import BaseAgent
from admitlens.schemas.prediction import InferenceRequest, PredictionResult
from admitlens.llm import InferenceClient


class InferenceAgent(BaseAgent[InferenceRequest, PredictionResult]):
    """
    推理 Agent

    推理客户端由外部注入，测试时可以替换为不访问网络的实现。
    失败时抛出 InferenceError，不重试、不替换数据。
    """

    name = "InferenceAgent"
    input_type = InferenceRequest

    def __init__(self, client: InferenceClient):
        super().__init__()
        self.client = client

    def describe(self, input_data: InferenceRequest) -> str:
        return f"major={input_data.major}, backend={self.client.name}"

    def _process(self, input_data: InferenceRequest) -> PredictionResult:
        """推理请求"""
        self.logger.info(f"Submitting to {self.client.name} backend")
        return self.client.submit(input_data)
