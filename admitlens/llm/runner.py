"""
LLM Runner
llama.cpp 本地模型推理客户端。
"""

from typing import Optional
from pathlib import Path
from loguru import logger

from admitlens.config import settings
from admitlens.schemas.prediction import InferenceRequest, PredictionResult
from .base import (
    InferenceClient,
    InferenceConfigError,
    InferenceServiceError,
    parse_prediction,
)
from .prompts import RESPONSE_FORMAT, SYSTEM_INSTRUCTION, build_prompt

# llama-cpp-python 是可选依赖 (pip install admitlens[local])
try:
    from llama_cpp import Llama
    LLAMA_AVAILABLE = True
except ImportError:
    LLAMA_AVAILABLE = False
    Llama = None


class LlamaInferenceClient(InferenceClient):
    """
    llama.cpp 封装

    加载 GGUF 模型，在本地生成与 Gemini 后端相同结构的 JSON 结果。
    """

    name = "llama"

    def __init__(
        self,
        model_path: Optional[str] = None,
        n_ctx: Optional[int] = None,
        n_gpu_layers: Optional[int] = None,
    ):
        """
        Args:
            model_path: GGUF 模型文件路径
            n_ctx: 上下文窗口大小
            n_gpu_layers: GPU 层数 (0 = 仅 CPU)
        """
        self.model_path = model_path or settings.MODEL_PATH
        self.n_ctx = n_ctx or settings.MODEL_N_CTX
        self.n_gpu_layers = (
            settings.MODEL_N_GPU_LAYERS if n_gpu_layers is None else n_gpu_layers
        )
        self._model: Optional[Llama] = None
        self.logger = logger.bind(component="LLMRunner")

    @property
    def is_available(self) -> bool:
        """LLM 是否可用"""
        if not LLAMA_AVAILABLE:
            return False
        return Path(self.model_path).exists()

    def load(self) -> bool:
        """加载模型"""
        if self._model is not None:
            return True

        if not LLAMA_AVAILABLE:
            self.logger.warning("llama-cpp-python 未安装")
            return False

        if not Path(self.model_path).exists():
            self.logger.warning(f"模型文件不存在: {self.model_path}")
            return False

        try:
            self.logger.info(f"Loading model: {self.model_path}")
            self._model = Llama(
                model_path=self.model_path,
                n_ctx=self.n_ctx,
                n_gpu_layers=self.n_gpu_layers,
                verbose=False,
            )
            self.logger.info("Model loaded successfully")
            return True
        except Exception as e:
            self.logger.error(f"Model loading failed: {e}")
            return False

    def generate(
        self,
        prompt: str,
        max_tokens: int = 1024,
        temperature: float = 0.2,
        stop: Optional[list[str]] = None,
    ) -> str:
        """
        文本生成

        Raises:
            InferenceConfigError: 模型不可用
            InferenceServiceError: 生成失败
        """
        if not self.load():
            raise InferenceConfigError("本地模型不可用，请检查 MODEL_PATH 或安装 llama-cpp-python。")

        try:
            output = self._model(
                prompt,
                max_tokens=max_tokens,
                temperature=temperature,
                stop=stop or ["</s>"],
            )
            return output["choices"][0]["text"].strip()
        except Exception as e:
            self.logger.error(f"Generation failed: {e}")
            raise InferenceServiceError("本地模型生成失败，请稍后重试。") from e

    def submit(self, request: InferenceRequest) -> PredictionResult:
        prompt = (
            f"{SYSTEM_INSTRUCTION}\n\n{build_prompt(request)}\n\n"
            f"请只输出如下结构的 JSON:\n{RESPONSE_FORMAT}\n\nJSON:"
        )
        return parse_prediction(self.generate(prompt, max_tokens=self.n_ctx // 2))
