"""
AdmitLens 配置管理

所有配置项都从 .env 文件读取。
用法:
    from admitlens.config import settings
    model = settings.GEMINI_MODEL
"""

import sys
from typing import Optional

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # 忽略 .env 中未定义的变量
    )

    # === 环境 ===
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # === 推理后端 ===
    LLM_BACKEND: str = "gemini"  # gemini | llama

    # === Gemini ===
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_TEMPERATURE: float = 0.2
    GEMINI_TIMEOUT: float = 60.0

    # === 本地 LLM (llama.cpp) ===
    MODEL_PATH: str = "models/Qwen2.5-7B-Instruct-Q4_K_M.gguf"
    MODEL_N_CTX: int = 4096
    MODEL_N_GPU_LAYERS: int = 0

    # === 历史数据 ===
    # 为空时使用内置的电子科技大学计算机学院数据
    HISTORICAL_DATA_PATH: str = ""

    # === 检索 ===
    SIMILAR_CASE_COUNT: int = 5


# 单例
settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """为 API / CLI 入口安装 stderr 日志输出"""
    logger.remove()
    logger.add(sys.stderr, level=(level or settings.LOG_LEVEL).upper())
