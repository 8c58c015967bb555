"""
AdmitLens FastAPI 入口
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from admitlens import __version__
from admitlens.config import configure_logging
from admitlens.api.routes import router
from admitlens.llm import InferenceConfigError

configure_logging()

app = FastAPI(
    title="AdmitLens",
    description="电子科技大学计算机学院考研录取可能性分析",
    version=__version__,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 生产环境需要限制
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api/v1")


@app.exception_handler(InferenceConfigError)
async def inference_config_error_handler(request: Request, exc: InferenceConfigError):
    # 推理后端配置错误 (依赖注入阶段抛出)
    return JSONResponse(status_code=502, content={"detail": exc.message})


@app.get("/")
async def root():
    """健康检查"""
    return {
        "name": "AdmitLens",
        "status": "running",
        "version": __version__,
    }


@app.get("/health")
async def health():
    """详细健康检查"""
    from admitlens.llm import get_inference_client

    try:
        client = get_inference_client()
    except InferenceConfigError as e:
        return {"status": "degraded", "llm_available": False, "detail": e.message}

    return {
        "status": "healthy",
        "llm_backend": client.name,
        "llm_available": client.is_available,
    }
