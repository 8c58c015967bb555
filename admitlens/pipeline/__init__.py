"""
流水线模块
"""

from .orchestrator import PredictionOrchestrator

__all__ = ["PredictionOrchestrator"]
