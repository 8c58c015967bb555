"""
数据源模块
"""

from .historical_data import UESTC_CS_MAJORS
from .repository import (
    HistoricalDataRepository,
    DatasetError,
    MajorNotFoundError,
    build_datasets,
    load_datasets_from_file,
    get_repository,
)

__all__ = [
    "UESTC_CS_MAJORS",
    "HistoricalDataRepository",
    "DatasetError",
    "MajorNotFoundError",
    "build_datasets",
    "load_datasets_from_file",
    "get_repository",
]
