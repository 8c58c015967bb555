"""
历史数据仓库
专业名称 -> MajorDataset 的只读映射。

数据只在首次访问时加载一次，之后在进程内共享，不做失效或修改。
替换为数据库来源时只需要替换这一层。
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from loguru import logger
from pydantic import ValidationError

from admitlens.config import settings
from admitlens.schemas.historical import HistoricalCase, MajorDataset, YearlyData
from admitlens.data_sources.historical_data import UESTC_CS_MAJORS


class DatasetError(Exception):
    """历史数据加载失败"""
    pass


class MajorNotFoundError(Exception):
    """未知专业"""

    def __init__(self, major: str):
        self.major = major
        super().__init__(f"未找到专业: {major}")


def build_datasets(raw: Mapping[str, dict]) -> dict[str, MajorDataset]:
    """
    原始映射 -> MajorDataset

    Raises:
        DatasetError: 结构不符或年份未按降序排列
    """
    datasets = {}
    for name, major in raw.items():
        try:
            datasets[name] = MajorDataset(name=name, **major)
        except (TypeError, ValidationError) as e:
            raise DatasetError(f"专业数据无效 [{name}]: {e}") from e
    return datasets


def load_datasets_from_file(path: str) -> dict[str, MajorDataset]:
    """从 JSON 文件加载历史数据"""
    file_path = Path(path)
    if not file_path.exists():
        raise DatasetError(f"历史数据文件不存在: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise DatasetError(f"历史数据文件解析失败: {e}") from e

    if not isinstance(raw, dict):
        raise DatasetError("历史数据文件顶层必须是 {专业名: 数据} 映射")

    return build_datasets(raw)


class HistoricalDataRepository:
    """
    历史数据仓库

    - 内置数据或 JSON 文件
    - 只读 (MappingProxyType + frozen 模型)
    """

    def __init__(self, datasets: Mapping[str, MajorDataset]):
        self._datasets = MappingProxyType(dict(datasets))
        self.logger = logger.bind(component="HistoricalData")
        self.logger.info(f"Loaded {len(self._datasets)} majors")

    @classmethod
    def from_settings(cls) -> "HistoricalDataRepository":
        if settings.HISTORICAL_DATA_PATH:
            logger.info(f"Loading historical data: {settings.HISTORICAL_DATA_PATH}")
            return cls(load_datasets_from_file(settings.HISTORICAL_DATA_PATH))
        return cls(build_datasets(UESTC_CS_MAJORS))

    @property
    def datasets(self) -> Mapping[str, MajorDataset]:
        return self._datasets

    def list_majors(self) -> list[str]:
        return list(self._datasets.keys())

    def get(self, major: str) -> MajorDataset:
        """
        专业数据

        Raises:
            MajorNotFoundError: 未知专业
        """
        dataset = self._datasets.get(major)
        if dataset is None:
            raise MajorNotFoundError(major)
        return dataset

    def all_cases(self, major: str) -> list[HistoricalCase]:
        """该专业所有年份的案例 (最近一年在前)"""
        return self.get(major).all_cases

    def latest_year(self, major: str) -> YearlyData:
        return self.get(major).latest


# 单例
_repository: Optional[HistoricalDataRepository] = None


def get_repository() -> HistoricalDataRepository:
    """历史数据仓库单例"""
    global _repository
    if _repository is None:
        _repository = HistoricalDataRepository.from_settings()
    return _repository
