"""
Agent 基类
所有 Agent 都继承的抽象基类。
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional
from loguru import logger

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class BaseAgent(ABC, Generic[InputT, OutputT]):
    """
    Agent 基类

    - input_type 声明输入类型，run 时先检查
    - 错误处理统一: 记录 Agent 名称和输入摘要后原样抛出
    """

    name: str = "BaseAgent"
    input_type: Optional[type] = None

    def __init__(self):
        self.logger = logger.bind(agent=self.name)

    def run(self, input_data: InputT) -> OutputT:
        """
        执行 Agent

        Args:
            input_data: 输入数据

        Returns:
            输出数据
        """
        try:
            self._validate_input(input_data)
            result = self._process(input_data)
            self._validate_output(result)
            return result

        except Exception as e:
            if self.input_type is None or isinstance(input_data, self.input_type):
                summary = self.describe(input_data)
            else:
                summary = type(input_data).__name__
            self.logger.error(f"{self.name} 失败 [{summary}]: {e}")
            raise

    @abstractmethod
    def _process(self, input_data: InputT) -> OutputT:
        """实际处理逻辑 (由子类实现)"""
        pass

    def describe(self, input_data: InputT) -> str:
        """日志用的输入摘要 (需要时覆盖)"""
        return type(input_data).__name__

    def _validate_input(self, input_data: InputT) -> None:
        if input_data is None:
            raise ValueError(f"{self.name}: 输入数据为 None")
        if self.input_type is not None and not isinstance(input_data, self.input_type):
            raise TypeError(
                f"{self.name}: 需要 {self.input_type.__name__}，"
                f"收到 {type(input_data).__name__}"
            )

    def _validate_output(self, output_data: OutputT) -> None:
        if output_data is None:
            raise ValueError(f"{self.name}: 输出数据为 None")
