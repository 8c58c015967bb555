"""
AdmitLens 测试 - Agent 输入检查与错误日志
"""

import pytest
import sys
sys.path.insert(0, ".")

from loguru import logger

from admitlens.agents import RatioAgent, RetrievalAgent, RetrievalInput
from admitlens.data_sources import UESTC_CS_MAJORS, build_datasets
from admitlens.schemas.historical import AdmissionResult, HistoricalCase


class TestAgentInput:
    """输入类型检查测试"""

    def setup_method(self):
        self.dataset = build_datasets(UESTC_CS_MAJORS)["人工智能"]
        self.messages = []
        self.sink_id = logger.add(self.messages.append, level="ERROR")

    def teardown_method(self):
        logger.remove(self.sink_id)

    def test_wrong_input_type(self):
        """RatioAgent 只接受 MajorDataset"""
        with pytest.raises(TypeError):
            RatioAgent().run(self.dataset.yearly_data)

    def test_none_input(self):
        """None 输入"""
        with pytest.raises(ValueError):
            RetrievalAgent().run(None)

    def test_error_log_includes_summary(self):
        """错误日志包含 Agent 名称和输入类型"""
        with pytest.raises(TypeError):
            RetrievalAgent().run({"target_score": "390"})

        assert len(self.messages) == 1
        assert "RetrievalAgent" in self.messages[0]
        assert "[dict]" in self.messages[0]

    def test_describe_truncates_long_target(self):
        """日志摘要截断超长目标总分"""
        agent = RetrievalAgent()
        cases = [
            HistoricalCase(
                politics=60, english=60, math=100, professional=100,
                total=400, result=AdmissionResult.ADMITTED,
            )
        ]

        summary = agent.describe(RetrievalInput("9" * 5000, cases, count=1))

        assert summary == "target=" + "9" * 20 + "..., pool=1, count=1"

    def test_valid_input(self):
        """正常输入不记录错误"""
        report = RatioAgent().run(self.dataset)

        assert report.major == "人工智能"
        assert self.messages == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
