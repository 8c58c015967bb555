"""
AdmitLens 测试 - 推理客户端 (不访问网络)
"""

import json

import pytest
import sys
sys.path.insert(0, ".")

from admitlens.llm import (
    GeminiInferenceClient,
    InferenceConfigError,
    InferenceResponseError,
    InferenceServiceError,
    LlamaInferenceClient,
    build_prompt,
    format_similar_cases,
    parse_prediction,
)
from admitlens.llm.prompts import RESPONSE_FORMAT, RESPONSE_SCHEMA
from admitlens.schemas.historical import AdmissionResult, HistoricalCase
from admitlens.schemas.prediction import ChanceLevel, InferenceRequest, SubjectScores

SAMPLE_RESPONSE = {
    "reExaminationChance": "高",
    "reExaminationAnalysis": "目标总分高于近三年复试线。",
    "probability": "中",
    "overallAnalysis": "数学优势明显，专业课需要巩固。",
    "subjectAnalysis": {
        "politics": "正常水平",
        "english": "略低于平均",
        "math": "优势科目",
        "professional": "需要提高",
    },
    "suggestions": "加强专业课复习。",
}


def make_request() -> InferenceRequest:
    return InferenceRequest(
        major="人工智能",
        scores=SubjectScores(politics=75, english=70, math=125, professional=130),
        target_score="400",
        re_exam_ratio="1.20",
        similar_cases=(
            HistoricalCase(
                politics=70, english=68, math=130, professional=125,
                total=393, result=AdmissionResult.ADMITTED,
            ),
        ),
        planned_admissions=65,
        expected_re_exam_count=78,
    )


class TestParsePrediction:
    """推理结果解析测试"""

    def test_valid_json(self):
        """完整结果"""
        result = parse_prediction(json.dumps(SAMPLE_RESPONSE, ensure_ascii=False))

        assert result.re_examination_chance == ChanceLevel.HIGH
        assert result.probability == ChanceLevel.MEDIUM
        assert result.subject_analysis.math == "优势科目"

    def test_fenced_json(self):
        """```json 包裹的输出"""
        text = "```json\n" + json.dumps(SAMPLE_RESPONSE, ensure_ascii=False) + "\n```"

        assert parse_prediction(text).suggestions == "加强专业课复习。"

    def test_missing_field(self):
        """缺少必填字段视为失败"""
        data = dict(SAMPLE_RESPONSE)
        del data["suggestions"]

        with pytest.raises(InferenceResponseError):
            parse_prediction(json.dumps(data, ensure_ascii=False))

    def test_missing_subject(self):
        """单科点评缺失"""
        data = dict(SAMPLE_RESPONSE, subjectAnalysis={"politics": "a", "english": "b", "math": "c"})

        with pytest.raises(InferenceResponseError):
            parse_prediction(json.dumps(data, ensure_ascii=False))

    def test_invalid_chance_level(self):
        """概率等级不在 高/中/低 之内"""
        data = dict(SAMPLE_RESPONSE, probability="很高")

        with pytest.raises(InferenceResponseError):
            parse_prediction(json.dumps(data, ensure_ascii=False))

    def test_not_json(self):
        """非 JSON 输出"""
        with pytest.raises(InferenceResponseError):
            parse_prediction("抱歉，我无法回答。")

        with pytest.raises(InferenceResponseError):
            parse_prediction("")


class TestPrompts:
    """提示词构建测试"""

    def test_format_no_cases(self):
        """没有相似案例"""
        assert format_similar_cases([]) == "无相关历史案例数据。"

    def test_format_cases(self):
        """案例格式"""
        text = format_similar_cases(make_request().similar_cases)

        assert text.startswith("案例 1: 总分 393")
        assert "录取" in text

    def test_build_prompt(self):
        """提示词包含核心计算结果"""
        prompt = build_prompt(make_request())

        assert "【人工智能】" in prompt
        assert "1:1.20" in prompt
        assert "78 名考生" in prompt
        assert "目标总分: 400" in prompt


class _FakeResponse:
    def __init__(self, text: str):
        self.text = text


class _FakeModel:
    def __init__(self, text: str = "", error: Exception = None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, prompt, **kwargs):
        self.calls.append((prompt, kwargs))
        if self.error:
            raise self.error
        return _FakeResponse(self.text)


class _FakeLlama:
    def __init__(self, text: str = "", error: Exception = None):
        self.text = text
        self.error = error
        self.prompts = []

    def __call__(self, prompt, **kwargs):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return {"choices": [{"text": self.text}]}


class TestGeminiInferenceClient:
    """Gemini 客户端测试 (SDK 模型替换为假对象)"""

    def test_missing_api_key(self):
        """缺少 API 密钥"""
        client = GeminiInferenceClient(api_key="")

        assert client.is_available is False
        with pytest.raises(InferenceConfigError):
            client.submit(make_request())

    def test_submit(self):
        """正常调用: JSON 模式 + 低温度"""
        client = GeminiInferenceClient(api_key="test-key")
        client._model = _FakeModel(text=json.dumps(SAMPLE_RESPONSE, ensure_ascii=False))

        result = client.submit(make_request())

        assert result.re_examination_chance == ChanceLevel.HIGH
        _, kwargs = client._model.calls[0]
        assert kwargs["generation_config"]["response_mime_type"] == "application/json"
        assert kwargs["generation_config"]["temperature"] == 0.2

    def test_response_schema(self):
        """生成时用 response_schema 约束六个必填字段"""
        client = GeminiInferenceClient(api_key="test-key")
        client._model = _FakeModel(text=json.dumps(SAMPLE_RESPONSE, ensure_ascii=False))

        client.submit(make_request())

        prompt, kwargs = client._model.calls[0]
        schema = kwargs["generation_config"]["response_schema"]
        assert schema == RESPONSE_SCHEMA
        assert set(schema["required"]) == set(SAMPLE_RESPONSE)
        assert schema["properties"]["probability"]["enum"] == ["高", "中", "低"]
        assert schema["properties"]["subjectAnalysis"]["required"] == [
            "politics", "english", "math", "professional",
        ]
        # 结构由 schema 约束，提示词里不再重复
        assert RESPONSE_FORMAT not in prompt

    def test_service_failure(self):
        """SDK 异常 -> InferenceServiceError"""
        client = GeminiInferenceClient(api_key="test-key")
        client._model = _FakeModel(error=ConnectionError("network down"))

        with pytest.raises(InferenceServiceError) as exc_info:
            client.submit(make_request())

        assert "AI 预测服务失败" in exc_info.value.message

    def test_malformed_response(self):
        """结构不符 -> InferenceResponseError"""
        client = GeminiInferenceClient(api_key="test-key")
        client._model = _FakeModel(text='{"probability": "高"}')

        with pytest.raises(InferenceResponseError):
            client.submit(make_request())


class TestLlamaInferenceClient:
    """本地模型客户端测试"""

    def test_model_unavailable(self, tmp_path):
        """模型文件不存在"""
        client = LlamaInferenceClient(model_path=str(tmp_path / "missing.gguf"))

        assert client.is_available is False
        with pytest.raises(InferenceConfigError):
            client.submit(make_request())

    def test_submit_with_response_format(self):
        """没有 response schema，输出结构写进提示词"""
        client = LlamaInferenceClient(model_path="unused.gguf")
        client._model = _FakeLlama(json.dumps(SAMPLE_RESPONSE, ensure_ascii=False))

        result = client.submit(make_request())

        assert result.probability == ChanceLevel.MEDIUM
        assert RESPONSE_FORMAT in client._model.prompts[0]

    def test_generation_failure(self):
        """生成异常 -> InferenceServiceError"""
        client = LlamaInferenceClient(model_path="unused.gguf")
        client._model = _FakeLlama(error=RuntimeError("out of memory"))

        with pytest.raises(InferenceServiceError):
            client.submit(make_request())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
