"""
AdmitLens 测试 - API
"""

import pytest
import sys
sys.path.insert(0, ".")

from fastapi.testclient import TestClient

from admitlens.api.main import app
from admitlens.data_sources import (
    UESTC_CS_MAJORS,
    HistoricalDataRepository,
    build_datasets,
    get_repository,
)
from admitlens.llm import InferenceClient, InferenceResponseError, get_inference_client
from admitlens.schemas.prediction import ChanceLevel, InferenceRequest, PredictionResult

PREDICT_BODY = {
    "major": "计算机科学与技术",
    "scores": {"politics": 75, "english": 70, "math": 125, "professional": 130},
    "target_score": "390",
}


class StubInferenceClient(InferenceClient):
    """固定结果 / 固定失败的推理客户端"""

    name = "stub"

    def __init__(self, fail: bool = False):
        self.fail = fail

    @property
    def is_available(self) -> bool:
        return True

    def submit(self, request: InferenceRequest) -> PredictionResult:
        if self.fail:
            raise InferenceResponseError("AI 返回的结果不完整，请稍后重试。")
        return PredictionResult(
            re_examination_chance=ChanceLevel.MEDIUM,
            re_examination_analysis="接近复试线",
            probability=ChanceLevel.LOW,
            overall_analysis="总分偏低",
            subject_analysis={
                "politics": "-",
                "english": "-",
                "math": "-",
                "professional": "-",
            },
            suggestions="提高数学",
        )


class TestAPI:
    """API 测试"""

    def setup_method(self):
        repository = HistoricalDataRepository(build_datasets(UESTC_CS_MAJORS))
        app.dependency_overrides[get_repository] = lambda: repository
        app.dependency_overrides[get_inference_client] = lambda: StubInferenceClient()
        self.client = TestClient(app)

    def teardown_method(self):
        app.dependency_overrides.clear()

    def test_root(self):
        """健康检查"""
        response = self.client.get("/")

        assert response.status_code == 200
        assert response.json()["name"] == "AdmitLens"

    def test_list_majors(self):
        """专业列表"""
        response = self.client.get("/api/v1/majors")

        assert response.status_code == 200
        majors = response.json()["majors"]
        assert [m["name"] for m in majors] == ["计算机科学与技术", "软件工程", "人工智能"]
        assert all(m["re_exam_ratio"] == "1.20" for m in majors)

    def test_ratio(self):
        """复录比明细"""
        response = self.client.get("/api/v1/majors/人工智能/ratio")

        assert response.status_code == 200
        data = response.json()
        assert data["ratio"] == "1.20"
        assert [c["year"] for c in data["contributions"]] == [2023, 2022, 2021]
        assert all(c["skip_reason"] == "implausible_ratio" for c in data["contributions"])

    def test_ratio_unknown_major(self):
        """未知专业 -> 404"""
        response = self.client.get("/api/v1/majors/电子信息/ratio")

        assert response.status_code == 404

    def test_similar_cases(self):
        """相似案例"""
        response = self.client.post(
            "/api/v1/similar-cases",
            json={"major": "人工智能", "target_score": 390, "count": 3},
        )

        assert response.status_code == 200
        assert [c["total"] for c in response.json()] == [393, 387, 394]

    def test_similar_cases_non_numeric(self):
        """目标总分无法解析 -> 空列表"""
        response = self.client.post(
            "/api/v1/similar-cases",
            json={"major": "人工智能", "target_score": "abc"},
        )

        assert response.status_code == 200
        assert response.json() == []

    def test_similar_cases_oversized_target(self):
        """超长数字串 -> 按原始顺序返回，差值为 null"""
        response = self.client.post(
            "/api/v1/similar-cases",
            json={"major": "人工智能", "target_score": "9" * 5000, "count": 2},
        )

        assert response.status_code == 200
        data = response.json()
        assert [c["total"] for c in data] == [450, 437]
        assert [c["difference"] for c in data] == [None, None]

    def test_predict(self):
        """完整预测"""
        response = self.client.post("/api/v1/predict", json=PREDICT_BODY)

        assert response.status_code == 200
        data = response.json()
        assert data["re_exam_ratio"] == "1.20"
        assert data["expected_re_exam_count"] == 252
        assert data["result"]["reExaminationChance"] == "中"
        assert data["result"]["subjectAnalysis"]["math"] == "-"
        assert len(data["similar_cases"]) == 5

    def test_predict_inference_failure(self):
        """推理失败 -> 502 + 用户可读信息"""
        app.dependency_overrides[get_inference_client] = lambda: StubInferenceClient(fail=True)

        response = self.client.post("/api/v1/predict", json=PREDICT_BODY)

        assert response.status_code == 502
        assert response.json()["detail"] == "AI 返回的结果不完整，请稍后重试。"

    def test_predict_invalid_scores(self):
        """单科成绩超出满分 -> 422"""
        body = dict(PREDICT_BODY, scores={"politics": 120, "english": 70, "math": 125, "professional": 130})

        response = self.client.post("/api/v1/predict", json=body)

        assert response.status_code == 422

    def test_predict_unknown_major(self):
        """未知专业 -> 404"""
        response = self.client.post("/api/v1/predict", json=dict(PREDICT_BODY, major="电子信息"))

        assert response.status_code == 404

    def test_schemas(self):
        """schema 接口"""
        assert self.client.get("/api/v1/schema/prediction-request").status_code == 200
        assert self.client.get("/api/v1/schema/prediction-report").status_code == 200


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
