"""
提示词构建
把核心计算结果 (相似案例 + 复录比) 和考生成绩组装成推理提示词。
"""

from typing import Sequence

from admitlens.schemas.historical import HistoricalCase
from admitlens.schemas.prediction import ChanceLevel, InferenceRequest

SYSTEM_INSTRUCTION = (
    "你是一位资深的电子科技大学（UESTC）计算机学院考研招生分析专家。"
    "根据考生的各科分数、目标总分、招生背景信息（报考专业、招生人数、加权复录比）"
    "以及提供的真实历史案例，给出分阶段（进入复试、最终录取）的录取可能性分析。"
    "分析范围严格限定在电子科技大学计算机学院内部的指定专业。"
)

# 输出结构，llama 后端没有 response schema 时写进提示词
RESPONSE_FORMAT = """{
  "reExaminationChance": "高" | "中" | "低",
  "reExaminationAnalysis": "进入复试的分析",
  "probability": "高" | "中" | "低",
  "overallAnalysis": "综合分析",
  "subjectAnalysis": {
    "politics": "政治点评",
    "english": "英语点评",
    "math": "数学点评",
    "professional": "专业课点评"
  },
  "suggestions": "备考建议"
}"""

_CHANCE_LEVELS = [level.value for level in ChanceLevel]

# Gemini generation_config.response_schema，字段与 PredictionResult 的别名一致
RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "reExaminationChance": {
            "type": "STRING",
            "description": "进入复试的概率，分为'高'、'中'、'低'三个等级。",
            "enum": _CHANCE_LEVELS,
        },
        "reExaminationAnalysis": {
            "type": "STRING",
            "description": "能否进入复试的分析，结合招生人数、复录比和历史数据判断。",
        },
        "probability": {
            "type": "STRING",
            "description": "进入复试基础上的最终录取概率，分为'高'、'中'、'低'三个等级。",
            "enum": _CHANCE_LEVELS,
        },
        "overallAnalysis": {
            "type": "STRING",
            "description": "综合分析，指出核心优势和劣势。",
        },
        "subjectAnalysis": {
            "type": "OBJECT",
            "properties": {
                "politics": {"type": "STRING", "description": "政治点评"},
                "english": {"type": "STRING", "description": "英语点评"},
                "math": {"type": "STRING", "description": "数学点评"},
                "professional": {"type": "STRING", "description": "专业课点评"},
            },
            "required": ["politics", "english", "math", "professional"],
        },
        "suggestions": {
            "type": "STRING",
            "description": "具体、可操作的备考建议。",
        },
    },
    "required": [
        "reExaminationChance",
        "reExaminationAnalysis",
        "probability",
        "overallAnalysis",
        "subjectAnalysis",
        "suggestions",
    ],
}


def format_similar_cases(cases: Sequence[HistoricalCase]) -> str:
    if not cases:
        return "无相关历史案例数据。"
    return "\n".join(
        f"案例 {i}: 总分 {c.total} (政治: {c.politics}, 英语: {c.english}, "
        f"数学: {c.math}, 专业课: {c.professional}) - 结果: {c.result}"
        for i, c in enumerate(cases, start=1)
    )


def build_prompt(request: InferenceRequest) -> str:
    scores = request.scores
    return f"""请为报考电子科技大学计算机科学与工程学院【{request.major}】专业的考生进行分阶段的录取可能性分析。

招生背景信息:
- 报考专业: {request.major}
- 最新参考计划招生人数: {request.planned_admissions}人
- 加权预估复录比: 1:{request.re_exam_ratio} (近三年历史数据按 60/25/15 权重加权)
- 预计约有 {request.expected_re_exam_count} 名考生进入复试

与考生分数最相似的真实历史案例:
{format_similar_cases(request.similar_cases)}

考生分数:
- 思想政治理论: {scores.politics}
- 外国语: {scores.english}
- 业务课一 (数学): {scores.math}
- 业务课二 (计算机专业基础): {scores.professional}
- 目标总分: {request.target_score}

第一步: 判断目标总分进入 {request.expected_re_exam_count} 人复试名单的概率 (高/中/低) 并分析。
第二步: 结合单科成绩与历史案例，分析在复试中最终被录取的概率 (高/中/低)。
最后给出单科诊断和备考建议。"""
