#!/usr/bin/env python
"""
AdmitLens 命令行工具

用法:
    python scripts/admit_cli.py majors                       # 专业列表与复录比
    python scripts/admit_cli.py ratio 人工智能                 # 复录比逐年明细
    python scripts/admit_cli.py similar 人工智能 390 [5]       # 相似案例
    python scripts/admit_cli.py predict 人工智能 75 70 125 130 390   # 完整预测
"""

import sys
from pathlib import Path

# 把项目根目录加入 path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from admitlens.config import configure_logging
from admitlens.agents import RatioAgent, RetrievalAgent, RetrievalInput
from admitlens.data_sources import MajorNotFoundError, get_repository
from admitlens.llm import InferenceError, get_inference_client
from admitlens.pipeline import PredictionOrchestrator
from admitlens.schemas import PredictionRequest, SubjectScores


def cmd_majors():
    """专业列表"""
    repository = get_repository()
    agent = RatioAgent()

    print("=" * 50)
    print("📚 专业列表")
    print("=" * 50)
    print(f"{'专业':<14} {'年份':<6} {'计划招生':<8} {'复录比':<8}")
    print("-" * 50)
    for name in repository.list_majors():
        dataset = repository.get(name)
        latest = dataset.latest
        ratio = agent.run(dataset).ratio
        print(f"{name:<12} {latest.year:<6} {latest.planned_admissions:<10} 1:{ratio}")
    print("=" * 50)


def cmd_ratio(major: str):
    """复录比逐年明细"""
    report = RatioAgent().run(get_repository().get(major))

    print("=" * 60)
    print(f"📊 {major} 加权复录比: 1:{report.ratio}")
    print("=" * 60)
    print(f"{'年份':<6} {'权重':<6} {'复试线':<8} {'复试池':<8} {'复录比':<8} {'状态'}")
    print("-" * 60)
    for c in report.contributions:
        status = "✅" if c.included else f"❌ {c.skip_reason}"
        cutoff = c.admission_cutoff if c.admission_cutoff is not None else "-"
        pool = c.re_exam_pool_count if c.re_exam_pool_count is not None else "-"
        ratio = f"{c.single_year_ratio:.3f}" if c.single_year_ratio is not None else "-"
        print(f"{c.year:<8} {c.weight:<8} {cutoff:<10} {pool:<10} {ratio:<10} {status}")
    print("=" * 60)


def cmd_similar(major: str, target: str, count: int = 5):
    """相似案例"""
    cases = RetrievalAgent().run(RetrievalInput(
        target_score=target,
        cases=get_repository().all_cases(major),
        count=count,
    ))

    if not cases:
        print(f"⚠️  没有结果 (目标总分: {target})")
        return

    print(f"🔍 {major} / 目标总分 {target}")
    for i, c in enumerate(cases, start=1):
        difference = c.difference if c.difference is not None else "-"
        print(
            f"  {i}. 总分 {c.total} (差 {difference}) "
            f"政治 {c.politics} 英语 {c.english} 数学 {c.math} 专业课 {c.professional} "
            f"- {c.result}"
        )


def cmd_predict(major: str, politics: str, english: str, math: str, professional: str, target: str):
    """完整预测"""
    request = PredictionRequest(
        major=major,
        scores=SubjectScores(
            politics=int(politics),
            english=int(english),
            math=int(math),
            professional=int(professional),
        ),
        target_score=target,
    )

    try:
        orchestrator = PredictionOrchestrator(client=get_inference_client())
        report = orchestrator.run(request)
    except InferenceError as e:
        print(f"❌ 预测失败: {e.message}")
        sys.exit(2)

    result = report.result
    print("=" * 60)
    print(f"🎓 {major} / 目标总分 {report.target_score}")
    print(f"   复录比 1:{report.re_exam_ratio}, 预计复试 {report.expected_re_exam_count} 人")
    print("=" * 60)
    print(f"进入复试: {result.re_examination_chance}")
    print(f"  {result.re_examination_analysis}")
    print(f"最终录取: {result.probability}")
    print(f"  {result.overall_analysis}")
    print("-" * 60)
    print(f"政治: {result.subject_analysis.politics}")
    print(f"英语: {result.subject_analysis.english}")
    print(f"数学: {result.subject_analysis.math}")
    print(f"专业课: {result.subject_analysis.professional}")
    print("-" * 60)
    print(f"建议: {result.suggestions}")


def print_help():
    """帮助"""
    print(__doc__)
    print("\n可用专业:")
    for name in get_repository().list_majors():
        print(f"  {name}")


def main():
    configure_logging("WARNING")

    if len(sys.argv) < 2:
        print_help()
        return

    command = sys.argv[1].lower()
    args = sys.argv[2:]

    try:
        if command == "majors":
            cmd_majors()
        elif command == "ratio" and len(args) == 1:
            cmd_ratio(args[0])
        elif command == "similar" and len(args) in (2, 3):
            count = int(args[2]) if len(args) == 3 else 5
            cmd_similar(args[0], args[1], count)
        elif command == "predict" and len(args) == 6:
            cmd_predict(*args)
        elif command in ["help", "-h", "--help"]:
            print_help()
        else:
            print(f"❌ 未知命令或参数错误: {' '.join(sys.argv[1:])}")
            print_help()
    except MajorNotFoundError as e:
        print(f"❌ {e}")
        sys.exit(1)
    except ValueError as e:
        # 分数超出范围 / 非数字 (pydantic ValidationError 也是 ValueError)
        print(f"❌ 输入无效: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
