"""
内置历史数据
电子科技大学计算机科学与工程学院，按专业和年份组织的结构化知识库。

每个专业的 yearlyData 按年份降序排列，最新年份在前。
生产环境可以通过 HISTORICAL_DATA_PATH 指定同结构的 JSON 文件替换。
"""

ADMITTED = "录取"
NOT_ADMITTED = "未录取"


def _case(politics: int, english: int, math: int, professional: int, total: int, result: str) -> dict:
    return {
        "politics": politics,
        "english": english,
        "math": math,
        "professional": professional,
        "total": total,
        "result": result,
    }


UESTC_CS_MAJORS: dict = {
    "计算机科学与技术": {
        "yearlyData": [
            {
                "year": 2023,
                "plannedAdmissions": 210,
                "actualAdmissions": 212,
                "cases": [
                    _case(78, 80, 135, 125, 418, ADMITTED),
                    _case(75, 72, 140, 130, 417, ADMITTED),
                    _case(70, 70, 125, 120, 385, NOT_ADMITTED),
                    _case(68, 65, 132, 122, 387, ADMITTED),
                    _case(69, 68, 128, 118, 383, ADMITTED),  # 复试线
                ],
            },
            {
                "year": 2022,
                "plannedAdmissions": 200,
                "actualAdmissions": 205,
                "cases": [
                    _case(80, 78, 128, 120, 406, ADMITTED),
                    _case(72, 75, 130, 118, 395, ADMITTED),
                    _case(67, 66, 125, 115, 373, NOT_ADMITTED),
                    _case(65, 70, 122, 119, 376, ADMITTED),  # 复试线
                ],
            },
            {
                "year": 2021,
                "plannedAdmissions": 190,
                "actualAdmissions": 193,
                "cases": [
                    _case(76, 74, 133, 121, 404, ADMITTED),
                    _case(70, 71, 128, 115, 384, ADMITTED),
                    _case(66, 64, 120, 110, 360, NOT_ADMITTED),
                    _case(68, 69, 124, 112, 373, ADMITTED),  # 复试线
                ],
            },
        ]
    },
    "软件工程": {
        "yearlyData": [
            {
                "year": 2023,
                "plannedAdmissions": 185,
                "actualAdmissions": 188,
                "cases": [
                    _case(77, 79, 138, 128, 422, ADMITTED),
                    _case(73, 74, 131, 115, 393, ADMITTED),
                    _case(65, 68, 128, 115, 376, ADMITTED),  # 复试线
                    _case(66, 67, 125, 116, 374, NOT_ADMITTED),
                ],
            },
            {
                "year": 2022,
                "plannedAdmissions": 180,
                "actualAdmissions": 180,
                "cases": [
                    _case(69, 73, 129, 119, 390, ADMITTED),
                    _case(75, 71, 115, 110, 371, ADMITTED),  # 复试线
                    _case(64, 65, 120, 112, 361, NOT_ADMITTED),
                ],
            },
            {
                "year": 2021,
                "plannedAdmissions": 175,
                "actualAdmissions": 178,
                "cases": [
                    _case(72, 70, 130, 120, 392, ADMITTED),
                    _case(68, 68, 122, 112, 370, ADMITTED),  # 复试线
                    _case(63, 62, 118, 110, 353, NOT_ADMITTED),
                ],
            },
        ]
    },
    "人工智能": {
        "yearlyData": [
            {
                "year": 2023,
                "plannedAdmissions": 65,
                "actualAdmissions": 65,
                "cases": [
                    _case(82, 85, 145, 138, 450, ADMITTED),
                    _case(79, 81, 142, 135, 437, ADMITTED),
                    _case(74, 70, 135, 128, 407, ADMITTED),
                    _case(70, 68, 130, 125, 393, ADMITTED),  # 复试线
                    _case(71, 69, 126, 121, 387, NOT_ADMITTED),
                ],
            },
            {
                "year": 2022,
                "plannedAdmissions": 60,
                "actualAdmissions": 62,
                "cases": [
                    _case(80, 82, 140, 132, 434, ADMITTED),
                    _case(75, 72, 133, 125, 405, ADMITTED),
                    _case(68, 65, 128, 120, 381, ADMITTED),  # 复试线
                    _case(69, 66, 125, 118, 378, NOT_ADMITTED),
                ],
            },
            {
                "year": 2021,
                "plannedAdmissions": 55,
                "actualAdmissions": 55,
                "cases": [
                    _case(78, 80, 138, 130, 426, ADMITTED),
                    _case(72, 70, 130, 122, 394, ADMITTED),
                    _case(65, 64, 125, 115, 369, ADMITTED),  # 复试线
                    _case(62, 60, 120, 105, 347, NOT_ADMITTED),
                ],
            },
        ]
    },
}
