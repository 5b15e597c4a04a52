"""
Syllabus catalog

Static, read-only list of curriculum topics (Jiangsu Education Press senior
high school mathematics, 2024 edition). Topic ids are the only values the
analysis service may reference in its report.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Iterable, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class SyllabusTopic:
    """One curriculum unit"""
    id: str
    name: str
    description: str
    module: str


class SyllabusCatalog:
    """Ordered, immutable catalog of syllabus topics keyed by id."""

    def __init__(self, topics: Iterable[SyllabusTopic]):
        ordered: Tuple[SyllabusTopic, ...] = tuple(topics)
        index: Dict[str, SyllabusTopic] = {}
        for topic in ordered:
            if topic.id in index:
                raise ValueError(f"Duplicate syllabus topic id: {topic.id}")
            index[topic.id] = topic
        self._topics = ordered
        self._index = index

    def __iter__(self) -> Iterator[SyllabusTopic]:
        return iter(self._topics)

    def __len__(self) -> int:
        return len(self._topics)

    def __contains__(self, topic_id: object) -> bool:
        return topic_id in self._index

    def get(self, topic_id: str) -> Optional[SyllabusTopic]:
        return self._index.get(topic_id)

    def ids(self) -> List[str]:
        return [topic.id for topic in self._topics]

    def to_serializable(self) -> List[Dict[str, str]]:
        """Plain dicts in catalog order, used for prompt serialization."""
        return [asdict(topic) for topic in self._topics]


_TOPICS = [
    # 必修第一册
    SyllabusTopic("M1-01", "集合", "集合的含义与表示、集合间的基本关系与基本运算", "必修第一册"),
    SyllabusTopic("M1-02", "常用逻辑用语", "充分条件与必要条件、全称量词与存在量词", "必修第一册"),
    SyllabusTopic("M1-03", "不等式", "不等式的性质、基本不等式、一元二次不等式的解法", "必修第一册"),
    SyllabusTopic("M1-04", "函数的概念与性质", "函数的定义域与值域、单调性、奇偶性、周期性", "必修第一册"),
    SyllabusTopic("M1-05", "指数函数与对数函数", "指数与对数运算、指数函数与对数函数的图像和性质", "必修第一册"),
    SyllabusTopic("M1-06", "函数的应用", "函数的零点、二分法、函数模型及其应用", "必修第一册"),
    SyllabusTopic("M1-07", "三角函数", "任意角与弧度制、三角函数的图像与性质、三角恒等变换", "必修第一册"),
    # 必修第二册
    SyllabusTopic("M2-01", "平面向量", "向量的线性运算、数量积、坐标表示及其应用", "必修第二册"),
    SyllabusTopic("M2-02", "解三角形", "正弦定理、余弦定理及其在测量中的应用", "必修第二册"),
    SyllabusTopic("M2-03", "复数", "复数的概念、几何意义与四则运算", "必修第二册"),
    SyllabusTopic("M2-04", "立体几何初步", "空间几何体、点线面位置关系、平行与垂直的判定和性质", "必修第二册"),
    SyllabusTopic("M2-05", "统计", "抽样方法、用样本估计总体、数字特征", "必修第二册"),
    SyllabusTopic("M2-06", "概率", "随机事件与概率、古典概型、事件的独立性", "必修第二册"),
    # 选择性必修第一册
    SyllabusTopic("S1-01", "直线与方程", "直线的斜率与倾斜角、直线方程、两直线位置关系、距离公式", "选择性必修第一册"),
    SyllabusTopic("S1-02", "圆与方程", "圆的方程、直线与圆、圆与圆的位置关系", "选择性必修第一册"),
    SyllabusTopic("S1-03", "圆锥曲线与方程", "椭圆、双曲线、抛物线的定义、标准方程与几何性质", "选择性必修第一册"),
    SyllabusTopic("S1-04", "数列", "等差数列、等比数列、数列求和与数学归纳法", "选择性必修第一册"),
    SyllabusTopic("S1-05", "导数及其应用", "导数的概念与运算、利用导数研究函数的单调性与极值最值", "选择性必修第一册"),
    # 选择性必修第二册
    SyllabusTopic("S2-01", "空间向量与立体几何", "空间向量的运算、用空间向量求角与距离", "选择性必修第二册"),
    SyllabusTopic("S2-02", "计数原理", "两个计数原理、排列与组合、二项式定理", "选择性必修第二册"),
    SyllabusTopic("S2-03", "概率与随机变量", "条件概率、离散型随机变量的分布列、二项分布与正态分布", "选择性必修第二册"),
    SyllabusTopic("S2-04", "统计案例", "成对数据的相关关系、一元线性回归模型、独立性检验", "选择性必修第二册"),
]

SYLLABUS = SyllabusCatalog(_TOPICS)

SYLLABUS_NAME = "苏教版高中数学（2024）"
