"""传感器模拟引擎 —— 有界随机游走"""

import random
from typing import Optional, Protocol

from ._constants import METRICS, STEPS
from ._readings  import ReadingSet


class StepSource(Protocol):
    """随机步长来源；random.Random 实例天然满足"""

    def uniform(self, a: float, b: float) -> float: ...


class SensorSimulator:
    """
    由上一组读数推出下一组读数。

    每个指标独立地：
        next = clamp(prev + uniform(-δ/2, δ/2), min, max)

    测试时注入带种子的 random.Random（或任意实现 uniform 的对象）即可复现。
    """

    def __init__(self, source: Optional[StepSource] = None, seed: Optional[int] = None):
        self.source = source if source is not None else random.Random(seed)

    def advance(self, previous: ReadingSet) -> ReadingSet:
        nxt = {}
        for m in METRICS:
            half = STEPS[m] / 2
            nxt[m] = previous[m] + self.source.uniform(-half, half)
        # ReadingSet 构造时截断到合法范围
        return ReadingSet(nxt)
