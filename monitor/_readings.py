"""读数集合 —— 每个指标恰好一个值，且都落在合法范围内"""

from collections.abc import Mapping
from typing import Dict, Iterator, Union

from ._constants import BOUNDS, INITIAL, METRICS, Metric

Key = Union[Metric, str]


def clamp(metric: Metric, value: float) -> float:
    lo, hi = BOUNDS[metric]
    return max(lo, min(hi, float(value)))


class ReadingSet(Mapping):
    """
    不可变的 {Metric: float} 映射。

    构造时校验所有指标齐全，越界值被截断到 [min, max]；
    既可用 Metric 也可用其字符串值（如 "soilMoisture"）取值。
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[Key, float]):
        normalized: Dict[Metric, float] = {}
        for key, val in values.items():
            normalized[Metric(key)] = val
        missing = [m.value for m in METRICS if m not in normalized]
        if missing:
            raise KeyError(f"读数缺少指标: {', '.join(missing)}")
        self._values = {m: clamp(m, normalized[m]) for m in METRICS}

    def __getitem__(self, key: Key) -> float:
        try:
            return self._values[Metric(key)]
        except ValueError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[Metric]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        inner = ", ".join(f"{m.value}={v:.2f}" for m, v in self._values.items())
        return f"ReadingSet({inner})"

    def to_dict(self) -> Dict[str, float]:
        return {m.value: v for m, v in self._values.items()}


def initial_readings() -> ReadingSet:
    """启动时的中位初值"""
    return ReadingSet(INITIAL)
