"""告警判定 —— 纯函数，无状态"""

from typing import FrozenSet, Iterable, List, Mapping, NamedTuple

from ._constants import METRICS, THRESHOLDS, Metric


class Breach(NamedTuple):
    metric: Metric
    value:  float


def evaluate(readings: Mapping) -> FrozenSet[Breach]:
    """读数严格大于阈值才算越限（等于阈值不算）"""
    values = {Metric(k): v for k, v in readings.items()}
    return frozenset(
        Breach(m, values[m]) for m in METRICS
        if m in values and values[m] > THRESHOLDS[m]
    )


def ordered(breaches: Iterable[Breach]) -> List[Breach]:
    """按规范指标顺序排列"""
    rank = {m: i for i, m in enumerate(METRICS)}
    return sorted(breaches, key=lambda b: rank[b.metric])


def describe(breach: Breach) -> str:
    return f"{breach.metric.value.upper()} too high: {breach.value:.1f}"


def status(readings: Mapping) -> dict:
    """告警面板摘要：healthy 为 True 表示所有指标均在安全线内"""
    found = ordered(evaluate(readings))
    return {
        "healthy": not found,
        "alerts": [
            {
                "metric":    b.metric.value,
                "value":     b.value,
                "threshold": THRESHOLDS[b.metric],
                "message":   describe(b),
            }
            for b in found
        ],
    }
