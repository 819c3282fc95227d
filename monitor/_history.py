"""滚动历史 —— 固定容量、按插入顺序、先进先出"""

from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Deque, List, Optional, Tuple

from ._constants import HISTORY_CAPACITY, Metric
from ._readings  import Key, ReadingSet


@dataclass(frozen=True)
class HistoryEntry:
    readings: ReadingSet
    time:     datetime

    def to_dict(self) -> dict:
        return {"time": self.time.isoformat(), **self.readings.to_dict()}


class HistoryBuffer:
    """超出容量时丢弃最旧的一条，从不重排"""

    def __init__(self, capacity: int = HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity 必须 ≥ 1")
        self.capacity = capacity
        self._entries: Deque[HistoryEntry] = deque(maxlen=capacity)

    def append(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)

    def snapshot(self) -> List[HistoryEntry]:
        """由旧到新的浅拷贝"""
        return list(self._entries)

    def latest(self) -> Optional[HistoryEntry]:
        return self._entries[-1] if self._entries else None

    def series(self, metric: Key) -> List[Tuple[datetime, float]]:
        """单个指标的时间序列，供多曲线图使用"""
        m = Metric(metric)
        return [(e.time, e.readings[m]) for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)
