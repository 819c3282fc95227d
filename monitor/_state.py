"""模拟状态 & 控制器 —— tick 与用户操作在同一把锁下串行执行"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional

from ._actions   import Action, Resolution, on_new_breaches, resolve
from ._alerts    import evaluate, status
from ._constants import HISTORY_CAPACITY, metric_metadata
from ._errors    import InvalidIndex
from ._history   import HistoryBuffer, HistoryEntry
from ._readings  import ReadingSet, initial_readings
from ._simulator import SensorSimulator

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    readings:        ReadingSet
    history:         HistoryBuffer
    pending_actions: List[Action] = field(default_factory=list)


class MonitorController:
    """
    唯一持有 SimulationState 的对象。

    每次 tick 依次执行：模拟 → 写入历史 → 判定越限 → 追加新动作；
    视图层通过 resolve_action 接受 / 忽略动作。
    """

    def __init__(
        self,
        simulator: Optional[SensorSimulator] = None,
        capacity: int = HISTORY_CAPACITY,
        initial: Optional[ReadingSet] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.simulator = simulator or SensorSimulator()
        self.clock     = clock
        self.state     = SimulationState(
            readings=initial if initial is not None else initial_readings(),
            history=HistoryBuffer(capacity),
        )
        self._lock = threading.Lock()

    # ──────────── 周期任务 ────────────

    def tick(self) -> ReadingSet:
        with self._lock:
            st = self.state
            st.readings = self.simulator.advance(st.readings)
            st.history.append(HistoryEntry(st.readings, self.clock()))

            before = len(st.pending_actions)
            st.pending_actions = on_new_breaches(evaluate(st.readings), st.pending_actions)
            for a in st.pending_actions[before:]:
                logger.info("[action] 新建议 %s: %s", a.metric.value, a.message)
            return st.readings

    # ──────────── 用户操作 ────────────

    def resolve_action(self, index: int, accepted: bool) -> Optional[Resolution]:
        """
        接受或忽略一条动作。

        下标失效（并发处理后的过期请求）时不抛异常，返回 None。
        """
        with self._lock:
            pending = self.state.pending_actions
            try:
                remaining = resolve(pending, index, accepted)
            except InvalidIndex as e:
                logger.warning("[action] 忽略过期请求: %s", e)
                return None
            result = Resolution(pending[index], accepted)
            self.state.pending_actions = remaining
        logger.info("[action] %s", result.message)
        return result

    # ──────────── 只读快照 ────────────

    def readings(self) -> ReadingSet:
        with self._lock:
            return self.state.readings

    def history(self) -> List[HistoryEntry]:
        with self._lock:
            return self.state.history.snapshot()

    def series(self, metric) -> list:
        with self._lock:
            return self.state.history.series(metric)

    def actions(self) -> List[Action]:
        with self._lock:
            return list(self.state.pending_actions)

    def status(self) -> dict:
        return status(self.readings())

    @staticmethod
    def metric_metadata() -> list:
        return metric_metadata()

    def snapshot(self) -> dict:
        """视图层一次取齐：当前读数、告警摘要、待处理动作、历史条数、最近采样时间"""
        with self._lock:
            st = self.state
            latest = st.history.latest()
            return {
                "readings": st.readings.to_dict(),
                "status":   status(st.readings),
                "actions":  [dict(index=i, **a.to_dict()) for i, a in enumerate(st.pending_actions)],
                "history_size": len(st.history),
                "updated_at":   latest.time.isoformat() if latest else None,
            }
