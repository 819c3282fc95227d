"""建议动作队列 —— 按指标去重的待确认提示，支持接受 / 忽略"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from ._alerts    import Breach, ordered
from ._constants import ADVISORIES, Metric
from ._errors    import InvalidIndex


@dataclass(frozen=True, eq=False)
class Action:
    """
    一条待处理建议。以身份比较：resolve 只移除，不重建。

    同一时刻每个指标至多一条 Action（去重键为 metric）。
    """

    metric:  Metric
    message: str

    def to_dict(self) -> dict:
        return {"type": self.metric.value, "msg": self.message}


@dataclass(frozen=True)
class Resolution:
    action:   Action
    accepted: bool

    @property
    def message(self) -> str:
        verb = "approved" if self.accepted else "dismissed"
        return f"Action {verb}: {self.action.metric.value}"

    def to_dict(self) -> dict:
        return {
            "accepted": self.accepted,
            "action":   self.action.to_dict(),
            "message":  self.message,
        }


def on_new_breaches(breaches: Iterable[Breach], pending: Sequence[Action]) -> List[Action]:
    """
    追加尚未有待处理动作的越限指标（append-if-absent）。

    - 新动作按规范指标顺序追加，与 breaches 的迭代顺序无关
    - 已有待处理动作的指标直接忽略：不重复、不刷新
    - 没有建议文案的指标不产生动作
    - 不修改传入的 pending，原有 Action 对象原样保留
    """
    result = list(pending)
    present = {a.metric for a in result}
    for b in ordered(breaches):
        message = ADVISORIES.get(b.metric)
        if message is None or b.metric in present:
            continue
        result.append(Action(b.metric, message))
        present.add(b.metric)
    return result


def resolve(pending: Sequence[Action], index: int, accepted: bool) -> List[Action]:
    """
    移除下标处的动作，accepted 与否结果相同；接受后的提示由调用方负责。

    下标越界（含负数）抛出 InvalidIndex。
    """
    if not 0 <= index < len(pending):
        raise InvalidIndex(index, len(pending))
    return [a for i, a in enumerate(pending) if i != index]
