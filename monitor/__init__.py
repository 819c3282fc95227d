"""
monitor 包 —— 植物健康监测的模拟遥测核心

组成:
    _constants   指标枚举、阈值、范围、步长、建议文案
    _readings    ReadingSet（完整且在界内的一组读数）
    _simulator   SensorSimulator，有界随机游走
    _history     HistoryBuffer，容量 30 的滚动历史
    _alerts      evaluate / status，越限判定
    _actions     on_new_breaches / resolve，去重的建议动作队列
    _state       MonitorController，串行执行 tick 与用户操作
    _ticker      Ticker，后台定时线程
    _config      Settings，环境变量配置

对外 API:
    create_monitor(settings) -> (controller, ticker)
"""

from typing import Optional, Tuple

from ._actions   import Action, Resolution, on_new_breaches, resolve
from ._alerts    import Breach, describe, evaluate, status
from ._config    import Settings
from ._constants import (
    ADVISORIES, BOUNDS, METRICS, STEPS, THRESHOLDS,
    Metric, metric_metadata,
)
from ._errors    import ConfigError, InvalidIndex, MonitorError
from ._history   import HistoryBuffer, HistoryEntry
from ._readings  import ReadingSet, initial_readings
from ._simulator import SensorSimulator
from ._state     import MonitorController, SimulationState
from ._ticker    import Ticker


def create_monitor(settings: Optional[Settings] = None) -> Tuple[MonitorController, Ticker]:
    """按配置装配控制器与定时线程（不自动启动）"""
    settings = settings or Settings()
    controller = MonitorController(
        simulator=SensorSimulator(seed=settings.seed),
        capacity=settings.history_capacity,
    )
    return controller, Ticker(controller, settings.tick_interval)


__all__ = [
    "Action", "Resolution", "on_new_breaches", "resolve",
    "Breach", "describe", "evaluate", "status",
    "Settings",
    "ADVISORIES", "BOUNDS", "METRICS", "STEPS", "THRESHOLDS",
    "Metric", "metric_metadata",
    "ConfigError", "InvalidIndex", "MonitorError",
    "HistoryBuffer", "HistoryEntry",
    "ReadingSet", "initial_readings",
    "SensorSimulator",
    "MonitorController", "SimulationState",
    "Ticker",
    "create_monitor",
]
