"""共享常量 —— 指标枚举、安全阈值、取值范围、随机游走步长、建议文案"""

from enum import Enum
from typing import Dict, Optional, Tuple


class Metric(str, Enum):
    """监测指标。声明顺序即规范顺序（告警排序、动作入队顺序均以此为准）"""

    TEMPERATURE      = "temperature"
    HUMIDITY         = "humidity"
    SOIL_MOISTURE    = "soilMoisture"
    LIGHT_LEVEL      = "lightLevel"
    AMBIENT_MOISTURE = "ambientMoisture"


METRICS: Tuple[Metric, ...] = tuple(Metric)

TICK_INTERVAL    = 2.0
HISTORY_CAPACITY = 30

# ── 安全阈值（严格大于才算越限） ──
THRESHOLDS: Dict[Metric, float] = {
    Metric.TEMPERATURE:      30.0,
    Metric.HUMIDITY:         80.0,
    Metric.SOIL_MOISTURE:    70.0,
    Metric.LIGHT_LEVEL:      90.0,
    Metric.AMBIENT_MOISTURE: 80.0,
}

# ── 合法取值范围 [min, max] ──
BOUNDS: Dict[Metric, Tuple[float, float]] = {
    Metric.TEMPERATURE:      (15.0, 40.0),
    Metric.HUMIDITY:         (30.0, 95.0),
    Metric.SOIL_MOISTURE:    (20.0, 90.0),
    Metric.LIGHT_LEVEL:      (40.0, 100.0),
    Metric.AMBIENT_MOISTURE: (30.0, 95.0),
}

# ── 每次 tick 的最大波动幅度 δ，实际步长 ∈ [-δ/2, δ/2] ──
STEPS: Dict[Metric, float] = {
    Metric.TEMPERATURE:      3.0,
    Metric.HUMIDITY:         5.0,
    Metric.SOIL_MOISTURE:    4.0,
    Metric.LIGHT_LEVEL:      6.0,
    Metric.AMBIENT_MOISTURE: 4.0,
}

# ── 启动时的中位初值 ──
INITIAL: Dict[Metric, float] = {
    Metric.TEMPERATURE:      25.0,
    Metric.HUMIDITY:         60.0,
    Metric.SOIL_MOISTURE:    45.0,
    Metric.LIGHT_LEVEL:      70.0,
    Metric.AMBIENT_MOISTURE: 55.0,
}

# ── 越限后的建议动作；环境湿度没有对应动作 ──
ADVISORIES: Dict[Metric, Optional[str]] = {
    Metric.TEMPERATURE:      "Turn on fan?",
    Metric.HUMIDITY:         "Increase ventilation?",
    Metric.SOIL_MOISTURE:    "Reduce watering?",
    Metric.LIGHT_LEVEL:      "Add shade?",
    Metric.AMBIENT_MOISTURE: None,
}

# ── 以下仅供视图层展示 ──
UNITS: Dict[Metric, str] = {
    Metric.TEMPERATURE:      "°C",
    Metric.HUMIDITY:         "%",
    Metric.SOIL_MOISTURE:    "%",
    Metric.LIGHT_LEVEL:      "%",
    Metric.AMBIENT_MOISTURE: "%",
}

COLORS: Dict[Metric, str] = {
    Metric.TEMPERATURE:      "#f59e0b",
    Metric.HUMIDITY:         "#3b82f6",
    Metric.SOIL_MOISTURE:    "#8b5cf6",
    Metric.LIGHT_LEVEL:      "#eab308",
    Metric.AMBIENT_MOISTURE: "#06b6d4",
}

LABELS: Dict[Metric, str] = {
    Metric.TEMPERATURE:      "Temp",
    Metric.HUMIDITY:         "Humidity",
    Metric.SOIL_MOISTURE:    "Soil",
    Metric.LIGHT_LEVEL:      "Light",
    Metric.AMBIENT_MOISTURE: "Moisture",
}


def metric_metadata() -> list:
    """按规范顺序返回全部指标的静态元数据（视图层只读）"""
    return [
        {
            "metric":    m.value,
            "label":     LABELS[m],
            "threshold": THRESHOLDS[m],
            "min":       BOUNDS[m][0],
            "max":       BOUNDS[m][1],
            "step":      STEPS[m],
            "unit":      UNITS[m],
            "color":     COLORS[m],
            "advisory":  ADVISORIES[m],
        }
        for m in METRICS
    ]
