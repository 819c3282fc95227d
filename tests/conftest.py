import pytest

from monitor import METRICS, MonitorController, ReadingSet, SensorSimulator, Settings


class ScriptedSource:
    """按指标给出固定步长；未指定的指标步长为 0"""

    def __init__(self, steps=None):
        self.steps = {m: 0.0 for m in METRICS}
        self.steps.update(steps or {})
        self.calls = 0

    def uniform(self, a, b):
        m = METRICS[self.calls % len(METRICS)]
        self.calls += 1
        step = self.steps[m]
        return max(a, min(b, step))


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def readings():
    def make(**overrides):
        base = {
            "temperature": 25, "humidity": 60, "soilMoisture": 45,
            "lightLevel": 70, "ambientMoisture": 55,
        }
        base.update(overrides)
        return ReadingSet(base)
    return make


@pytest.fixture
def controller():
    return MonitorController(simulator=SensorSimulator(seed=42))


@pytest.fixture
def settings():
    return Settings(autostart=False)
