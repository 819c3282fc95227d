import random

from monitor import BOUNDS, METRICS, STEPS, Metric, SensorSimulator, initial_readings


def test_values_stay_within_bounds():
    sim = SensorSimulator(seed=1)
    r = initial_readings()
    for _ in range(5000):
        r = sim.advance(r)
        for m in METRICS:
            lo, hi = BOUNDS[m]
            assert lo <= r[m] <= hi


def test_bounds_hold_from_edges(readings):
    sim = SensorSimulator(seed=3)
    r = readings(temperature=40, humidity=30, soilMoisture=90, lightLevel=40, ambientMoisture=95)
    for _ in range(500):
        r = sim.advance(r)
        for m in METRICS:
            lo, hi = BOUNDS[m]
            assert lo <= r[m] <= hi


def test_step_never_exceeds_half_delta():
    sim = SensorSimulator(source=random.Random(9))
    prev = initial_readings()
    for _ in range(200):
        nxt = sim.advance(prev)
        for m in METRICS:
            assert abs(nxt[m] - prev[m]) <= STEPS[m] / 2 + 1e-9
        prev = nxt


def test_same_seed_same_walk():
    a, b = SensorSimulator(seed=5), SensorSimulator(seed=5)
    ra = rb = initial_readings()
    for _ in range(20):
        ra, rb = a.advance(ra), b.advance(rb)
    assert ra == rb


def test_scripted_source_moves_only_requested_metric(scripted):
    sim = SensorSimulator(source=scripted({Metric.TEMPERATURE: 1.0}))
    r = sim.advance(initial_readings())
    assert r[Metric.TEMPERATURE] == 26
    assert r[Metric.HUMIDITY] == 60


def test_clamps_at_upper_bound(scripted, readings):
    sim = SensorSimulator(source=scripted({Metric.TEMPERATURE: 1.5}))
    r = sim.advance(readings(temperature=39.5))
    assert r[Metric.TEMPERATURE] == 40
