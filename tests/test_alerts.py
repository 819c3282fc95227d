from monitor import Breach, Metric, describe, evaluate, status


def test_equal_to_threshold_is_not_a_breach():
    assert evaluate({Metric.TEMPERATURE: 30}) == frozenset()


def test_just_above_threshold_is_a_breach():
    assert evaluate({Metric.TEMPERATURE: 30.01}) == {Breach(Metric.TEMPERATURE, 30.01)}


def test_string_keys_accepted():
    assert {b.metric for b in evaluate({"lightLevel": 95})} == {Metric.LIGHT_LEVEL}


def test_healthy_reading_set(readings):
    assert evaluate(readings()) == frozenset()
    assert status(readings()) == {"healthy": True, "alerts": []}


def test_every_metric_can_breach(readings):
    r = readings(temperature=31, humidity=81, soilMoisture=71, lightLevel=91, ambientMoisture=81)
    assert {b.metric for b in evaluate(r)} == set(Metric)


def test_status_lists_alerts_in_canonical_order(readings):
    s = status(readings(lightLevel=95, temperature=32.24))
    assert s["healthy"] is False
    assert [a["metric"] for a in s["alerts"]] == ["temperature", "lightLevel"]
    assert s["alerts"][0]["message"] == "TEMPERATURE too high: 32.2"
    assert s["alerts"][1]["threshold"] == 90


def test_describe():
    assert describe(Breach(Metric.SOIL_MOISTURE, 75.04)) == "SOILMOISTURE too high: 75.0"
