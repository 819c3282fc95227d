import time

from monitor import MonitorController, SensorSimulator, Ticker


def _wait_for(cond, timeout=3.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if cond():
            return True
        time.sleep(0.01)
    return False


def test_ticker_drives_controller():
    ctl = MonitorController(simulator=SensorSimulator(seed=0))
    ticker = Ticker(ctl, interval=0.01)
    ticker.start()
    try:
        assert ticker.is_running()
        assert _wait_for(lambda: len(ctl.history()) >= 3)
    finally:
        ticker.stop(timeout=1)
    assert not ticker.is_running()


def test_start_is_idempotent():
    ticker = Ticker(MonitorController(), interval=0.05)
    ticker.start()
    thread = ticker._thread
    ticker.start()
    try:
        assert ticker._thread is thread
    finally:
        ticker.stop(timeout=1)


def test_stop_without_start_is_harmless():
    ticker = Ticker(MonitorController(), interval=0.05)
    ticker.stop()
    assert not ticker.is_running()


def test_restart_after_stop():
    ctl = MonitorController()
    ticker = Ticker(ctl, interval=0.01)
    ticker.start()
    ticker.stop(timeout=1)
    ticker.start()
    try:
        assert ticker.is_running()
    finally:
        ticker.stop(timeout=1)


class _FlakyController:
    def __init__(self):
        self.calls = 0

    def tick(self):
        self.calls += 1
        if self.calls == 1:
            raise RuntimeError("boom")


def test_failing_tick_does_not_kill_loop():
    ctl = _FlakyController()
    ticker = Ticker(ctl, interval=0.01)
    ticker.start()
    try:
        assert _wait_for(lambda: ctl.calls >= 3)
        assert ticker.is_running()
    finally:
        ticker.stop(timeout=1)
