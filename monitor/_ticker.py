"""后台定时线程 —— 固定间隔驱动 controller.tick()"""

import logging
import threading
from typing import Optional

from ._constants import TICK_INTERVAL
from ._state     import MonitorController

logger = logging.getLogger(__name__)


class Ticker:
    """
    守护线程，每隔 interval 秒调用一次 tick。

    不做漂移校正，也不补偿错过的 tick；stop() 是唯一的收尾操作。
    """

    def __init__(self, controller: MonitorController, interval: float = TICK_INTERVAL):
        self.controller = controller
        self.interval   = interval
        self._lock      = threading.Lock()
        self._stop      = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def _loop(self, stop: threading.Event):
        while not stop.wait(timeout=self.interval):
            try:
                self.controller.tick()
            except Exception:
                logger.exception("[tick] 本轮模拟失败")

    def start(self):
        with self._lock:
            if self.is_running():
                return
            self._stop = threading.Event()
            self._thread = threading.Thread(target=self._loop, args=(self._stop,),
                                            name="PlantTicker", daemon=True)
            self._thread.start()
            logger.info("[ticker] 已启动 (间隔 %ss)", self.interval)

    def stop(self, timeout: Optional[float] = None):
        with self._lock:
            if not self.is_running():
                return
            self._stop.set()
            thread, self._thread = self._thread, None
        thread.join(timeout)
        logger.info("[ticker] 已停止")

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
