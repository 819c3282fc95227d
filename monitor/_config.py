"""运行配置 —— 从环境变量（及 .env）读取，仅供应用外壳使用"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from ._constants import HISTORY_CAPACITY, TICK_INTERVAL
from ._errors    import ConfigError

_TRUE = {"1", "true", "yes", "on"}


def _parse(env: Mapping[str, str], name: str, cast, default):
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"环境变量 {name}={raw!r} 无法解析") from None


@dataclass(frozen=True)
class Settings:
    tick_interval:    float         = TICK_INTERVAL
    history_capacity: int           = HISTORY_CAPACITY
    seed:             Optional[int] = None
    host:             str           = "0.0.0.0"
    port:             int           = 5000
    autostart:        bool          = True

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        if env is None:
            load_dotenv()
            env = os.environ

        settings = cls(
            tick_interval    = _parse(env, "TICK_INTERVAL", float, TICK_INTERVAL),
            history_capacity = _parse(env, "HISTORY_CAPACITY", int, HISTORY_CAPACITY),
            seed             = _parse(env, "SIM_SEED", int, None),
            host             = env.get("HOST", "0.0.0.0") or "0.0.0.0",
            port             = _parse(env, "PORT", int, 5000),
            autostart        = env.get("AUTOSTART_TICKER", "1").strip().lower() in _TRUE,
        )
        if settings.tick_interval <= 0:
            raise ConfigError("TICK_INTERVAL 必须为正数")
        if settings.history_capacity < 1:
            raise ConfigError("HISTORY_CAPACITY 必须 ≥ 1")
        return settings
