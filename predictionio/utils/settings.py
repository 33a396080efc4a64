# predictionio/utils/settings.py - env-driven configuration for the clients
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_ENGINE_URL = "http://localhost:8000"
DEFAULT_EVENT_URL = "http://localhost:7070"


@dataclass(frozen=True)
class Settings:
    engine_url: str = DEFAULT_ENGINE_URL
    event_url: str = DEFAULT_EVENT_URL
    access_key: str = ""
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Read settings from the environment (or the given mapping).

        - PIO_ENGINE_URL  -> engine_url
        - PIO_EVENT_URL   -> event_url
        - PIO_ACCESS_KEY  -> access_key
        - PIO_LOG_LEVEL   -> log_level
        """
        env = os.environ if environ is None else environ
        return cls(
            engine_url=env.get("PIO_ENGINE_URL", DEFAULT_ENGINE_URL),
            event_url=env.get("PIO_EVENT_URL", DEFAULT_EVENT_URL),
            access_key=env.get("PIO_ACCESS_KEY", "").strip(),
            log_level=env.get("PIO_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )
