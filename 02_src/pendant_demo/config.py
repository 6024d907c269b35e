"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
RESOURCES_DIR = Path(__file__).resolve().parent / "resources"
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "extension.log"

EXTENSION_ID = "com.yaskawa.yii.demoextension.ext"
EXTENSION_VENDOR = "Yaskawa"

# Languages this extension has been translated into
TRANSLATED_LOCALES = frozenset({"en", "ja"})


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


@dataclass
class ExtensionSettings:
    """Runtime settings for the extension process."""

    pendant_url: str = "http://localhost:20080"
    poll_interval: float = 0.1
    network_read_timeout: float = 1.5
    network_connect_timeout: float = 5.0
    output_events: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ExtensionSettings":
        return cls(
            pendant_url=os.getenv("PENDANT_URL", "http://localhost:20080"),
            poll_interval=float(os.getenv("POLL_INTERVAL", "0.1")),
            network_read_timeout=float(os.getenv("NETWORK_READ_TIMEOUT", "1.5")),
            network_connect_timeout=float(os.getenv("NETWORK_CONNECT_TIMEOUT", "5.0")),
            output_events=_env_flag("OUTPUT_EVENTS"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
