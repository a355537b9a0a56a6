"""Application settings with JSON persistence.

Settings are stored at:
    ~/.config/hourglass/settings.json

Usage::

    settings = load_settings()
    settings.countdown = True
    save_settings(settings)

    engine.start(**settings.start_options())
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, field, fields
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "hourglass"
SETTINGS_PATH = CONFIG_DIR / "settings.json"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    """Default options for the console runner."""

    # ── timer ─────────────────────────────────────────────────────────
    precision: str = "seconds"             # seconds | minutes | hours
    countdown: bool = False
    start_values: list[int] = field(default_factory=lambda: [0, 0, 0])
    target: list[int] | None = None        # [seconds, minutes, hours]

    # ── logging ───────────────────────────────────────────────────────
    log_level: str = "WARNING"

    def start_options(self) -> dict[str, Any]:
        """Keyword arguments for ``TimerEngine.start``."""
        return {
            "precision": self.precision,
            "countdown": self.countdown,
            "start_values": list(self.start_values),
            "target": list(self.target) if self.target is not None else None,
        }


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", SETTINGS_PATH, exc)
        return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )


def configure_logging(level: str | int = "WARNING") -> None:
    """Console logging for the runner.  The library itself never calls this."""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
