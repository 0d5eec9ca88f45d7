import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

CONFIG_PATH = Path.home() / ".image_resolution.json"
DEFAULT_HISTORY_PATH = Path.home() / ".image_resolution_history.jsonl"
DEFAULT_PRECISION = 2

ENV_HISTORY = "IMAGE_RESOLUTION_HISTORY"
ENV_HISTORY_PATH = "IMAGE_RESOLUTION_HISTORY_PATH"
ENV_PRECISION = "IMAGE_RESOLUTION_PRECISION"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class CliConfig:
    history_enabled: bool = True
    history_path: Path = DEFAULT_HISTORY_PATH
    precision: int = DEFAULT_PRECISION

    def to_dict(self) -> Dict[str, object]:
        return {
            "history_enabled": self.history_enabled,
            "history_path": str(self.history_path),
            "precision": self.precision,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "CliConfig":
        config = cls()
        enabled = _parse_bool(data.get("history_enabled"))
        if enabled is not None:
            config.history_enabled = enabled
        if data.get("history_path"):
            config.history_path = Path(str(data["history_path"])).expanduser()
        precision = _parse_precision(data.get("precision"))
        if precision is not None:
            config.precision = precision
        return config


def _parse_bool(value: object) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    return None


def _parse_precision(value: object) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        precision = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if precision < 0:
        return None
    return precision


def _merge_env(config: CliConfig) -> CliConfig:
    enabled = _parse_bool(os.getenv(ENV_HISTORY, ""))
    if enabled is not None:
        config.history_enabled = enabled
    history_path = os.getenv(ENV_HISTORY_PATH, "")
    if history_path:
        config.history_path = Path(history_path).expanduser()
    precision = _parse_precision(os.getenv(ENV_PRECISION) or None)
    if precision is not None:
        config.precision = precision
    return config


def load_config(path: Path = CONFIG_PATH) -> CliConfig:
    """
    Load CLI settings from the JSON config file, then apply environment overrides.

    A missing or malformed file leaves the defaults in place.
    """
    config = CliConfig()
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                config = CliConfig.from_dict(data)
        except (OSError, ValueError):
            pass
    return _merge_env(config)


def save_config(config: CliConfig, path: Path = CONFIG_PATH) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
