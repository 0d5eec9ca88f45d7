import json
from pathlib import Path
from typing import Any, Dict

from .config import DEFAULT_HISTORY_PATH


def log_event(action: str, payload: Dict[str, Any], path: Path = DEFAULT_HISTORY_PATH) -> None:
    """
    Append a simple JSON line to history for traceability.
    """
    record = {"action": action, **payload}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, ensure_ascii=False) + "\n")
    except OSError:
        # History failures should not break core functionality.
        pass
