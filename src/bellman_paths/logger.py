from __future__ import annotations

import json
import os
import sys
from datetime import datetime, timezone
from typing import Any


_LOG_DIR = os.environ.get("BFP_LOG_DIR", ".logs")
_MAX_BYTES = int(os.environ.get("BFP_LOG_MAX_BYTES", "1048576"))  # 1MB
_BACKUPS = int(os.environ.get("BFP_LOG_BACKUPS", "5"))
_TO_FILE = os.environ.get("BFP_LOG_TO_FILE", "1") != "0"


def log_path() -> str:
    return os.path.join(_LOG_DIR, "events.log")


def _rotate(path: str) -> None:
    for i in range(_BACKUPS, 0, -1):
        older = f"{path}.{i}"
        newer = f"{path}.{i-1}" if i > 1 else path
        if os.path.exists(older):
            os.remove(older)
        if os.path.exists(newer):
            os.rename(newer, older)


def _write_file_line(line: str) -> None:
    try:
        os.makedirs(_LOG_DIR, exist_ok=True)
        path = log_path()
        if os.path.exists(path) and os.path.getsize(path) > _MAX_BYTES:
            _rotate(path)
        with open(path, "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError as exc:
        # file output is best effort; stderr already has the record
        sys.stderr.write(f"log file write failed: {exc}\n")


def log_event(event: str, **fields: Any) -> None:
    """Emit one JSON event line on stderr and append it to the events file.

    stdout is left to command output.
    """
    record = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": event,
        **fields,
    }
    line = json.dumps(record, ensure_ascii=False, default=str)
    sys.stderr.write(line + "\n")
    sys.stderr.flush()
    if _TO_FILE:
        _write_file_line(line)
