from __future__ import annotations
from typing import Any, Callable, Dict, Optional

ProgressCallback = Callable[[Dict[str, Any]], None]

class Progress:
    """
    Thin wrapper over an optional on_progress callback.
    Events are dicts: {"phase": str, "pct": int, "msg": str}.
    """
    def __init__(self, callback: Optional[ProgressCallback] = None) -> None:
        self._cb = callback

    def emit(self, phase: str, pct: int, msg: str = "") -> None:
        if self._cb is None:
            return
        pct = max(0, min(100, int(pct)))
        self._cb({"phase": phase, "pct": pct, "msg": msg})

    def start(self, phase: str, msg: str = "") -> None:
        self.emit(phase, 0, msg)

    def done(self, phase: str, msg: str = "") -> None:
        self.emit(phase, 100, msg)
