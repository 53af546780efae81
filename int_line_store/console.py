from __future__ import annotations
import sys
from typing import Any, Dict

from rich.console import Console

_console = Console(file=sys.stderr, color_system="standard")

def progress_printer(evt: Dict[str, Any], console: Console | None = None) -> None:
    """
    on_progress callback that renders events as "[progress] <phase> <pct>% - <msg>".
    """
    con = console or _console
    phase = evt.get("phase", "")
    pct = int(evt.get("pct", 0))
    msg = evt.get("msg", "")
    parts = [p for p in (phase, f"{pct}%", (f"- {msg}" if msg else "")) if p]
    con.print("[progress] " + " ".join(parts), highlight=False, markup=False, soft_wrap=True)
