from __future__ import annotations
import logging
import os
import re
from typing import Iterable, List, Optional

from .arith import I32_MAX, I32_MIN, is_i32
from .errors import PathLike, StorageIOError, ValidationError
from .progress import Progress, ProgressCallback

log = logging.getLogger(__name__)

READ_T  = "read"
WRITE_T = "write"

# Optional sign and ASCII digits only; int() alone would also take "1_000" and non-ASCII digits
_INT_TOKEN = re.compile(r'[+-]?[0-9]+')

# Unicode White_Space; str.strip() with no argument also drops \x1c-\x1f
_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

def parse_token(token: str) -> int | None:
    """
    Parse one trimmed line as a signed 32-bit decimal integer.
    Returns None for anything else (blank, non-numeric, out of range).
    """
    if not _INT_TOKEN.fullmatch(token):
        return None
    value = int(token)
    if value < I32_MIN or value > I32_MAX:
        return None
    return value

class IntFileStorage:
    """
    Numbers file bound to a single path: one signed 32-bit integer per line.
    Every call opens and releases its own handle; nothing is cached between calls.
    """
    def __init__(self, path: PathLike) -> None:
        self.path = os.fspath(path)

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def read_numbers(self, on_progress: Optional[ProgressCallback] = None) -> List[int]:
        progress = Progress(on_progress)
        progress.start(READ_T, self.path)
        try:
            # Split on "\n" only; a lone "\r" stays inside the line
            fh = open(self.path, "r", encoding="utf-8", newline="\n")
        except OSError as exc:
            raise StorageIOError("cannot open numbers file for reading", self.path) from exc

        numbers: List[int] = []
        skipped = 0
        try:
            with fh:
                for line in fh:
                    value = parse_token(line.strip(_WHITESPACE))
                    if value is None:
                        skipped += 1
                        continue
                    numbers.append(value)
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageIOError("failed reading numbers file", self.path) from exc

        if skipped:
            log.debug("skipped %d unparseable line(s) in %s", skipped, self.path)
        log.debug("read %d number(s) from %s", len(numbers), self.path)
        progress.done(READ_T, f"{len(numbers)} read, {skipped} skipped")
        return numbers

    def write_numbers(
        self,
        numbers: Iterable[int],
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        values = list(numbers)
        for i, v in enumerate(values):
            if not is_i32(v):
                raise ValidationError(f"value at index {i} is not a 32-bit integer: {v!r}")

        progress = Progress(on_progress)
        progress.start(WRITE_T, self.path)
        try:
            # newline="\n": output is identical on every platform
            fh = open(self.path, "w", encoding="utf-8", newline="\n")
        except OSError as exc:
            raise StorageIOError("cannot open numbers file for writing", self.path) from exc

        total = len(values)
        step = max(1, total // 10)
        try:
            with fh:
                for i, n in enumerate(values, 1):
                    fh.write(f"{n}\n")
                    if i % step == 0 and i < total:
                        progress.emit(WRITE_T, i * 100 // total)
        except OSError as exc:
            # File may be left partially written
            raise StorageIOError("failed writing numbers file", self.path) from exc

        log.debug("wrote %d number(s) to %s", total, self.path)
        progress.done(WRITE_T, f"{total} written")

def read_from_file(path: PathLike, *, on_progress: Optional[ProgressCallback] = None) -> List[int]:
    return IntFileStorage(path).read_numbers(on_progress)

def write_to_file(
    path: PathLike,
    numbers: Iterable[int],
    *,
    on_progress: Optional[ProgressCallback] = None,
) -> None:
    IntFileStorage(path).write_numbers(numbers, on_progress)
