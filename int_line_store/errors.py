from __future__ import annotations
import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

class IntStoreError(Exception):
    pass

class StorageIOError(IntStoreError, OSError):
    """
    Filesystem failure while opening, reading or writing a numbers file.
    The original exception is kept as __cause__.
    """
    def __init__(self, message: str, path: PathLike | None = None) -> None:
        super().__init__(message)
        self.path = os.fspath(path) if path is not None else None

    def __str__(self) -> str:
        msg = self.args[0] if self.args else ""
        if self.path is not None:
            return f"{msg}: {self.path}"
        return msg

class ValidationError(IntStoreError, ValueError):
    pass
