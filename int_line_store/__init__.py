from .arith import NUMBERS, I32_MAX, I32_MIN, add, is_i32, multiply, subtract, wrap_i32
from .errors import IntStoreError, StorageIOError, ValidationError
from .progress import Progress
from .storage import IntFileStorage, parse_token, read_from_file, write_to_file

__all__ = [
    "NUMBERS",
    "I32_MAX",
    "I32_MIN",
    "add",
    "subtract",
    "multiply",
    "is_i32",
    "wrap_i32",
    "IntStoreError",
    "StorageIOError",
    "ValidationError",
    "Progress",
    "IntFileStorage",
    "parse_token",
    "read_from_file",
    "write_to_file",
]
