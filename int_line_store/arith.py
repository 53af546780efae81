from __future__ import annotations

# Default count of numbers an external caller generates or processes.
NUMBERS = 10000

I32_MIN = -(2 ** 31)
I32_MAX = 2 ** 31 - 1
_MOD = 2 ** 32

def is_i32(value: object) -> bool:
    # bool is an int subclass but never a valid entry
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return I32_MIN <= value <= I32_MAX

def wrap_i32(value: int) -> int:
    """
    Two's-complement wrap-around into the signed 32-bit range.
    """
    value = (value - I32_MIN) % _MOD
    return value + I32_MIN

def add(a: int, b: int) -> int:
    return wrap_i32(a + b)

def subtract(a: int, b: int) -> int:
    return wrap_i32(a - b)

def multiply(a: int, b: int) -> int:
    return wrap_i32(a * b)
