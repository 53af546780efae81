#!/usr/bin/env python3
# Example usage of int_line_store: write a numbers file, read it back.

import random

from int_line_store import NUMBERS, add, multiply, read_from_file, write_to_file
from int_line_store.console import progress_printer

def main() -> None:
    numbers = [random.randint(-1000, 1000) for _ in range(NUMBERS)]
    write_to_file("demo_numbers.txt", numbers, on_progress=progress_printer)

    # Unparseable lines would be skipped silently
    loaded = read_from_file("demo_numbers.txt", on_progress=progress_printer)
    assert loaded == numbers

    total = 0
    for n in loaded:
        total = add(total, n)
    print("Sum (i32):", total)
    print("First * last (i32):", multiply(loaded[0], loaded[-1]))

if __name__ == "__main__":
    main()
