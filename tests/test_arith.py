from int_line_store import NUMBERS, add, is_i32, multiply, subtract, wrap_i32

def test_numbers_constant():
    assert NUMBERS == 10000

def test_basic_arithmetic():
    assert add(2, 3) == 5
    assert subtract(2, 3) == -1
    assert multiply(-4, 6) == -24

def test_overflow_wraps():
    assert add(2147483647, 1) == -2147483648
    assert subtract(-2147483648, 1) == 2147483647
    assert multiply(65536, 65536) == 0
    assert multiply(2147483647, 2) == -2

def test_wrap_i32_identity_in_range():
    for v in (-2147483648, -1, 0, 1, 2147483647):
        assert wrap_i32(v) == v

def test_is_i32():
    assert is_i32(0)
    assert is_i32(-2147483648)
    assert not is_i32(2147483648)
    assert not is_i32(True)
    assert not is_i32(3.0)
