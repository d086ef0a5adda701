from __future__ import annotations


def trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (C-style), unlike ``//``."""
    if denominator == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def low_bits(value: int, count: int) -> int:
    if count < 0:
        raise ValueError("count must be non-negative")
    return value & ((1 << count) - 1)


def find_byte(data: bytes | memoryview, needle: int, start: int = 0, stop: int | None = None) -> int | None:
    end = len(data) if stop is None else min(stop, len(data))
    for index in range(max(start, 0), end):
        if data[index] == needle:
            return index
    return None
