"""Tests for low-level integer and byte helpers."""
import pytest

from zwiftcap.core.binary import find_byte, low_bits, trunc_div


def test_trunc_div_matches_floor_for_positive():
    assert trunc_div(7, 2) == 3
    assert trunc_div(6, 3) == 2


def test_trunc_div_rounds_toward_zero():
    assert trunc_div(-7, 2) == -3
    assert trunc_div(7, -2) == -3
    assert trunc_div(-7, -2) == 3


def test_trunc_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        trunc_div(1, 0)


def test_low_bits():
    assert low_bits(0x1F, 4) == 0xF
    assert low_bits(0xAB, 0) == 0
    with pytest.raises(ValueError):
        low_bits(1, -1)


def test_find_byte():
    data = b"\x01\x08\x02\x08"
    assert find_byte(data, 0x08) == 1
    assert find_byte(data, 0x08, start=2) == 3
    assert find_byte(data, 0x08, stop=1) is None
    assert find_byte(memoryview(data), 0x02) == 2
    assert find_byte(b"", 0x08) is None
