import sys

import pytest

from phantomcore.portable import (
    align,
    fourcc_i32,
    fourcc_u16,
    fourcc_u32,
    to_native_unsigned,
    to_network_unsigned,
)


@pytest.mark.parametrize("value", [0, 1, 3, 4, 5, 17, 255, 1000])
@pytest.mark.parametrize("alignment", [1, 2, 4, 8, 16])
def test_align_is_smallest_multiple_not_below(value, alignment):
    result = align(value, alignment)
    assert result % alignment == 0
    assert value <= result < value + alignment


def test_align_rejects_non_power_of_two():
    with pytest.raises(ValueError):
        align(10, 3)


def test_fourcc_i32_line():
    assert fourcc_i32("LINE") == 0x4C494E45


def test_fourcc_u32_bytes_are_the_text():
    assert fourcc_u32("BEZI").to_bytes(4, "big") == b"BEZI"


def test_fourcc_u16_bytes_are_the_text():
    assert fourcc_u16("AB").to_bytes(2, "big") == b"AB"


def test_fourcc_u16_keeps_last_two_characters():
    assert fourcc_u16("ABC") == fourcc_u16("BC")


def test_fourcc_i32_wraps_into_signed_range():
    code = fourcc_i32("ZZZZZ")
    assert -(1 << 31) <= code < (1 << 31)


def test_fourcc_rejects_non_ascii():
    with pytest.raises(ValueError):
        fourcc_u32("é")


@pytest.mark.parametrize("size", [2, 4, 8])
def test_network_memory_layout_is_big_endian(size):
    value = 0x0102030405060708 & ((1 << (8 * size)) - 1)
    net = to_network_unsigned(value, size)
    assert net.to_bytes(size, sys.byteorder) == value.to_bytes(size, "big")


@pytest.mark.parametrize("value", [0, 1, 0x1234, 0xDEADBEEF, 0xFFFFFFFF])
def test_native_network_round_trip(value):
    assert to_native_unsigned(to_network_unsigned(value, 4), 4) == value


def test_negative_value_rejected():
    with pytest.raises(OverflowError):
        to_network_unsigned(-1, 4)