import pytest

from maskrecover.bitops import (
    and_bytes,
    or_bytes,
    rotate_left,
    rotate_right,
    xor_bytes,
)

DATA = bytes(range(0, 256, 7))
MASK = bytes((b * 31 + 5) % 256 for b in range(len(DATA)))


def test_xor_round_trip():
    assert xor_bytes(xor_bytes(DATA, MASK), MASK) == DATA


def test_xor_with_itself_is_zero():
    assert xor_bytes(DATA, DATA) == bytes(len(DATA))


def test_or_and_identities():
    ones = b"\xff" * len(DATA)
    zeros = bytes(len(DATA))
    assert or_bytes(DATA, zeros) == DATA
    assert or_bytes(DATA, ones) == ones
    assert and_bytes(DATA, ones) == DATA
    assert and_bytes(DATA, zeros) == zeros


def test_or_and_bounds():
    ored = or_bytes(DATA, MASK)
    anded = and_bytes(DATA, MASK)
    assert all(o & d == d for o, d in zip(ored, DATA))
    assert all(a | d == d for a, d in zip(anded, DATA))


@pytest.mark.parametrize("op", [xor_bytes, or_bytes, and_bytes])
def test_length_mismatch_raises(op):
    with pytest.raises(ValueError):
        op(b"\x01\x02", b"\x01")


@pytest.mark.parametrize("n", range(0, 9))
def test_rotation_round_trip(n):
    assert rotate_right(rotate_left(DATA, n), n) == DATA
    assert rotate_left(rotate_right(DATA, n), n) == DATA


def test_rotation_by_zero_and_eight_is_identity():
    assert rotate_left(DATA, 0) == DATA
    assert rotate_left(DATA, 8) == DATA
    assert rotate_right(DATA, 8) == DATA


def test_rotate_pinned_values():
    assert rotate_left(b"\x81", 1) == b"\x03"
    assert rotate_right(b"\x81", 1) == b"\xc0"


def test_left_equals_right_complement():
    assert rotate_left(DATA, 3) == rotate_right(DATA, 5)


@pytest.mark.parametrize("n", [-1, 9])
def test_rotation_out_of_range(n):
    with pytest.raises(ValueError):
        rotate_left(DATA, n)
    with pytest.raises(ValueError):
        rotate_right(DATA, n)