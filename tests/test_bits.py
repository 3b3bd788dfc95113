"""Word-level regression tests for rotation, mixing and narrowing."""

import pytest

from rkiss.bits import MASK64, mix, narrow, rotl, to_hex


def _rotl_by_bits(x, k):
    bits = format(x, "064b")
    return int(bits[k:] + bits[:k], 2)


@pytest.mark.parametrize("k", [7, 13, 37])
@pytest.mark.parametrize(
    "x",
    [0, 1, MASK64, 0x8000000000000000, 0xF1EA5EED, 0xD4E12C77, 0x0123456789ABCDEF],
)
def test_rotl_matches_bit_string_rotation(x, k):
    assert rotl(x, k) == _rotl_by_bits(x, k)


def test_rotl_stays_within_64_bits():
    assert rotl(MASK64, 37) == MASK64
    assert rotl(0x8000000000000000, 7) == 0x40


def test_mix_on_initial_constants():
    a, b, c, d = mix(0xF1EA5EED, 0xD4E12C77, 0xD4E12C77, 0xD4E12C77)
    assert d == 0x00001A3372C3EFE4
    assert all(0 <= word <= MASK64 for word in (a, b, c, d))


def test_mix_wraps_subtraction():
    # a - rotl(b, 7) underflows; the result must still be an unsigned word
    a, b, c, d = mix(0, 1, 0, 0)
    e = (0 - (1 << 7)) & MASK64
    assert c == e
    assert a == 1
    assert d == (e + a) & MASK64


def test_narrow_unsigned_keeps_low_bits():
    value = 0xA23F7E2075FC0663
    assert narrow(value, "u64") == value
    assert narrow(value, "u32") == 0x75FC0663
    assert narrow(value, "u16") == 0x0663
    assert narrow(value, "u8") == 0x63


def test_narrow_signed_uses_twos_complement():
    assert narrow(MASK64, "i64") == -1
    assert narrow(0xA23F7E2075FC0663, "i64") == -6755542238148950429
    assert narrow(0x80, "i8") == -128
    assert narrow(0x7F, "i8") == 127


@pytest.mark.parametrize("kind", ["u128", "i128", "f64", ""])
def test_narrow_rejects_unknown_kinds(kind):
    with pytest.raises(ValueError):
        narrow(1, kind)


def test_to_hex_pads_to_width():
    assert to_hex(0x63, "u8") == "63"
    assert to_hex(1, "u32") == "00000001"
    assert to_hex(-1, "i16") == "ffff"
