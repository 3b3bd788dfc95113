"""64-bit word helpers shared by the RKISS generator."""

from typing import Dict, Tuple

MASK64 = (1 << 64) - 1

# Rotation amounts of the mixing step, one per rotated word.
ROT_B = 7
ROT_C = 13
ROT_D = 37

# kind -> (width in bits, signed)
WIDTHS: Dict[str, Tuple[int, bool]] = {
    "u8": (8, False),
    "u16": (16, False),
    "u32": (32, False),
    "u64": (64, False),
    "i8": (8, True),
    "i16": (16, True),
    "i32": (32, True),
    "i64": (64, True),
}


def rotl(x: int, k: int) -> int:
    """Circular left shift of a 64-bit word."""
    return ((x << k) | (x >> (64 - k))) & MASK64


def mix(a: int, b: int, c: int, d: int) -> Tuple[int, int, int, int]:
    """One mixing step; the last word of the result is the step's output."""
    e = (a - rotl(b, ROT_B)) & MASK64
    a = b ^ rotl(c, ROT_C)
    b = (c + rotl(d, ROT_D)) & MASK64
    c = (d + e) & MASK64
    d = (e + a) & MASK64
    return a, b, c, d


def width_of(kind: str) -> Tuple[int, bool]:
    try:
        return WIDTHS[kind]
    except KeyError:
        raise ValueError(
            f"Unsupported draw kind '{kind}'; expected one of {', '.join(WIDTHS)}."
        ) from None


def narrow(value: int, kind: str) -> int:
    """Keep the low-order bits of ``value`` that fit ``kind``.

    Signed kinds reinterpret the kept bits as two's complement, so
    ``narrow(2**64 - 1, "i64") == -1``.
    """
    bits, signed = width_of(kind)
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def to_hex(value: int, kind: str) -> str:
    """Zero-padded hex of a narrowed draw, two's complement for signed kinds."""
    bits, _ = width_of(kind)
    return format(value & ((1 << bits) - 1), "0{}x".format(bits // 4))
