"""Public package surface for the RKISS hash-key generator."""

from .bits import WIDTHS, mix, narrow, rotl
from .models import StreamStats
from .prng import DEFAULT_SEED, RKISS
from .stream import DrawConfig, run_draws

__all__ = [
    "DEFAULT_SEED",
    "DrawConfig",
    "RKISS",
    "StreamStats",
    "WIDTHS",
    "mix",
    "narrow",
    "rotl",
    "run_draws",
]
