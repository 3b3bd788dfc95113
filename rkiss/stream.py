"""Deterministic draw runs with coarse stream sanity statistics."""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List

from .bits import narrow, to_hex, width_of
from .models import Draw, StreamStats
from .prng import DEFAULT_SEED, RKISS

logger = logging.getLogger(__name__)


@dataclass
class DrawConfig:
    """Configuration for a single draw run."""

    seed: int = DEFAULT_SEED
    count: int = 8
    kind: str = "u64"
    include_draws: bool = True
    hex_output: bool = True


def _ones_ratio(values: List[int], bits: int) -> float:
    if not values:
        return 0.0
    mask = (1 << bits) - 1
    ones = sum(bin(value & mask).count("1") for value in values)
    return ones / (len(values) * bits)


def run_draws(cfg: DrawConfig) -> Dict[str, Any]:
    """Draw ``cfg.count`` values from a fresh generator and summarise them."""

    bits, _ = width_of(cfg.kind)
    if cfg.count < 0:
        raise ValueError(f"count must be non-negative, got {cfg.count}")

    rng = RKISS(cfg.seed)
    values = [narrow(rng.next_u64(), cfg.kind) for _ in range(cfg.count)]

    draws: List[Draw]
    if cfg.hex_output:
        draws = [to_hex(value, cfg.kind) for value in values]
    else:
        draws = list(values)

    unique = len(set(values))
    stats = StreamStats(
        count=len(values),
        unique=unique,
        repeats=len(values) - unique,
        ones_ratio=round(_ones_ratio(values, bits), 6),
        first=draws[0] if draws else None,
        last=draws[-1] if draws else None,
    )
    logger.debug(
        "seed=%d kind=%s count=%d repeats=%d", cfg.seed, cfg.kind, stats.count, stats.repeats
    )

    return {
        "config": asdict(cfg),
        "draws": draws if cfg.include_draws else [],
        "stats": asdict(stats),
    }


if __name__ == "__main__":
    import json

    print(json.dumps(run_draws(DrawConfig()), indent=2))
