"""Reproducible draw reports for a seeded Generator64."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .entropy import DeviceRandom, Source
from .generator import Generator64


@dataclass
class DrawConfig:
    """Configuration for a single draw run."""

    seed1: int = 42
    seed2: int = 42
    seq1: int = 54
    seq2: int = 54
    count: int = 32
    advance: int = 0  # applied after seeding, before the first draw
    source: Optional[str] = None  # "random" / "urandom" seeds from the device instead


def build_generator(cfg: DrawConfig) -> Generator64:
    if cfg.source is None:
        return Generator64.from_seed(cfg.seed1, cfg.seed2, cfg.seq1, cfg.seq2)
    with DeviceRandom(Source(cfg.source)) as device:
        return Generator64.from_source(device)


def run_draws(cfg: DrawConfig) -> Dict[str, Any]:
    """Seed, jump and draw, returning a JSON-ready report."""

    if cfg.count < 0:
        raise ValueError(f"count must be non-negative, got {cfg.count}")

    rng = build_generator(cfg)
    initial = rng.getstate()
    if cfg.advance:
        rng.advance(cfg.advance)
    values = rng.draws(cfg.count)

    return {
        "config": asdict(cfg),
        "initial": initial.as_dict(),
        "final": rng.getstate().as_dict(),
        "draws": [f"{value:#018x}" for value in values],
    }
