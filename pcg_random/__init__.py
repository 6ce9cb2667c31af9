"""Public package surface for the two-stream PCG 64-bit generator."""

from .cache import shared
from .draws import DrawConfig, run_draws
from .entropy import DeviceRandom, EntropyUnavailableError, Source, default_source
from .generator import Generator64, SupportsFill, SupportsNextU64
from .models import GeneratorState
from .prng import MULTIPLIER, Stream32

__all__ = [
    "DeviceRandom",
    "DrawConfig",
    "EntropyUnavailableError",
    "Generator64",
    "GeneratorState",
    "MULTIPLIER",
    "Source",
    "Stream32",
    "SupportsFill",
    "SupportsNextU64",
    "default_source",
    "run_draws",
    "shared",
]
