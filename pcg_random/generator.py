"""64-bit PCG generator built from two lock-stepped 32-bit streams.

Period: 2^64
State space: ~2^254
Cryptographically secure: No
Thread safe: No (use :func:`pcg_random.shared` for a per-thread instance)
"""

import copy
import operator
import struct
from dataclasses import dataclass, field
from typing import Iterator, List, Protocol, runtime_checkable

from .bits import MASK64, to_uint64
from .models import GeneratorState
from .prng import Stream32

SEED_WORDS = 4
SEED_BYTES = SEED_WORDS * 8
_SEED_LAYOUT = struct.Struct("<4Q")

_SEQUENCE_MASK = MASK64 >> 1


@runtime_checkable
class SupportsNextU64(Protocol):
    def next_u64(self) -> int: ...


@runtime_checkable
class SupportsFill(Protocol):
    def fill(self, buffer: bytearray) -> None: ...


def distinct_sequence(seq1: int, seq2: int) -> int:
    """Return ``seq2``, complemented when it would share ``seq1``'s stream."""
    seq1 = to_uint64(seq1)
    seq2 = to_uint64(seq2)
    if (seq1 & _SEQUENCE_MASK) == (seq2 & _SEQUENCE_MASK):
        return to_uint64(~seq2)
    return seq2


@dataclass
class Generator64:
    stream_a: Stream32 = field(default_factory=Stream32)
    stream_b: Stream32 = field(default_factory=Stream32)

    def __post_init__(self) -> None:
        # both halves must step independently
        if self.stream_a is self.stream_b:
            raise ValueError("stream_a and stream_b must be distinct Stream32 objects")

    @classmethod
    def from_seed(cls, seed1: int, seed2: int, seq1: int, seq2: int) -> "Generator64":
        generator = cls()
        generator.seed(seed1, seed2, seq1, seq2)
        return generator

    @classmethod
    def from_source(cls, source: object) -> "Generator64":
        generator = cls()
        generator.seed_from(source)
        return generator

    def seed(self, seed1: int, seed2: int, seq1: int, seq2: int) -> None:
        """Seed both streams, forcing them onto distinct sequences."""
        seq1 = operator.index(seq1)
        seq2 = distinct_sequence(seq1, operator.index(seq2))
        self.stream_a.seed(seed1, seq1)
        self.stream_b.seed(seed2, seq2)

    def seed_from_generator(self, source: SupportsNextU64) -> None:
        """Seed from four successive 64-bit draws of ``source``."""
        seed1 = source.next_u64()
        seed2 = source.next_u64()
        seq1 = source.next_u64()
        seq2 = source.next_u64()
        self.seed(seed1, seed2, seq1, seq2)

    def seed_from_bulk(self, source: SupportsFill) -> None:
        """Seed from one 32-byte fill, read as four little-endian words."""
        buffer = bytearray(SEED_BYTES)
        source.fill(buffer)
        self.seed(*_SEED_LAYOUT.unpack(buffer))

    def seed_from(self, source: object) -> None:
        if isinstance(source, SupportsFill):
            self.seed_from_bulk(source)
        elif isinstance(source, SupportsNextU64):
            self.seed_from_generator(source)
        else:
            raise TypeError(
                f"cannot seed from {type(source).__name__!r}: "
                "expected a fill(buffer) or next_u64() method"
            )

    def next_u64(self) -> int:
        # stream A supplies the high word
        return (self.stream_a.next_u32() << 32) | self.stream_b.next_u32()

    def advance(self, steps: int) -> None:
        """Move both streams ``steps`` draws forward (or back when negative)."""
        steps = operator.index(steps)
        self.stream_a.advance(steps)
        self.stream_b.advance(steps)

    def draws(self, count: int) -> List[int]:
        return [self.next_u64() for _ in range(count)]

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next_u64()

    def getstate(self) -> GeneratorState:
        return GeneratorState(
            state_a=self.stream_a.state,
            increment_a=self.stream_a.increment,
            state_b=self.stream_b.state,
            increment_b=self.stream_b.increment,
        )

    def setstate(self, state: GeneratorState) -> None:
        # GeneratorState validates odd increments on construction
        self.stream_a = Stream32(state.state_a, state.increment_a)
        self.stream_b = Stream32(state.state_b, state.increment_b)

    def copy(self) -> "Generator64":
        return copy.deepcopy(self)
