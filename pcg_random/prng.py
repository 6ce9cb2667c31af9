# PCG32 stream (XSH-RR output, 64-bit state) used as one half of Generator64
# Source: Melissa O'Neill's reference pcg32 (http://www.pcg-random.org)
import operator
from dataclasses import dataclass

from .bits import jump_coefficients, to_uint64, xsh_rr

MULTIPLIER = 0x5851F42D4C957F2D

DEFAULT_STATE = 0x853C49E6748FEA9B
DEFAULT_INCREMENT = 0xDA3E39CB94B95BDB  # default stream, odd


@dataclass
class Stream32:
    state: int = DEFAULT_STATE
    increment: int = DEFAULT_INCREMENT

    def __post_init__(self) -> None:
        self.state = to_uint64(operator.index(self.state))
        self.increment = to_uint64(operator.index(self.increment))
        if not self.increment & 1:
            raise ValueError(f"increment must be odd, got {self.increment:#x}")

    def seed(self, init_state: int, init_seq: int) -> None:
        """Place the stream on sequence ``init_seq`` starting from ``init_state``.

        Only the low 63 bits of ``init_seq`` select the stream; the increment is
        forced odd.
        """
        init_state = operator.index(init_state)
        init_seq = operator.index(init_seq)
        self.state = 0
        self.increment = to_uint64(init_seq << 1) | 1
        self._step()
        self.state = to_uint64(self.state + init_state)
        self._step()

    def next_u32(self) -> int:
        # emit from the pre-step state
        old_state = self.state
        self._step()
        return xsh_rr(old_state)

    def advance(self, steps: int) -> None:
        """Jump ``steps`` outputs ahead (negative values jump back) in O(log n)."""
        acc_mult, acc_plus = jump_coefficients(
            MULTIPLIER, self.increment, operator.index(steps)
        )
        self.state = to_uint64(acc_mult * self.state + acc_plus)

    def _step(self) -> None:
        self.state = to_uint64(self.state * MULTIPLIER + self.increment)
