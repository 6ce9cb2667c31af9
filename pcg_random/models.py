from dataclasses import asdict, dataclass
from typing import Dict

from .bits import MASK64


@dataclass(frozen=True)
class GeneratorState:
    """Snapshot of both streams of a Generator64."""

    state_a: int
    increment_a: int
    state_b: int
    increment_b: int

    def __post_init__(self) -> None:
        for name, value in asdict(self).items():
            if not 0 <= value <= MASK64:
                raise ValueError(f"{name} must fit in 64 bits, got {value:#x}")
        if not self.increment_a & 1 or not self.increment_b & 1:
            raise ValueError("stream increments must be odd")

    def as_dict(self) -> Dict[str, str]:
        # hex strings survive JSON round trips without float coercion
        return {name: f"{value:#018x}" for name, value in asdict(self).items()}

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "GeneratorState":
        def _parse(value: object) -> int:
            return int(value, 0) if isinstance(value, str) else int(value)

        return cls(
            state_a=_parse(payload["state_a"]),
            increment_a=_parse(payload["increment_a"]),
            state_b=_parse(payload["state_b"]),
            increment_b=_parse(payload["increment_b"]),
        )
