"""Operating system entropy device used to seed generators.

Reads ``/dev/random`` or ``/dev/urandom`` directly. Statistical quality and
blocking behaviour follow the OS implementation; reads are serialised so one
instance may be shared between threads.
"""

import enum
import logging
import struct
import threading
from typing import BinaryIO, Optional

logger = logging.getLogger(__name__)

_U64 = struct.Struct("<Q")


class EntropyUnavailableError(RuntimeError):
    """The entropy device could not be opened or read."""


class Source(enum.Enum):
    RANDOM = "random"  # usually blocks until enough device entropy
    URANDOM = "urandom"  # usually non-blocking

    @property
    def path(self) -> str:
        return "/dev/" + self.value


class DeviceRandom:
    def __init__(self, source: Source = Source.URANDOM, path: Optional[str] = None):
        self.source = source
        self.path = path or source.path
        self._lock = threading.Lock()
        try:
            self._handle: Optional[BinaryIO] = open(self.path, "rb", buffering=0)
        except OSError as exc:
            raise EntropyUnavailableError(f"Unable to read {self.path}") from exc
        logger.debug("Opened entropy device %s", self.path)

    def fill(self, buffer: bytearray) -> None:
        """Fill ``buffer`` completely, retrying short device reads."""
        view = memoryview(buffer)
        with self._lock:
            if self._handle is None:
                raise EntropyUnavailableError(f"{self.path} is closed")
            filled = 0
            while filled < len(view):
                try:
                    count = self._handle.readinto(view[filled:])
                except OSError as exc:
                    raise EntropyUnavailableError(f"Unable to read {self.path}") from exc
                if not count:
                    raise EntropyUnavailableError(f"{self.path} returned no data")
                filled += count

    def next_u64(self) -> int:
        buffer = bytearray(_U64.size)
        self.fill(buffer)
        return _U64.unpack(buffer)[0]

    def close(self) -> None:
        with self._lock:
            if self._handle is not None:
                self._handle.close()
                self._handle = None

    def __enter__(self) -> "DeviceRandom":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<DeviceRandom path={self.path!r}>"


_default_source: Optional[DeviceRandom] = None
_default_lock = threading.Lock()


def default_source() -> DeviceRandom:
    """Return the process-wide ``/dev/urandom`` reader, opening it on first use."""
    global _default_source
    with _default_lock:
        if _default_source is None:
            _default_source = DeviceRandom(Source.URANDOM)
        return _default_source
