"""Per-thread default generator, seeded once from the OS entropy device."""

import logging
import threading

from . import entropy
from .generator import Generator64

logger = logging.getLogger(__name__)

_thread_local = threading.local()


def shared() -> Generator64:
    """Return this thread's generator, seeding it on first access.

    Raises :class:`~pcg_random.entropy.EntropyUnavailableError` when the
    default device cannot be read; nothing is cached in that case.
    """
    generator = getattr(_thread_local, "generator", None)
    if generator is None:
        generator = Generator64()
        generator.seed_from(entropy.default_source())
        _thread_local.generator = generator
        logger.debug("Seeded shared generator for thread %s", threading.get_ident())
    return generator
