"""RandomSource ABC + secure and seeded implementations."""

from __future__ import annotations

import logging
import random
import secrets
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class RandomSource(ABC):
    """Supplies the raw bytes behind trace, span and event ids.

    Swap in a deterministic source for tests by implementing this ABC.
    """

    @abstractmethod
    def random_bytes(self, n: int) -> bytes: ...


class SecureRandomSource(RandomSource):
    """Backed by the OS CSPRNG via ``secrets``."""

    def random_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)


class SeededRandomSource(RandomSource):
    """Reproducible byte stream for tests."""

    def __init__(self, seed: int = 0) -> None:
        self._rng = random.Random(seed)

    def random_bytes(self, n: int) -> bytes:
        return self._rng.randbytes(n)


_source: RandomSource = SecureRandomSource()


def get_random_source() -> RandomSource:
    return _source


def set_random_source(source: RandomSource) -> RandomSource:
    """Install *source* process-wide and return the one it replaces."""
    global _source
    previous = _source
    _source = source
    logger.info("Random id source set to %s", type(source).__name__)
    return previous
