"""
entropy.py — True-entropy draws for casting and revealing.

Every draw goes through the operating system CSPRNG. There is no seeded or
hash-derived fallback: if the platform cannot supply entropy, the error
propagates and the cast is abandoned.
"""

from __future__ import annotations
import logging
import secrets

logger = logging.getLogger(__name__)

BYTE_RANGE = 256
UNIFORM_BYTES = 4


class EntropySource:
    """Cryptographically strong random bytes and the draws built on them."""

    def bytes(self, n: int) -> bytes:
        """Return ``n`` raw bytes from the OS entropy pool."""
        if not isinstance(n, int) or n < 0:
            raise ValueError(f"Byte count must be a non-negative int, got {n!r}")
        return secrets.token_bytes(n)

    def byte(self) -> int:
        return self.bytes(1)[0]

    def uniform(self) -> float:
        """Uniform float in [0, 1) from 32 bits of entropy."""
        raw = int.from_bytes(self.bytes(UNIFORM_BYTES), "big")
        return raw / float(1 << (8 * UNIFORM_BYTES))

    def choice_index(self, count: int) -> int:
        """
        Exactly uniform index in [0, count) via rejection sampling.

        Bytes at or above the largest multiple of ``count`` that fits in
        256 are discarded, so every residue is equally likely.
        """
        if not 1 <= count <= BYTE_RANGE:
            raise ValueError(f"Choice count must be in 1..{BYTE_RANGE}, got {count}")
        limit = BYTE_RANGE - (BYTE_RANGE % count)
        while True:
            value = self.byte()
            if value < limit:
                return value % count
            logger.debug("Rejected byte %d (limit %d)", value, limit)
