"""
Precomputed digest model.

A precomputed digest stands in for a subtree that was hashed elsewhere. It is
embedded into a parent as-is instead of being hashed again.
"""

import re

from ..errors import InvalidDigestError
from ..integrity.hashing import DIGEST_SIZE

REDACTED_PREFIX = '**REDACTED**'
REDACTED_PATTERN = re.compile(r'\*\*REDACTED\*\*[0-9a-f]{64}', re.IGNORECASE)


class PrecomputedDigest:
    """
    Immutable 32-byte digest embedded literally in a hashed structure.

    The legacy string form is ``**REDACTED**`` followed by 64 hex characters,
    in either case.
    """

    __slots__ = ('_digest',)

    def __init__(self, digest: bytes):
        """
        Wrap raw digest bytes.

        Raises InvalidDigestError if the digest is not exactly 32 bytes.
        """
        if not isinstance(digest, (bytes, bytearray)):
            raise InvalidDigestError(f"expected bytes, got {type(digest).__name__}")
        if len(digest) != DIGEST_SIZE:
            raise InvalidDigestError(
                f"expected {DIGEST_SIZE} bytes, got {len(digest)}"
            )
        self._digest = bytes(digest)

    @classmethod
    def from_hex(cls, hex_digest: str) -> 'PrecomputedDigest':
        """Build from 64 hex characters."""
        if not isinstance(hex_digest, str) or len(hex_digest) != DIGEST_SIZE * 2:
            raise InvalidDigestError(f"expected {DIGEST_SIZE * 2} hex characters")
        try:
            return cls(bytes.fromhex(hex_digest))
        except ValueError as e:
            raise InvalidDigestError(f"not hexadecimal: {e}")

    @classmethod
    def from_literal(cls, literal: str) -> 'PrecomputedDigest':
        """Parse a ``**REDACTED**<hex>`` literal."""
        if not cls.is_literal(literal):
            raise InvalidDigestError(f"not a redacted literal: {literal!r}")
        return cls(bytes.fromhex(literal[len(REDACTED_PREFIX):]))

    @staticmethod
    def is_literal(value) -> bool:
        """Return True if value is a string in redacted literal form."""
        return isinstance(value, str) and REDACTED_PATTERN.fullmatch(value) is not None

    @property
    def digest(self) -> bytes:
        return self._digest

    @property
    def literal(self) -> str:
        """The redacted string form, with a lowercase hex digest."""
        return REDACTED_PREFIX + self._digest.hex()

    def hex(self) -> str:
        return self._digest.hex()

    def __bytes__(self) -> bytes:
        return self._digest

    def __eq__(self, other) -> bool:
        if isinstance(other, PrecomputedDigest):
            return self._digest == other._digest
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._digest)

    def __repr__(self) -> str:
        return f"PrecomputedDigest({self.hex()[:8]}...)"
