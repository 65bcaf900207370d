"""
Object hashing engine.

Main entry point coordinating options and canonicalization.
"""

import logging
from typing import Any, Optional

from .integrity.canonical import Canonicalizer
from .model.digest import PrecomputedDigest
from .model.options import HashOptions

logger = logging.getLogger(__name__)


class ObjectHasher:
    """
    Hasher bound to one set of options.

    This is the primary interface for:
    - Computing raw digests of nested values
    - Rendering digests as hex
    - Replacing values by their redacted literal

    Digests from two hashers are only comparable if their options are equal.
    """

    def __init__(self, options: Optional[Any] = None, **kwargs):
        """
        Create a hasher.

        Args:
            options: HashOptions, a mapping of option names, or None
            **kwargs: individual options overriding those in options
        """
        self.options = HashOptions.from_value(options, **kwargs)

    def hash(self, value: Any) -> bytes:
        """
        Compute the 32-byte digest of value.

        A fresh Canonicalizer is used per call, so a hasher can be shared
        between threads.
        """
        digest = Canonicalizer(self.options).digest(value)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Hashed %s with %s: %s",
                type(value).__name__, self.options.algorithm, digest.hex(),
            )
        return digest

    def hash_hex(self, value: Any) -> str:
        """Compute the digest of value as lowercase hex."""
        return self.hash(value).hex()

    def precompute(self, value: Any) -> PrecomputedDigest:
        """Hash value and wrap the digest for embedding in a larger structure."""
        return PrecomputedDigest(self.hash(value))

    def redact(self, value: Any) -> str:
        """
        Return the ``**REDACTED**<hex>`` literal for value.

        Substituting the literal for value anywhere inside a structure
        leaves that structure's digest unchanged.
        """
        return self.precompute(value).literal

    def __repr__(self) -> str:
        return f"ObjectHasher({self.options!r})"


def object_hash(value: Any, options: Optional[Any] = None, **kwargs) -> bytes:
    """
    Compute the canonical digest of value.

    Options:
        ignore_array_item_order (ignoreArrayItemOrder): when True, sequences
            with the same items in a different order hash the same.
        algorithm: 'sha256' (default) or 'blake3'.
        max_mantissa_bits: guard on the binary expansion of numbers.

    When comparing digests, both must have been produced with identical
    options. Returns 32 raw bytes.
    """
    return ObjectHasher(options, **kwargs).hash(value)


def object_hash_hex(value: Any, options: Optional[Any] = None, **kwargs) -> str:
    """Compute the canonical digest of value as lowercase hex."""
    return ObjectHasher(options, **kwargs).hash_hex(value)


def redact(value: Any, options: Optional[Any] = None, **kwargs) -> str:
    """Return the redacted literal standing in for value."""
    return ObjectHasher(options, **kwargs).redact(value)
