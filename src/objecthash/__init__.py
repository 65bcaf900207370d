"""
objecthash - Canonical cryptographic digests for nested data.

This package provides:
- Order-independent hashing of mappings
- Optionally order-independent hashing of sequences
- Platform-independent encoding of floating-point numbers
- Redacted literals embedding precomputed digests

Main entry point:
    object_hash - 32-byte digest of a value

Example usage:
    from objecthash import object_hash, redact

    digest = object_hash({'a': 1, 'b': [1, 2, 3]})

    # Same items, any order
    object_hash([3, 1, 2], ignore_array_item_order=True)

    # Hide a subtree without changing the digest
    object_hash({'a': 1, 'b': redact([1, 2, 3])}) == digest
"""

from .engine import ObjectHasher, object_hash, object_hash_hex, redact
from .errors import (
    ObjectHashError,
    NumericEncodingError,
    UnknownTypeError,
    CyclicStructureError,
    InvalidDigestError,
    InvalidOptionsError,
)
from .integrity.canonical import Canonicalizer
from .integrity.hashing import compare_digests
from .integrity.normalize import normalize_float
from .model.digest import PrecomputedDigest
from .model.options import HashOptions

__version__ = '0.1.0'

__all__ = [
    # Entry points
    'object_hash',
    'object_hash_hex',
    'redact',
    'ObjectHasher',

    # Errors
    'ObjectHashError',
    'NumericEncodingError',
    'UnknownTypeError',
    'CyclicStructureError',
    'InvalidDigestError',
    'InvalidOptionsError',

    # Building blocks
    'Canonicalizer',
    'compare_digests',
    'normalize_float',

    # Models
    'PrecomputedDigest',
    'HashOptions',
]
