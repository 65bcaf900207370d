"""
Tagged hashing using SHA-256 or BLAKE3.

Every digest is computed over a one-character type tag followed by the
payload, so values of different kinds never share an input.
"""

import hashlib
from functools import cmp_to_key
from typing import Iterable, List

import blake3

# Type tags
NIL_TAG = 'n'
UNICODE_TAG = 'u'
BOOLEAN_TAG = 'b'
INT_TAG = 'i'  # reserved, numbers are always hashed as floats
FLOAT_TAG = 'f'
LIST_TAG = 'l'
DICT_TAG = 'd'

TYPE_TAGS = (NIL_TAG, UNICODE_TAG, BOOLEAN_TAG, INT_TAG, FLOAT_TAG, LIST_TAG, DICT_TAG)

DEFAULT_ALGORITHM = 'sha256'
ALGORITHMS = ('sha256', 'blake3')

# Both algorithms produce 32-byte (256-bit) digests
DIGEST_SIZE = 32


def compute_hash(data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """
    Compute the raw digest of a byte string.

    Uses SHA-256 by default, BLAKE3 when requested.
    Returns 32 raw bytes.
    """
    if algorithm == 'sha256':
        return hashlib.sha256(data).digest()
    elif algorithm == 'blake3':
        return blake3.blake3(data).digest()
    else:
        raise ValueError(f"Unsupported hash algorithm: {algorithm}")


def hash_tagged(tag: str, payload: bytes, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """
    Hash a payload prefixed with its type tag.

    The tag is UTF-8 encoded and prepended to the payload before hashing,
    which keeps e.g. the empty string and nil apart.
    """
    return compute_hash(tag.encode('utf-8') + payload, algorithm)


def compare_digests(a: bytes, b: bytes) -> int:
    """
    Compare two digests by their hex representation.

    Returns -1, 0 or 1. Only equal digests compare as 0.
    """
    a_hex = a.hex()
    b_hex = b.hex()
    if a_hex < b_hex:
        return -1
    elif a_hex > b_hex:
        return 1
    return 0


def sort_digests(digests: Iterable[bytes]) -> List[bytes]:
    """Return digests in the canonical order used for unordered collections."""
    return sorted(digests, key=cmp_to_key(compare_digests))
