"""
Canonical digests for nested data.

Ensures structurally equal input always produces the same digest:
- Mapping digests never depend on key order
- Sequence digests depend on item order unless told otherwise
- Every kind is hashed under its own type tag
"""

from collections.abc import Mapping
from typing import Any, List, Optional

from ..errors import CyclicStructureError, NumericEncodingError, UnknownTypeError
from ..model.digest import PrecomputedDigest
from ..model.options import HashOptions
from .hashing import (
    BOOLEAN_TAG,
    DICT_TAG,
    FLOAT_TAG,
    LIST_TAG,
    NIL_TAG,
    UNICODE_TAG,
    hash_tagged,
    sort_digests,
)
from .normalize import normalize_float


class Canonicalizer:
    """
    Computes the canonical digest of a value.

    Accepted kinds:
    - None
    - bool
    - str (a ``**REDACTED**<hex>`` literal embeds its digest instead)
    - int and float, both hashed as floats
    - list and tuple
    - mappings with str keys
    - PrecomputedDigest

    A Canonicalizer tracks the containers it is descending into and is
    not meant to be shared between threads.
    """

    def __init__(self, options: Optional[HashOptions] = None):
        self.options = options or HashOptions()
        self._visiting = set()
        self._path: List[str] = []

    def digest(self, value: Any) -> bytes:
        """
        Return the 32-byte digest of value.

        Raises UnknownTypeError, NumericEncodingError or CyclicStructureError.
        """
        if isinstance(value, PrecomputedDigest):
            return value.digest
        if value is None:
            return self._hash(NIL_TAG, b'')
        if isinstance(value, bool):
            return self._hash(BOOLEAN_TAG, b'1' if value else b'0')
        if isinstance(value, str):
            if PrecomputedDigest.is_literal(value):
                return PrecomputedDigest.from_literal(value).digest
            return self._hash(UNICODE_TAG, value.encode('utf-8'))
        if isinstance(value, (int, float)):
            return self._hash(FLOAT_TAG, self._normalize(value).encode('utf-8'))
        if isinstance(value, (list, tuple)):
            return self._hash_sequence(value)
        if isinstance(value, Mapping):
            return self._hash_mapping(value)

        raise UnknownTypeError(type(value).__name__, self._format_path())

    def _hash(self, tag: str, payload: bytes) -> bytes:
        return hash_tagged(tag, payload, self.options.algorithm)

    def _normalize(self, value) -> str:
        try:
            number = float(value)
        except OverflowError:
            raise NumericEncodingError(
                value, "integer too large for a double", self._format_path()
            )
        try:
            return normalize_float(number, self.options.max_mantissa_bits)
        except NumericEncodingError as e:
            if e.path is not None:
                raise
            raise NumericEncodingError(e.value, e.reason, self._format_path()) from e

    def _hash_sequence(self, items) -> bytes:
        self._enter(items)
        try:
            hashes = []
            for index, item in enumerate(items):
                self._path.append(f'[{index}]')
                try:
                    hashes.append(self.digest(item))
                finally:
                    self._path.pop()
        finally:
            self._leave(items)

        if self.options.ignore_array_item_order:
            hashes = sort_digests(hashes)
        return self._hash(LIST_TAG, b''.join(hashes))

    def _hash_mapping(self, mapping) -> bytes:
        self._enter(mapping)
        try:
            hashes = []
            for key, value in mapping.items():
                if not isinstance(key, str):
                    raise UnknownTypeError(
                        f"{type(key).__name__} (mapping keys must be str)",
                        self._format_path(),
                    )
                self._path.append(f'.{key}')
                try:
                    hashes.append(self.digest(key) + self.digest(value))
                finally:
                    self._path.pop()
        finally:
            self._leave(mapping)

        # Key order carries no meaning, so pair digests are always sorted
        return self._hash(DICT_TAG, b''.join(sort_digests(hashes)))

    def _enter(self, container) -> None:
        marker = id(container)
        if marker in self._visiting:
            raise CyclicStructureError(self._format_path())
        self._visiting.add(marker)

    def _leave(self, container) -> None:
        self._visiting.discard(id(container))

    def _format_path(self) -> str:
        return '$' + ''.join(self._path)


def canonical_digest(value: Any, options: Optional[HashOptions] = None) -> bytes:
    """
    Compute the canonical digest of a value.

    Same input and options always produce the same output.
    """
    return Canonicalizer(options).digest(value)
