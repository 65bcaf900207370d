"""
Test package structure and exports.

Verifies that the package is correctly structured and exposes the right API.
"""

import objecthash
from objecthash import (
    object_hash,
    object_hash_hex,
    redact,
    ObjectHasher,
    HashOptions,
    PrecomputedDigest,
    ObjectHashError,
)


def test_package_exports():
    """Verify that the package exposes the expected names."""
    assert object_hash is not None
    assert object_hash_hex is not None
    assert redact is not None
    assert ObjectHasher is not None
    assert HashOptions is not None
    assert PrecomputedDigest is not None
    assert ObjectHashError is not None


def test_all_names_resolve():
    """Every name in __all__ is importable from the package."""
    for name in objecthash.__all__:
        assert getattr(objecthash, name) is not None


def test_subpackage_imports():
    """Verify that subpackages are importable (even if not exposed directly)."""
    import objecthash.integrity.hashing
    import objecthash.integrity.normalize
    import objecthash.integrity.canonical
    import objecthash.model.digest
    import objecthash.model.options

    assert objecthash.integrity.hashing.hash_tagged is not None
    assert objecthash.integrity.canonical.Canonicalizer is not None


def test_errors_share_base_class():
    """All public errors derive from ObjectHashError."""
    for name in (
        'NumericEncodingError',
        'UnknownTypeError',
        'CyclicStructureError',
        'InvalidDigestError',
        'InvalidOptionsError',
    ):
        assert issubclass(getattr(objecthash, name), ObjectHashError)
