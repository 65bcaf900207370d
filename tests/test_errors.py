"""
Test error reporting.

Verifies that unsupported input fails loudly with the offending location.
"""

from decimal import Decimal

import pytest

from objecthash import (
    object_hash,
    Canonicalizer,
    UnknownTypeError,
    CyclicStructureError,
    ObjectHashError,
)


class TestUnknownTypes:
    """Test rejection of values without a canonical encoding."""

    @pytest.mark.parametrize('value', [
        object(),
        b'bytes',
        bytearray(b'bytes'),
        {1, 2},
        frozenset(),
        Decimal('1.5'),
        1 + 2j,
    ])
    def test_rejected(self, value):
        with pytest.raises(UnknownTypeError) as excinfo:
            object_hash(value)

        assert excinfo.value.kind == type(value).__name__
        assert excinfo.value.path == '$'

    def test_is_type_error(self):
        """UnknownTypeError can also be caught as TypeError."""
        with pytest.raises(TypeError):
            object_hash(object())

    def test_nested_path(self):
        with pytest.raises(UnknownTypeError) as excinfo:
            object_hash({'a': [1, {'b': b'raw'}]})

        assert excinfo.value.path == '$.a[1].b'
        assert 'bytes' in str(excinfo.value)

    @pytest.mark.parametrize('key', [1, 1.5, None, ('a',)])
    def test_non_string_key(self, key):
        with pytest.raises(UnknownTypeError) as excinfo:
            object_hash({'ok': 1, key: 'value'})

        assert 'mapping keys must be str' in str(excinfo.value)


class TestCycles:
    """Test detection of self-referential structures."""

    def test_list_containing_itself(self):
        value = [1]
        value.append(value)

        with pytest.raises(CyclicStructureError) as excinfo:
            object_hash(value)

        assert excinfo.value.path == '$[1]'

    def test_indirect_cycle(self):
        outer = {'inner': {}}
        outer['inner']['back'] = [outer]

        with pytest.raises(CyclicStructureError) as excinfo:
            object_hash(outer)

        assert excinfo.value.path == '$.inner.back[0]'

    def test_shared_subtree_allowed(self):
        """The same object appearing twice is not a cycle."""
        shared = [1, 2]

        assert object_hash([shared, shared]) == object_hash([[1, 2], [1, 2]])
        assert object_hash({'a': shared, 'b': shared}) == object_hash({'a': [1, 2], 'b': [1, 2]})

    def test_canonicalizer_reusable_after_error(self):
        """A failed call leaves no state behind."""
        canonicalizer = Canonicalizer()
        cyclic = []
        cyclic.append(cyclic)

        with pytest.raises(CyclicStructureError):
            canonicalizer.digest({'x': cyclic})

        assert canonicalizer.digest({'x': [1]}) == object_hash({'x': [1]})


def test_errors_are_object_hash_errors():
    """Every failure can be caught through the common base class."""
    cyclic = []
    cyclic.append(cyclic)

    for value in (object(), cyclic, float('inf'), {2: 'x'}):
        with pytest.raises(ObjectHashError):
            object_hash(value)
