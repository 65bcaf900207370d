"""
Hashing options model.

Two digests are only comparable when they were computed with equal options.
"""

from typing import Any, Mapping, Optional

from ..errors import InvalidOptionsError
from ..integrity.hashing import ALGORITHMS, DEFAULT_ALGORITHM
from ..integrity.normalize import DEFAULT_MAX_MANTISSA_BITS

# Alternative spellings accepted in option mappings
OPTION_ALIASES = {
    'ignoreArrayItemOrder': 'ignore_array_item_order',
    'maxMantissaBits': 'max_mantissa_bits',
}

OPTION_NAMES = ('ignore_array_item_order', 'algorithm', 'max_mantissa_bits')


class HashOptions:
    """
    Immutable set of options for one hash computation.
    """

    __slots__ = ('ignore_array_item_order', 'algorithm', 'max_mantissa_bits')

    def __init__(
        self,
        ignore_array_item_order: bool = False,
        algorithm: str = DEFAULT_ALGORITHM,
        max_mantissa_bits: int = DEFAULT_MAX_MANTISSA_BITS,
    ):
        """
        Create hashing options.

        Args:
            ignore_array_item_order: hash sequences independently of item order
            algorithm: 'sha256' or 'blake3'
            max_mantissa_bits: guard on the length of a number's mantissa
        """
        if algorithm not in ALGORITHMS:
            raise InvalidOptionsError(
                f"unsupported algorithm {algorithm!r}, expected one of {', '.join(ALGORITHMS)}"
            )
        if isinstance(max_mantissa_bits, bool) or not isinstance(max_mantissa_bits, int) \
                or max_mantissa_bits < 1:
            raise InvalidOptionsError(
                f"max_mantissa_bits must be a positive integer, got {max_mantissa_bits!r}"
            )

        object.__setattr__(self, 'ignore_array_item_order', bool(ignore_array_item_order))
        object.__setattr__(self, 'algorithm', algorithm)
        object.__setattr__(self, 'max_mantissa_bits', max_mantissa_bits)

    def __setattr__(self, name, value):
        raise AttributeError("HashOptions is immutable")

    @staticmethod
    def _option_names(data: Mapping[str, Any]) -> dict:
        """Map accepted spellings to option names, rejecting unknown ones."""
        named = {}
        for key, value in data.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in OPTION_NAMES:
                raise InvalidOptionsError(f"unknown option {key!r}")
            if name in named:
                raise InvalidOptionsError(f"option {name!r} given more than once")
            named[name] = value
        return named

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'HashOptions':
        """
        Build options from a mapping.

        Accepts snake_case names and the camelCase aliases.
        Raises InvalidOptionsError on unknown names.
        """
        return cls(**cls._option_names(data))

    @classmethod
    def from_value(cls, options: Optional[Any] = None, **overrides) -> 'HashOptions':
        """
        Coerce None, a HashOptions or a mapping into HashOptions.

        Keyword overrides are applied on top.
        """
        if options is None:
            merged = {}
        elif isinstance(options, HashOptions):
            if not overrides:
                return options
            merged = options.to_dict()
        elif isinstance(options, Mapping):
            merged = cls._option_names(options)
        else:
            raise InvalidOptionsError(
                f"expected a mapping or HashOptions, got {type(options).__name__}"
            )

        merged.update(cls._option_names(overrides))
        return cls(**merged)

    def to_dict(self) -> dict:
        return {
            'ignore_array_item_order': self.ignore_array_item_order,
            'algorithm': self.algorithm,
            'max_mantissa_bits': self.max_mantissa_bits,
        }

    def __eq__(self, other) -> bool:
        if isinstance(other, HashOptions):
            return self.to_dict() == other.to_dict()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self.to_dict().values()))

    def __repr__(self) -> str:
        return (
            f"HashOptions(ignore_array_item_order={self.ignore_array_item_order}, "
            f"algorithm={self.algorithm!r}, max_mantissa_bits={self.max_mantissa_bits})"
        )
