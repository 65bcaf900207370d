"""
Error types for object hashing.

All errors are explicit and never silent.
"""


class ObjectHashError(Exception):
    """Base exception for all object hashing errors."""
    pass


class NumericEncodingError(ObjectHashError):
    """Raised when a number cannot be normalized to its canonical encoding."""

    def __init__(self, value: float, reason: str, path: str = None):
        self.value = value
        self.reason = reason
        self.path = path
        msg = f"Invalid number: {value!r} ({reason})"
        if path:
            msg += f" at {path}"
        super().__init__(msg)


class UnknownTypeError(ObjectHashError, TypeError):
    """Raised when a value's kind has no canonical encoding."""

    def __init__(self, kind: str, path: str = None):
        self.kind = kind
        self.path = path
        msg = f"Unknown type: {kind}"
        if path:
            msg += f" at {path}"
        super().__init__(msg)


class CyclicStructureError(ObjectHashError):
    """Raised when a container (directly or indirectly) contains itself."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Cyclic structure detected at {path}")


class InvalidDigestError(ObjectHashError, ValueError):
    """Raised when a precomputed digest is malformed."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid digest: {reason}")


class InvalidOptionsError(ObjectHashError, ValueError):
    """Raised when hashing options are unknown or out of range."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid options: {reason}")
