class HeteroRegError(Exception):
    """Base class for every error raised by heteroreg."""


class InvalidValueError(HeteroRegError, ValueError):
    """A key's descriptor rejected the value offered to ``put``."""


class TypeMismatchError(HeteroRegError, TypeError):
    """A checked cast found a value that is not an instance of the key type."""


class InvalidArgumentError(HeteroRegError, ValueError):
    """Raised by the mapping view and the builder in place of a type failure."""


class IllegalStateError(HeteroRegError, RuntimeError):
    """A builder was used again after producing its registry."""


__all__ = [
    "HeteroRegError",
    "InvalidValueError",
    "TypeMismatchError",
    "InvalidArgumentError",
    "IllegalStateError",
]
