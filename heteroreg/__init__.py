"""heteroreg — registry of values with unrelated types.

This package exposes `HeteroRegistry`, a map-like container where every
value is stored under a `Key` that remembers the value's type, plus a
`MutableMapping` view of it and a one-shot builder. It's intentionally small
and dependency-free.
"""
from importlib.metadata import PackageNotFoundError, version as _pkg_version

from heteroreg.core import (
    BuilderState,
    CheckedKey,
    HeteroRegistry,
    Key,
    RegistryBuilder,
    RegistryMapView,
    TypeDescriptor,
    UncheckedKey,
)
from heteroreg.exceptions import (
    HeteroRegError,
    IllegalStateError,
    InvalidArgumentError,
    InvalidValueError,
    TypeMismatchError,
)


def _get_version() -> str:
    # Installed distribution metadata, or a safe default for a source checkout
    try:
        return _pkg_version("heteroreg")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()


__all__ = [
    "BuilderState",
    "CheckedKey",
    "HeteroRegistry",
    "HeteroRegError",
    "IllegalStateError",
    "InvalidArgumentError",
    "InvalidValueError",
    "Key",
    "RegistryBuilder",
    "RegistryMapView",
    "TypeDescriptor",
    "TypeMismatchError",
    "UncheckedKey",
    "__version__",
]
