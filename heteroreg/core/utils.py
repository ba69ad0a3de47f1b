from enum import IntEnum
from typing import Any, Dict, Iterable, Tuple, cast

from heteroreg._types import Inner


def _make_default_inner() -> Inner:
    """Create the backing mapping used when none is supplied.

    A plain dict, cast to the erased Inner alias so the annotated type of
    HeteroRegistry._inner stays the same whatever mapping was injected.
    """
    return cast(Inner, {})


def _entries_hash(items: Iterable[Tuple[Any, Any]]) -> int:
    """Order-independent hash of (key, value) pairs.

    Sums ``hash(key) ^ hash(value)`` so two mappings holding the same
    entries hash equal whatever their insertion order.

    Raises:
        TypeError: If a value is unhashable.
    """
    return sum(hash(k) ^ hash(v) for k, v in items)


def _snapshot(inner: Inner) -> Dict[Any, Any]:
    return dict(inner.items())


class BuilderState(IntEnum):
    UNUSED = 0
    USED = 1
