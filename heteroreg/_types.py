from typing import Any, MutableMapping, TypeVar

T = TypeVar("T")

# Inner is the shape of the backing mapping once keys are erased to Any:
# the registry keeps values as opaque references and casts on the way out.
Inner = MutableMapping[Any, Any]

__all__ = ["T", "Inner"]
