from typing import (
    Any,
    ItemsView,
    Iterator,
    KeysView,
    Mapping,
    MutableMapping,
    Optional,
    ValuesView,
)

from heteroreg.core.key import Key
from heteroreg.core.registry import HeteroRegistry
from heteroreg.exceptions import InvalidArgumentError


class RegistryMapView(MutableMapping[Key[Any], Any]):
    """
    MutableMapping facade over a HeteroRegistry.

    The view owns nothing: every call reads or writes the registry it was
    created from, and several views of one registry all see the same state.

    Objects which are not Keys are never an error when probing: `get` and
    `pop` return the default and `in` answers False. Type failures while
    writing surface as InvalidArgumentError so that callers of the generic
    mapping interface deal with a single error kind.

    Equality follows the Mapping contract (same entries), which is why a
    registry and its own view never compare equal.
    """

    def __init__(self, registry: HeteroRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> HeteroRegistry:
        return self._registry

    def get(self, key: object, default: Optional[Any] = None) -> Any:
        if not isinstance(key, Key):
            return default
        return self._registry.get(key, default)

    def put(self, key: Key[Any], value: Any) -> Any:
        """
        Store a value and return the previous one.

        Raises:
            InvalidArgumentError: If key is not a Key or rejects the value.
        """
        try:
            return self._registry._put_with_cast(key, value)
        except TypeError as cause:
            raise InvalidArgumentError(str(cause)) from cause

    def pop(self, key: object, default: Optional[Any] = None) -> Any:
        if not isinstance(key, Key) or key not in self._registry:
            return default
        return self._registry.remove(key)

    def update(self, other: Any = (), /, **kwds: Any) -> None:
        """
        Put every entry of other, then of kwds, through the registry's put_all.

        other may be a mapping, a HeteroRegistry or an iterable of
        (key, value) pairs. Keyword names are strings, never Keys, so any
        keyword is rejected.

        Raises:
            InvalidArgumentError: If an entry has a foreign key or a value
                which does not fit its key.
        """
        try:
            if isinstance(other, (Mapping, HeteroRegistry)):
                self._registry.put_all(other)
            else:
                self._registry.put_all(dict(other))
            if kwds:
                self._registry.put_all(kwds)  # type: ignore[arg-type]
        except (TypeError, ValueError) as cause:
            raise InvalidArgumentError(str(cause)) from cause

    def clear(self) -> None:
        self._registry.clear()

    def keys(self) -> KeysView[Key[Any]]:
        return self._registry.keys()

    def values(self) -> ValuesView[Any]:
        return self._registry.values()

    def items(self) -> ItemsView[Key[Any], Any]:
        return self._registry.items()

    def __getitem__(self, key: Key[Any]) -> Any:
        if not isinstance(key, Key) or key not in self._registry:
            raise KeyError(key)
        return self._registry.get(key)

    def __setitem__(self, key: Key[Any], value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: Key[Any]) -> None:
        if not isinstance(key, Key) or key not in self._registry:
            raise KeyError(key)
        self._registry.remove(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, Key) and self._registry.contains_key(key)

    def __iter__(self) -> Iterator[Key[Any]]:
        return iter(self._registry.keys())

    def __len__(self) -> int:
        return len(self._registry)

    def __hash__(self) -> int:  # type: ignore[override]
        return hash(self._registry)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._registry!r})"
