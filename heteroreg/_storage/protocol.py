from typing import (
    Any,
    ItemsView,
    Iterator,
    KeysView,
    Optional,
    Protocol,
    ValuesView,
    runtime_checkable,
)


@runtime_checkable
class InnerMapProtocol(Protocol):
    """Minimal protocol describing the backing mapping expected by HeteroRegistry.

    Only the methods that `heteroreg.core.HeteroRegistry` calls are listed so
    that any dict, OrderedDict or MutableMapping subclass qualifies.
    """

    def __getitem__(self, key: Any) -> Any:  # pragma: no cover - interface
        ...

    def __setitem__(self, key: Any, value: Any) -> None:  # pragma: no cover
        ...

    def __contains__(self, key: object) -> bool:  # pragma: no cover - interface
        ...

    def __iter__(self) -> Iterator[Any]:  # pragma: no cover - interface
        ...

    def __len__(self) -> int:  # pragma: no cover - interface
        ...

    def get(
        self, key: Any, default: Optional[Any] = None
    ) -> Any:  # pragma: no cover - interface
        ...

    def pop(self, key: Any, *default: Any) -> Any:  # pragma: no cover - interface
        ...

    def clear(self) -> None:  # pragma: no cover - interface
        ...

    def keys(self) -> KeysView[Any]:  # pragma: no cover - interface
        ...

    def values(self) -> ValuesView[Any]:  # pragma: no cover - interface
        ...

    def items(self) -> ItemsView[Any, Any]:  # pragma: no cover - interface
        ...
