import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    Mapping,
    Optional,
    Tuple,
    Union,
    ValuesView,
    overload,
)

from heteroreg._storage import InnerMapProtocol
from heteroreg._types import Inner, T
from heteroreg.core.key import CheckedKey, Key
from heteroreg.core.utils import _entries_hash, _make_default_inner, _snapshot
from heteroreg.exceptions import InvalidValueError, TypeMismatchError

if TYPE_CHECKING:
    from heteroreg.core.builder import RegistryBuilder
    from heteroreg.core.view import RegistryMapView

logger = logging.getLogger(__name__)

_MISSING: Any = object()

Content = Union[Mapping[Key[Any], Any], "HeteroRegistry"]


class HeteroRegistry:
    """
    Registry mapping keys to values of unrelated types.

    Each value is stored under a Key which remembers the type of the values
    it accepts, so the value comes back with its own type instead of a
    common supertype. Checked keys validate values on every put; unchecked
    keys accept anything.

    HeteroRegistry is not a Mapping: use `to_map()` to hand it to code that
    expects one.

    Raises:
        InvalidValueError: If a key rejects the value it is put with.
        TypeMismatchError: If a value cannot be cast to its key's type.

    Examples:
        >>> registry = HeteroRegistry()
        >>> name = registry.put("alpha")
        >>> retries = Key.of(int, name="retries")
        >>> registry.put(retries, 3)
        >>> registry.get(name), registry.get(retries)
        ('alpha', 3)
    """

    def __init__(
        self,
        content: Optional[Content] = None,
        *,
        inner: Optional[Inner] = None,
        log_level: Optional[int] = None,
    ) -> None:
        """
        Initialize the HeteroRegistry.

        Args:
            content: Optional mapping of keys to values, or another
                HeteroRegistry, copied into the new registry.
            inner: An optional backing mapping. Entries it already holds
                are adopted as they are, without type checks.
            log_level: Optional logging level for the registry logger. The
                logger is left untouched when None.

        Raises:
            TypeError: If inner does not implement the mapping methods used.
            ValueError: If log_level is not a valid logging level.

        Example:
            registry = HeteroRegistry(inner=OrderedDict(), log_level=logging.DEBUG)
        """
        if inner is not None and not isinstance(inner, InnerMapProtocol):
            raise TypeError(f"inner must be a mutable mapping, got {type(inner)}")

        if log_level is not None and not (50 >= log_level >= 0):
            raise ValueError("log_level must be a valid logging level between 0 and 50")

        self._inner: Inner = inner if inner is not None else _make_default_inner()
        if log_level is not None:
            logger.setLevel(log_level)
        if content is not None:
            self.put_all(content)

    @staticmethod
    def build() -> "RegistryBuilder":
        """Return a one-shot builder for a customized HeteroRegistry."""
        from heteroreg.core.builder import RegistryBuilder

        return RegistryBuilder()

    @overload
    def put(self, key_or_value: T) -> CheckedKey[T]: ...

    @overload
    def put(self, key_or_value: Key[T], value: Optional[T]) -> Optional[T]: ...

    def put(self, key_or_value: Any, value: Any = _MISSING) -> Any:
        """
        Store a value.

        With a single argument, a checked key is created from the value's
        own class and returned. Use an explicit key to store a value under a
        base class or a protocol.

        With a key and a value, the value replaces any previous one and the
        previous value (or None) is returned.

        Raises:
            TypeError: If the key is not a Key.
            InvalidValueError: If the key rejects the value.
        """
        if value is _MISSING:
            new_key: CheckedKey[Any] = CheckedKey(type(key_or_value))
            self.put(new_key, key_or_value)
            return new_key

        key = self._validate_key(key_or_value)
        if not key.can_be_mapped_to(value):
            raise InvalidValueError(f"The key {key!r} rejects the value {value!r}")
        previous = self._inner.get(key)
        self._inner[key] = value
        logger.debug("Put %r -> %s", key, type(value))
        return previous

    def _put_with_cast(self, key: Key[T], value: Any) -> Optional[T]:
        key = self._validate_key(key)
        try:
            checked = key.cast(value)
        except TypeMismatchError as cause:
            raise TypeMismatchError(
                f"The key {key!r} cannot be mapped to values of type {type(value)}"
            ) from cause
        return self.put(key, checked)

    def put_all(self, content: Content) -> None:
        """
        Put every entry of a mapping or of another HeteroRegistry.

        Entries are applied one by one: when one fails, those before it stay
        in the registry.

        Raises:
            TypeError: If a key is not a Key.
            TypeMismatchError: If a value does not fit its key.
        """
        items = content.to_dict() if isinstance(content, HeteroRegistry) else content
        for k, v in items.items():
            self._put_with_cast(k, v)

    def register(self, key: Key[T]) -> Callable[[T], T]:
        """
        Decorator to store an object under the given key.

        Returns:
            A decorator that stores the object and returns it unchanged.

        Raises:
            InvalidValueError: If the key rejects the decorated object.
        """

        def decorator(obj: T) -> T:
            self.put(key, obj)
            return obj

        return decorator

    def get(self, key: Key[T], default: Optional[T] = None) -> Optional[T]:
        """
        Get the value for the given key, or return default if it is unmapped.

        Raises:
            TypeError: If the key is not a Key.
            TypeMismatchError: If the stored value does not fit the key.
        """
        key = self._validate_key(key)
        if key not in self._inner:
            return default
        return key.cast(self._inner[key])

    def remove(self, key: Key[T]) -> Optional[T]:
        """
        Remove the key and return its value, or None if it was unmapped.
        """
        key = self._validate_key(key)
        if key not in self._inner:
            return None
        value = key.cast(self._inner.pop(key))
        logger.debug("Removed %r", key)
        return value

    def remove_all(self, keys: Iterable[Key[Any]]) -> None:
        for key in keys:
            self.remove(key)

    def clear(self) -> None:
        """
        Clear all entries from the registry.
        """
        self._inner.clear()
        logger.debug("Registry cleared")

    def size(self) -> int:
        return len(self._inner)

    def is_empty(self) -> bool:
        return len(self._inner) == 0

    def contains_key(self, key: object) -> bool:
        return key in self._inner

    def contains_value(self, value: object) -> bool:
        return any(v == value for v in self._inner.values())

    def keys(self) -> KeysView[Key[Any]]:
        return self._inner.keys()

    def values(self) -> ValuesView[Any]:
        return self._inner.values()

    def items(self) -> ItemsView[Key[Any], Any]:
        return self._inner.items()

    def to_dict(self) -> Dict[Key[Any], Any]:
        return _snapshot(self._inner)

    def to_map(self) -> "RegistryMapView":
        """
        Return a MutableMapping view backed by this registry.

        Foreign keys probe as absent rather than raising, and values which do
        not fit their key raise InvalidArgumentError.
        """
        from heteroreg.core.view import RegistryMapView

        return RegistryMapView(self)

    def _validate_key(self, key: Any) -> Key[Any]:
        if not isinstance(key, Key):
            raise TypeError(f"Registry key must be a Key, got {type(key)}")
        return key

    def __len__(self) -> int:
        return len(self._inner)

    def __contains__(self, key: object) -> bool:
        return key in self._inner

    def __iter__(self) -> Iterator[Tuple[Key[Any], Any]]:
        return iter(self._inner.items())

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if isinstance(other, HeteroRegistry):
            return _snapshot(self._inner) == _snapshot(other._inner)
        return NotImplemented

    def __hash__(self) -> int:
        return _entries_hash(self._inner.items())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._inner.keys())!r})"
