import types
from abc import ABC, abstractmethod
from typing import (
    Any,
    Generic,
    Optional,
    Tuple,
    Type,
    Union,
    cast,
    get_args,
    get_origin,
)

from heteroreg._types import T
from heteroreg.exceptions import TypeMismatchError

_UNION_ORIGINS = tuple(
    o for o in (Union, getattr(types, "UnionType", None)) if o is not None
)


def _runtime_classes(tp: Any) -> Tuple[type, ...]:
    origin = get_origin(tp)
    if origin is not None and any(origin is u for u in _UNION_ORIGINS):
        members = get_args(tp)
    else:
        members = (tp,)
    classes = tuple(get_origin(m) or m for m in members)
    for c in classes:
        if not isinstance(c, type) or any(c is u for u in _UNION_ORIGINS):
            raise TypeError(f"Cannot build a type descriptor from {tp!r}")
    return classes


class TypeDescriptor(Generic[T]):
    """Run-time type information attached to a checked key.

    Parameterized aliases such as ``list[str]`` are reduced to their origin
    class, so ``list[str]`` and ``list[int]`` describe the same values.
    Unions (``int | str``, ``Optional[int]``) accept an instance of any
    member.
    """

    __slots__ = ("_classes",)

    def __init__(self, tp: Type[T]) -> None:
        self._classes: Tuple[type, ...] = _runtime_classes(tp)

    @property
    def runtime_types(self) -> Tuple[type, ...]:
        return self._classes

    @property
    def runtime_type(self) -> type:
        """The described class; for a union, the first member."""
        return self._classes[0]

    @property
    def type_name(self) -> str:
        return " | ".join(c.__name__ for c in self._classes)

    def is_instance(self, value: Any) -> bool:
        return isinstance(value, self._classes)

    def cast(self, value: Any) -> T:
        """
        Return the value unchanged if it is None or an instance of the type.

        Raises:
            TypeMismatchError: If the value is not an instance.
        """
        if value is not None and not self.is_instance(value):
            raise TypeMismatchError(
                f"Cannot cast {type(value).__name__} to {self.type_name}"
            )
        return cast(T, value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TypeDescriptor):
            return set(self._classes) == set(other._classes)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._classes))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.type_name})"


class Key(ABC, Generic[T]):
    """
    Identity-based token under which a value is stored in a HeteroRegistry.

    Two keys are never interchangeable: equality and hashing are those of
    the object itself, whatever type they were built for. Use CheckedKey
    when the value type can be checked at run time and UncheckedKey when it
    cannot (or should not) be.

    Examples:
        >>> timeout = Key.of(int, name="timeout")
        >>> timeout.can_be_mapped_to(3)
        True
        >>> timeout.can_be_mapped_to("3")
        False
    """

    __slots__ = ("_name",)

    def __init__(self, name: Optional[str] = None) -> None:
        self._name = name

    @staticmethod
    def of(tp: Optional[Type[T]] = None, name: Optional[str] = None) -> "Key[T]":
        """
        Create a checked key when a type is given, an unchecked one otherwise.
        """
        if tp is None:
            return UncheckedKey(name=name)
        return CheckedKey(tp, name=name)

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def descriptor(self) -> Optional[TypeDescriptor[T]]:
        return None

    @abstractmethod
    def can_be_mapped_to(self, value: Any) -> bool:
        pass

    @abstractmethod
    def cast(self, value: Any) -> T:
        pass

    def _label(self) -> str:
        return "" if self._name is None else f"{self._name!r}"


class CheckedKey(Key[T]):
    """Key carrying a TypeDescriptor; values are validated on every put."""

    __slots__ = ("_descriptor",)

    def __init__(self, tp: Type[T], name: Optional[str] = None) -> None:
        super().__init__(name)
        self._descriptor: TypeDescriptor[T] = TypeDescriptor(tp)

    @property
    def descriptor(self) -> TypeDescriptor[T]:
        return self._descriptor

    def can_be_mapped_to(self, value: Any) -> bool:
        return value is None or self._descriptor.is_instance(value)

    def cast(self, value: Any) -> T:
        return self._descriptor.cast(value)

    def __repr__(self) -> str:
        type_name = self._descriptor.type_name
        label = self._label()
        inner = f"{label}: {type_name}" if label else type_name
        return f"{self.__class__.__name__}({inner})"


class UncheckedKey(Key[T]):
    """
    Key without run-time type information.

    Accepts any value, including ones whose type cannot be described at run
    time. A wrong value is only noticed by whoever uses it after reading it
    back.
    """

    __slots__ = ()

    def can_be_mapped_to(self, value: Any) -> bool:
        return True

    def cast(self, value: Any) -> T:
        return cast(T, value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._label()})"
