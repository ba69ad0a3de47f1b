import logging
from typing import Any, Mapping, Optional

from heteroreg._storage import InnerMapProtocol
from heteroreg._types import Inner
from heteroreg.core.key import Key
from heteroreg.core.registry import Content, HeteroRegistry
from heteroreg.core.utils import BuilderState
from heteroreg.exceptions import IllegalStateError, InvalidArgumentError

logger = logging.getLogger(__name__)


class RegistryBuilder:
    """
    One-shot builder for a HeteroRegistry with custom content or storage.

    Configuration methods return the builder so calls can be chained. Once
    `instantiate()` has run, every further call raises IllegalStateError.

    Example:
        registry = (
            HeteroRegistry.build()
            .with_custom_inner_map(OrderedDict())
            .with_custom_content({greeting: "hello"})
            .instantiate()
        )
    """

    def __init__(self) -> None:
        self._content: Mapping[Key[Any], Any] = {}
        self._inner: Optional[Inner] = None
        self._check_maps = True
        self._state = BuilderState.UNUSED

    @property
    def state(self) -> BuilderState:
        return self._state

    def without_map_checks(self) -> "RegistryBuilder":
        """
        Skip validating the mappings given to this builder.

        Saves one pass over each mapping. An invalid content mapping then
        fails in `instantiate()`, and an invalid inner map fails at the first
        read of a bad entry.
        """
        self._check_state()
        self._check_maps = False
        return self

    def with_custom_content(self, content: Content) -> "RegistryBuilder":
        """
        Entries to put into the registry right after it is created.

        The mapping is kept, not copied: entries added to it (or to a
        HeteroRegistry given here) before `instantiate()` are applied too.

        Raises:
            IllegalStateError: If the builder was already used.
            InvalidArgumentError: If checks are enabled and an entry is invalid.
        """
        self._check_state()
        if isinstance(content, HeteroRegistry):
            content = content.to_map()
        self._check_valid_map(content)
        self._content = content
        return self

    def with_custom_inner_map(self, inner: Inner) -> "RegistryBuilder":
        """
        Mapping instance the registry stores its entries in.

        Raises:
            IllegalStateError: If the builder was already used.
            TypeError: If inner does not implement the mapping methods used.
            InvalidArgumentError: If checks are enabled and an entry is invalid.
        """
        self._check_state()
        if not isinstance(inner, InnerMapProtocol):
            raise TypeError(f"inner must be a mutable mapping, got {type(inner)}")
        self._check_valid_map(inner)
        self._inner = inner
        return self

    def instantiate(self) -> HeteroRegistry:
        """
        Create the registry and put the custom content into it.

        Raises:
            IllegalStateError: If the builder was already used.
            TypeMismatchError: If unchecked content does not fit its keys.
        """
        self._check_state()
        self._state = BuilderState.USED
        registry = HeteroRegistry(inner=self._inner)
        registry.put_all(self._content)
        logger.debug(
            "Instantiated registry with %d entries from builder", registry.size()
        )
        return registry

    def _check_state(self) -> None:
        if self._state is BuilderState.USED:
            raise IllegalStateError(
                "This builder cannot be used for generating more than one instance"
            )

    def _check_valid_map(self, content: Mapping[Key[Any], Any]) -> None:
        if not self._check_maps:
            return
        try:
            HeteroRegistry(content)
        except (TypeError, ValueError) as cause:
            raise InvalidArgumentError("The provided map cannot be used") from cause
