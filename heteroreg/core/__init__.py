from heteroreg.core.key import CheckedKey, Key, TypeDescriptor, UncheckedKey
from heteroreg.core.registry import HeteroRegistry, logger
from heteroreg.core.view import RegistryMapView
from heteroreg.core.builder import RegistryBuilder
from heteroreg.core.utils import BuilderState

__all__ = [
    "BuilderState",
    "CheckedKey",
    "HeteroRegistry",
    "Key",
    "RegistryBuilder",
    "RegistryMapView",
    "TypeDescriptor",
    "UncheckedKey",
    "logger",
]
