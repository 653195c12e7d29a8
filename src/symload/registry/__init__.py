"""Autoload registries: namespace search paths, explicit symbols, core namespaces."""

from dataclasses import dataclass, field
from typing import Optional

from ..utils.config import AutoloaderConfig
from .core import CoreNamespaceList
from .namespaces import NamespaceRegistry
from .symbols import ExplicitSymbolTable


@dataclass
class AutoloadRegistry:
    """
    The three registries the resolver reads on every call.

    Built once at startup by bootstrap code and handed to the Autoloader;
    registration may continue while resolution is running.
    """
    namespaces: NamespaceRegistry = field(default_factory=NamespaceRegistry)
    symbols: ExplicitSymbolTable = field(default_factory=ExplicitSymbolTable)
    core: CoreNamespaceList = field(default_factory=CoreNamespaceList)

    @classmethod
    def from_config(cls, config: Optional[AutoloaderConfig] = None) -> "AutoloadRegistry":
        """Empty registries with the configured default core namespaces."""
        config = config or AutoloaderConfig()
        return cls(core=CoreNamespaceList(config.core_namespaces))


__all__ = [
    "AutoloadRegistry",
    "NamespaceRegistry",
    "ExplicitSymbolTable",
    "CoreNamespaceList",
]
