"""
Autoloader

Resolves a missing symbol to a source unit, loads it, aliases it where
needed and fires its one-time initializer.

Lookup order (first branch that applies wins):
1. explicit symbol table: exact symbol → path
2. unprefixed symbol: core namespaces, aliased into the global namespace
3. unprefixed symbol: conventional path under the application class dir
4. namespaced symbol: namespace registry, first prefix match whose file exists

A miss at any stage is a False result, never an exception. Errors raised
by the load primitive and alias collisions propagate to the caller.
"""

import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from ..registry import AutoloadRegistry
from ..runtime.space import SymbolSpace
from ..shared.names import SymbolName, is_namespaced, qualify, short_name, strip_leading
from ..utils.config import AutoloaderConfig, GLOBAL_NAMESPACE
from .dispatcher import InitializationDispatcher
from .path_resolver import SymbolPathResolver
from .unit_loader import SourceUnitLoader, UnitLoaderProtocol

logger = logging.getLogger(__name__)


class Autoloader:
    """
    Lazy symbol resolver for a SymbolSpace.

    Usage::

        space = SymbolSpace()
        loader = Autoloader(space, config=AutoloaderConfig(app_path="/srv/app"))
        loader.add_namespace("App", "/srv/app/src")
        loader.register()
        user_cls = space["App\\\\Models\\\\User"]
    """

    def __init__(
        self,
        space: SymbolSpace,
        registry: Optional[AutoloadRegistry] = None,
        config: Optional[AutoloaderConfig] = None,
        unit_loader: Optional[UnitLoaderProtocol] = None,
        dispatcher: Optional[InitializationDispatcher] = None,
    ):
        """
        Args:
            space: symbol space that receives definitions and aliases
            registry: namespace/explicit/core registries (built from config if None)
            config: autoloader settings (defaults if None)
            unit_loader: load primitive (SourceUnitLoader on space if None)
            dispatcher: initialization dispatcher (one using config.init_hook if None)
        """
        self.space = space
        self.config = config or AutoloaderConfig()
        self.registry = registry if registry is not None else AutoloadRegistry.from_config(self.config)
        self.unit_loader = unit_loader if unit_loader is not None else SourceUnitLoader(space)
        self.dispatcher = dispatcher or InitializationDispatcher(self.config.init_hook)
        self.paths = SymbolPathResolver(self.config)

    # =========================================================================
    # Resolution
    # =========================================================================

    def load(self, symbol: SymbolName) -> bool:
        """
        Resolve and load a symbol.

        Returns:
            True if a source unit was loaded for the symbol
        """
        symbol = strip_leading(symbol)
        with self.dispatcher.resolving(symbol):
            explicit_path = self.registry.symbols.lookup(symbol)
            if explicit_path is not None:
                logger.debug(f"Autoloader: {symbol!r} is explicitly mapped to {explicit_path}")
                self._load_path(explicit_path)
                self._init_symbol(symbol)
                return True

            if not is_namespaced(symbol):
                return self._load_unprefixed(symbol)

            return self._load_namespaced(symbol)

    def _load_unprefixed(self, symbol: SymbolName) -> bool:
        core_symbol = self.registry.core.find(symbol, self.registry.symbols)
        if core_symbol is not None:
            logger.debug(f"Autoloader: {symbol!r} resolved to core symbol {core_symbol!r}")
            if not self.space.is_defined(core_symbol):
                core_path = self.registry.symbols.lookup(core_symbol)
                self._load_path(core_path)
                if not self.space.is_defined(core_symbol):
                    logger.warning(f"Autoloader: {core_path} did not define core symbol {core_symbol!r}")
                    return False
            self.alias_to_namespace(core_symbol)
            self._init_symbol(symbol)
            return True

        file_path = self.paths.conventional_path(symbol)
        if file_path is None or not self.unit_loader.file_exists(file_path):
            logger.debug(f"Autoloader: no conventional file for {symbol!r} ({file_path})")
            return False

        self._load_path(file_path)
        fallback = qualify(self.config.fallback_core_namespace, symbol)
        if not self.space.is_defined(symbol) and self.space.is_defined(fallback):
            self.alias_to_namespace(fallback)
        self._init_symbol(symbol)
        return True

    def _load_namespaced(self, symbol: SymbolName) -> bool:
        for namespace, file_path in self.paths.namespaced_candidates(symbol, self.registry.namespaces):
            if self.unit_loader.file_exists(file_path):
                logger.debug(f"Autoloader: {symbol!r} found under namespace {namespace!r}")
                self._load_path(file_path)
                self._init_symbol(symbol)
                return True
        logger.debug(f"Autoloader: no namespace path for {symbol!r}")
        return False

    def _load_path(self, path: Union[Path, str]) -> None:
        self.unit_loader.load_unit(path)

    def _init_symbol(self, symbol: SymbolName) -> None:
        self.dispatcher.fire(symbol, self.space.get(symbol, autoload=False))

    # =========================================================================
    # Aliasing
    # =========================================================================

    def alias_to_namespace(self, symbol: SymbolName, namespace: str = GLOBAL_NAMESPACE) -> SymbolName:
        """
        Alias a qualified symbol into another namespace (global by default).

        alias_to_namespace('Foo\\\\Bar') → 'Bar'
        alias_to_namespace('Foo\\\\Bar', 'Baz') → 'Baz\\\\Bar'

        Raises:
            AliasCollisionError: if the target name is already in use
        """
        alias_name = qualify(namespace, short_name(symbol))
        self.space.alias(symbol, alias_name)
        return alias_name

    # =========================================================================
    # Registration
    # =========================================================================

    def register(self, prepend: bool = False) -> None:
        """Install this autoloader in the symbol space's resolver chain (last by default)."""
        self.space.register_resolver(self.load, prepend=prepend)

    def unregister(self) -> None:
        self.space.unregister_resolver(self.load)

    def add_namespace(self, namespace: str, path: str) -> None:
        self.registry.namespaces.register(namespace, path)

    def add_namespaces(self, namespaces: Mapping[str, str], prepend: bool = False) -> None:
        self.registry.namespaces.register_many(namespaces, prepend=prepend)

    def namespace_path(self, namespace: str) -> Optional[str]:
        return self.registry.namespaces.lookup(namespace)

    def add_class(self, symbol: SymbolName, path: str) -> None:
        self.registry.symbols.register(symbol, path)

    def add_classes(self, classes: Mapping[SymbolName, str]) -> None:
        self.registry.symbols.register_many(classes)

    def add_core_namespace(self, namespace: str, prefix: bool = True) -> None:
        self.registry.core.add(namespace, prefix=prefix)
