"""
Symbol Space

The running process's view of defined symbols. Every binding is keyed by
its qualified name; aliases are a second table mapping alias → canonical
name, resolved with one indirection on lookup.

A lookup that misses runs the installed resolvers in order (first installed
runs first) until one reports success, then looks again. This is the
trigger the autoloader hangs off.
"""

import logging
import threading
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..shared.errors import AliasCollisionError, SymbolNotFoundError, SymbolRedefinitionError
from ..shared.names import SymbolName, strip_leading

logger = logging.getLogger(__name__)

Resolver = Callable[[SymbolName], bool]


class SymbolSpace:
    """
    Qualified name → definition, plus aliases and the resolver chain.

    - define(name, obj): bind once; rebinding the same object is a no-op
    - alias(canonical, alias_name): second name for the same definition
    - get(name): lookup, autoloading on miss
    - name in space: lookup without autoloading
    """
    _definitions: Dict[str, Any]
    _aliases: Dict[str, str]
    _resolvers: List[Resolver]

    def __init__(self):
        self._definitions = {}
        self._aliases = {}
        self._resolvers = []
        # Re-entrant: nested loads define symbols while an outer load still runs
        self._lock = threading.RLock()

    # =========================================================================
    # Definitions
    # =========================================================================

    def define(self, name: SymbolName, obj: Any) -> None:
        """Bind a qualified name to a definition."""
        self.define_many({name: obj})

    def define_many(self, bindings: Mapping[SymbolName, Any]) -> None:
        """
        Bind several qualified names at once.

        Every name is checked before any is bound, so a conflict leaves the
        space unchanged.

        Raises:
            AliasCollisionError: if a name is already an alias
            SymbolRedefinitionError: if a name is bound to a different object
        """
        bindings = {strip_leading(name): obj for name, obj in bindings.items()}
        with self._lock:
            for name, obj in bindings.items():
                if name in self._aliases:
                    raise AliasCollisionError(name, name, existing=self._aliases[name])
                existing = self._definitions.get(name, None)
                if existing is not None and existing is not obj:
                    raise SymbolRedefinitionError(name)
            fresh = [name for name in bindings if name not in self._definitions]
            for name in fresh:
                self._definitions[name] = bindings[name]
        for name in fresh:
            logger.debug(f"SymbolSpace: defined {name!r}")

    def alias(self, canonical: SymbolName, alias_name: SymbolName) -> None:
        """
        Expose an already defined symbol under a second name.

        Raises:
            SymbolNotFoundError: if canonical is not defined
            AliasCollisionError: if alias_name is already defined or aliased
        """
        canonical = self.canonical(canonical)
        alias_name = strip_leading(alias_name)
        with self._lock:
            if canonical not in self._definitions:
                raise SymbolNotFoundError(canonical)
            if alias_name in self._definitions:
                raise AliasCollisionError(alias_name, canonical, existing=alias_name)
            if alias_name in self._aliases:
                raise AliasCollisionError(alias_name, canonical, existing=self._aliases[alias_name])
            self._aliases[alias_name] = canonical
        logger.debug(f"SymbolSpace: aliased {canonical!r} as {alias_name!r}")

    def canonical(self, name: SymbolName) -> SymbolName:
        """Name the definition is actually stored under."""
        name = strip_leading(name)
        return self._aliases.get(name, name)

    def is_defined(self, name: SymbolName, autoload: bool = False) -> bool:
        """True if name (or the symbol it aliases) is bound."""
        if autoload:
            return self.get(name) is not None
        return self.canonical(name) in self._definitions

    def get(self, name: SymbolName, autoload: bool = True) -> Optional[Any]:
        """Definition for name, running the resolver chain on a miss."""
        found = self._definitions.get(self.canonical(name))
        if found is not None or not autoload:
            return found
        self._autoload(strip_leading(name))
        return self._definitions.get(self.canonical(name))

    def __getitem__(self, name: SymbolName) -> Any:
        found = self.get(name)
        if found is None:
            raise SymbolNotFoundError(strip_leading(name))
        return found

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_defined(name)

    def names(self) -> List[SymbolName]:
        """Defined canonical names, in definition order."""
        return list(self._definitions)

    def aliases(self) -> Mapping[SymbolName, SymbolName]:
        """Read-only alias → canonical view."""
        return MappingProxyType(self._aliases)

    # =========================================================================
    # Resolver chain
    # =========================================================================

    def register_resolver(self, resolver: Resolver, prepend: bool = False) -> None:
        """Install a fallback resolver. Earlier resolvers run first."""
        if resolver in self._resolvers:
            return
        if prepend:
            self._resolvers.insert(0, resolver)
        else:
            self._resolvers.append(resolver)

    def unregister_resolver(self, resolver: Resolver) -> None:
        if resolver in self._resolvers:
            self._resolvers.remove(resolver)

    @property
    def resolvers(self) -> List[Resolver]:
        return list(self._resolvers)

    def _autoload(self, name: SymbolName) -> bool:
        for resolver in list(self._resolvers):
            if resolver(name) and self.canonical(name) in self._definitions:
                return True
        logger.debug(f"SymbolSpace: no resolver provided {name!r}")
        return False
