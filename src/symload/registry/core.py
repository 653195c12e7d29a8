"""
Core Namespace List

Namespaces whose classes may be referenced without a prefix. A bare
``Str`` is looked up as ``<ns>\\Str`` in the explicit symbol table for each
core namespace in order, and the hit is aliased into the global namespace.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from ..shared.names import SymbolName, qualify, strip_leading
from .symbols import ExplicitSymbolTable

logger = logging.getLogger(__name__)


class CoreNamespaceList:
    """Ordered core namespaces, highest precedence first."""

    def __init__(self, namespaces: Iterable[str] = ()):
        self._namespaces: List[str] = [strip_leading(ns) for ns in namespaces]

    def add(self, namespace: str, prefix: bool = True) -> None:
        """
        Add a core namespace.

        Prefixed namespaces are checked first, so their classes shadow core
        classes and previously added namespaces of the same short name.
        """
        namespace = strip_leading(namespace)
        if prefix:
            self._namespaces.insert(0, namespace)
        else:
            self._namespaces.append(namespace)
        logger.debug(f"CoreNamespaceList: added {namespace!r} ({'front' if prefix else 'back'})")

    def find(self, symbol: SymbolName, table: ExplicitSymbolTable) -> Optional[SymbolName]:
        """Qualified name of the first core class matching an unprefixed symbol, or None."""
        for namespace in self._namespaces:
            candidate = qualify(namespace, symbol)
            if candidate in table:
                return candidate
        return None

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._namespaces))

    def __contains__(self, namespace: object) -> bool:
        return isinstance(namespace, str) and strip_leading(namespace) in self._namespaces

    def __len__(self) -> int:
        return len(self._namespaces)

    def __repr__(self) -> str:
        return f"CoreNamespaceList({self._namespaces!r})"
