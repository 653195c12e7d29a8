"""Explicit symbol table: fully qualified symbol → exact source path."""

import logging
from typing import Dict, Iterator, Mapping, Optional

from ..shared.names import SymbolName, strip_leading

logger = logging.getLogger(__name__)


class ExplicitSymbolTable:
    """Symbols listed here are loaded from their path without any search."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._paths: Dict[str, str] = {}
        if entries:
            self.register_many(entries)

    def register(self, symbol: SymbolName, path: str) -> None:
        """Map a symbol to its source file. Last write wins."""
        self._paths[strip_leading(symbol)] = path
        logger.debug(f"ExplicitSymbolTable: {symbol!r} → {path}")

    def register_many(self, entries: Mapping[str, str]) -> None:
        for symbol, path in entries.items():
            self.register(symbol, path)

    def lookup(self, symbol: SymbolName) -> Optional[str]:
        """Path registered for the exact symbol, or None."""
        return self._paths.get(strip_leading(symbol))

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and strip_leading(symbol) in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __repr__(self) -> str:
        return f"ExplicitSymbolTable({len(self._paths)} symbols)"
