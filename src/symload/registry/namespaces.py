"""
Namespace Registry

Ordered mapping from namespace to base search path. Order is precedence:
the resolver walks entries in insertion order and the first entry whose
namespace prefixes the requested one wins, regardless of prefix length.
"""

import logging
from typing import Dict, Iterator, Mapping, Optional, Tuple

from ..shared.names import strip_leading

logger = logging.getLogger(__name__)


class NamespaceRegistry:
    """
    Namespace → base path search registry.

    - register(): insert or overwrite in place
    - register_many(prepend=False): append; existing entries keep precedence
    - register_many(prepend=True): new entries go first, in their own order
    - lookup(): exact match only, None on miss
    """
    _entries: Dict[str, str]

    def __init__(self, entries: Optional[Mapping[str, str]] = None):
        self._entries = {}
        if entries:
            self.register_many(entries)

    def register(self, namespace: str, base_path: str) -> None:
        """Register a namespace search path. Overwriting keeps the entry's position."""
        self._entries[strip_leading(namespace)] = base_path
        logger.debug(f"NamespaceRegistry: {namespace!r} → {base_path}")

    def register_many(self, entries: Mapping[str, str], prepend: bool = False) -> None:
        """
        Register several namespaces at once.

        Args:
            entries: namespace → base path, in the order they should be searched
            prepend: when True the new entries take precedence over every existing one
        """
        incoming = {strip_leading(ns): path for ns, path in entries.items()}
        if not prepend:
            self._entries.update(incoming)
        else:
            for ns, path in self._entries.items():
                incoming.setdefault(ns, path)
            self._entries = incoming
        logger.debug(
            f"NamespaceRegistry: {'prepended' if prepend else 'appended'} {len(entries)} namespaces"
        )

    def lookup(self, namespace: str) -> Optional[str]:
        """Base path for an exact namespace, or None."""
        return self._entries.get(strip_leading(namespace))

    def items(self) -> Iterator[Tuple[str, str]]:
        """(namespace, base_path) pairs in precedence order."""
        return iter(list(self._entries.items()))

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return self.items()

    def __contains__(self, namespace: object) -> bool:
        return isinstance(namespace, str) and strip_leading(namespace) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"NamespaceRegistry({self._entries!r})"
