"""
Symbol Path Resolution

Pure path derivation for symbols that have no explicit table entry:

- Model_User → <app_path>/classes/model/user.py (conventional fallback)
- App\\Models\\User with App → /paths/app registered → /paths/app/models/user.py

This class never touches the file system and can be shared/reused.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Tuple

from ..registry.namespaces import NamespaceRegistry
from ..shared.names import SymbolName, namespace_segments, normalize_namespace, split_symbol, word_segments
from ..utils.config import AutoloaderConfig
from ..utils.io_utils import to_host_path

logger = logging.getLogger(__name__)


class SymbolPathResolver:
    """
    Candidate source paths for a symbol.

    - conventional_path(symbol): path under the application class directory
    - namespaced_candidates(symbol, registry): (namespace, path) per prefix match,
      in registry order
    """

    def __init__(self, config: Optional[AutoloaderConfig] = None):
        self.config = config or AutoloaderConfig()

    def conventional_path(self, symbol: SymbolName) -> Optional[Path]:
        """
        Path for an unprefixed symbol under the class root, or None without an app path.

        Underscores become directories and the derived part is lowercased:
        Model_User → classes/model/user.py
        """
        class_root = self.config.class_root
        if class_root is None:
            return None
        parts = [part.lower() for part in word_segments(symbol)]
        if not parts:
            return None
        return to_host_path(class_root).joinpath(*parts).with_suffix(self.config.file_extension)

    def namespaced_candidates(
        self,
        symbol: SymbolName,
        registry: NamespaceRegistry,
    ) -> Iterator[Tuple[str, Path]]:
        """
        Yield (registered namespace, candidate path) for every registry entry whose
        namespace is a string prefix of the symbol's namespace.

        Order is registry order; the caller stops at the first existing file.

        The remainder starts one character past the matched prefix, which is
        the separator when the entry is a parent namespace. A partial-word
        match such as Ap for App\\User therefore loses that character too:
        Ap → /ap gives /ap/user.py.

        Examples:
            App → /paths/app, App\\Models\\User → /paths/app/models/user.py
            App → /paths/app, App\\Model_User → /paths/app/model/user.py
            App\\Models → /lib/models, App\\Models\\User → /lib/models/user.py
        """
        namespace, local = split_symbol(symbol)
        local_parts = word_segments(local)
        if not local_parts:
            return
        derived = normalize_namespace(namespace)

        for registered, base_path in registry.items():
            prefix = normalize_namespace(registered)
            if not derived.startswith(prefix):
                continue
            cut = len(prefix) + 1 if prefix else 0
            remainder = namespace_segments(derived[cut:])
            path = self._join(base_path, remainder, local_parts)
            logger.debug(f"Namespace {registered!r} matches {symbol!r}: trying {path}")
            yield registered, path

    def _join(self, base_path: str, remainder: list, local_parts: list) -> Path:
        suffix = [part.lower() for part in remainder + local_parts]
        base = base_path.lower() if self.config.lowercase_base_paths else base_path
        return to_host_path(base).joinpath(*suffix).with_suffix(self.config.file_extension)
