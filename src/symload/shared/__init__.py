"""
Shared components: symbol name helpers and the exception hierarchy.
"""

from .errors import (
    SymloadError,
    AliasCollisionError,
    SymbolRedefinitionError,
    SymbolNotFoundError,
    SourceUnitLoadError,
)
from .names import (
    SymbolName,
    strip_leading,
    is_namespaced,
    split_symbol,
    short_name,
    qualify,
    normalize_namespace,
    namespace_segments,
    word_segments,
)

__all__ = [
    "SymloadError",
    "AliasCollisionError",
    "SymbolRedefinitionError",
    "SymbolNotFoundError",
    "SourceUnitLoadError",
    "SymbolName",
    "strip_leading",
    "is_namespaced",
    "split_symbol",
    "short_name",
    "qualify",
    "normalize_namespace",
    "namespace_segments",
    "word_segments",
]
