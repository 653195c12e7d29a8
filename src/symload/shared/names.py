"""
Symbol Names

Helpers for qualified symbol names such as ``App\\Models\\User``.
Names are plain strings; these functions are the only place that knows
about the separator.
"""

from typing import List, Tuple

from typing_extensions import TypeAlias

from ..utils.config import GLOBAL_NAMESPACE, NAMESPACE_SEPARATOR, WORD_SEPARATOR

SymbolName: TypeAlias = str


def strip_leading(name: SymbolName) -> SymbolName:
    """Drop leading separators: ``\\App\\User`` → ``App\\User``"""
    return name.lstrip(NAMESPACE_SEPARATOR)


def is_namespaced(name: SymbolName) -> bool:
    """True if the (already stripped) name carries a namespace qualifier."""
    return NAMESPACE_SEPARATOR in name


def split_symbol(name: SymbolName) -> Tuple[str, str]:
    """
    Split a qualified name at its last separator.

    Examples:
        split_symbol('App\\Models\\User') → ('App\\Models', 'User')
        split_symbol('User') → ('', 'User')
    """
    namespace, _, short = strip_leading(name).rpartition(NAMESPACE_SEPARATOR)
    return namespace, short


def short_name(name: SymbolName) -> str:
    """Class name without its namespace."""
    return split_symbol(name)[1]


def qualify(namespace: str, short: str) -> SymbolName:
    """Join a namespace and a short name; the global namespace yields the bare name."""
    namespace = strip_leading(namespace).rstrip(NAMESPACE_SEPARATOR)
    if namespace == GLOBAL_NAMESPACE:
        return short
    return f"{namespace}{NAMESPACE_SEPARATOR}{short}"


def normalize_namespace(namespace: str) -> str:
    """Leading uppercase, rest lowercase: ``APP\\Models`` → ``App\\models``"""
    return strip_leading(namespace).capitalize()


def namespace_segments(namespace: str) -> List[str]:
    """Non-empty segments of a namespace string."""
    return [part for part in namespace.split(NAMESPACE_SEPARATOR) if part]


def word_segments(short: str) -> List[str]:
    """Path segments for a class name: ``Model_User`` → ['Model', 'User']"""
    return [part for part in short.split(WORD_SEPARATOR) if part]
