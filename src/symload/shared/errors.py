"""
Autoloader exception hierarchy.

A lookup miss is never an exception: resolvers return False and the caller
checks the result. Exceptions are reserved for configuration faults and for
failures of the load primitive itself.
"""

from pathlib import Path
from typing import Optional, Union


class SymloadError(Exception):
    """Base for all symload errors."""


class AliasCollisionError(SymloadError):
    """Raised when an alias would shadow a name that is already bound.

    Two independently developed packages claiming the same short name is a
    configuration fault; skipping the alias would hide it.
    """

    def __init__(self, alias: str, canonical: str, existing: Optional[str] = None):
        self.alias = alias
        self.canonical = canonical
        self.existing = existing
        detail = f" (already bound to {existing!r})" if existing else ""
        super().__init__(f"Cannot alias {canonical!r} as {alias!r}: name already in use{detail}")


class SymbolRedefinitionError(SymloadError):
    """Raised when a defined symbol would be rebound to a different object."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Symbol {name!r} is already defined")


class SymbolNotFoundError(SymloadError, LookupError):
    """Raised by the symbol space when no resolver provides a requested symbol"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Symbol {name!r} is not defined and could not be autoloaded")


class SourceUnitLoadError(SymloadError):
    """Raised when a source unit cannot be read or raises while executing"""

    def __init__(self, path: Union[Path, str], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to load source unit {self.path}: {reason}")
