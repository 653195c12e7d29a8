"""
Runtime Module

The symbol space that holds loaded definitions and triggers autoloading.
"""

from .space import SymbolSpace, Resolver

__all__ = ["SymbolSpace", "Resolver"]
