"""Loader: symbol resolution, path derivation, unit loading, initialization."""

from .autoloader import Autoloader
from .dispatcher import InitializationDispatcher
from .path_resolver import SymbolPathResolver
from .unit_loader import SourceUnitLoader, LoadedUnit, UnitLoaderProtocol

__all__ = [
    'Autoloader',
    'InitializationDispatcher',
    'SymbolPathResolver',
    'SourceUnitLoader',
    'LoadedUnit',
    'UnitLoaderProtocol',
]
