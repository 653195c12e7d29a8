"""
Source Unit Loader

Loads a source unit (a Python file) into the symbol space.

The unit runs as a fresh module with the active SymbolSpace injected as
``symbols``; looking up a missing symbol from inside a unit re-enters the
autoloader. Once the unit has executed, every public class it defines is
bound as ``<__namespace__>\\<ClassName>``.

Loading is idempotent per resolved path: a finished unit is returned from
cache, and a unit that is still executing further up the call chain is not
executed a second time.
"""

import importlib.machinery
import importlib.util
import inspect
import itertools
import logging
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Dict, List, Optional, Union

from typing_extensions import Protocol

from ..runtime.space import SymbolSpace
from ..shared.errors import SourceUnitLoadError, SymloadError
from ..shared.names import qualify
from ..utils.config import GLOBAL_NAMESPACE, UNIT_MODULE_PREFIX, UNIT_NAMESPACE_ATTR, UNIT_SPACE_GLOBAL
from ..utils.io_utils import is_source_file, to_host_path

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"\W")

# Unit module names stay unique across loaders sharing sys.modules
_unit_sequence = itertools.count()


class UnitLoaderProtocol(Protocol):
    """File system collaborator used by the autoloader."""

    def file_exists(self, path: Union[Path, str]) -> bool:
        ...

    def load_unit(self, path: Union[Path, str]) -> object:
        ...


@dataclass
class LoadedUnit:
    """
    A source unit that has been executed.

    - path: resolved file path
    - module: the module object the unit ran in
    - namespace: value of the unit's ``__namespace__``
    - symbols: qualified names the unit defined
    """
    path: Path
    module: ModuleType
    namespace: str = GLOBAL_NAMESPACE
    symbols: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"Unit({self.path.name}, {len(self.symbols)} symbols)"


class SourceUnitLoader:
    """
    Default load primitive: executes unit files and defines their classes.
    """
    def __init__(self, space: SymbolSpace):
        self.space = space
        self.loaded: Dict[Path, LoadedUnit] = {}
        self.loading_stack: List[Path] = []

    def file_exists(self, path: Union[Path, str]) -> bool:
        return is_source_file(path)

    def load_unit(self, path: Union[Path, str]) -> Optional[LoadedUnit]:
        """
        Execute a unit file and define its classes.

        Either every class of the unit is bound or none is; a failed unit
        leaves neither symbols nor a module in sys.modules behind and can be
        loaded again.

        Returns:
            The LoadedUnit, or None when the unit is already executing
            higher in the call chain.

        Raises:
            SourceUnitLoadError: if the file cannot be read or raises while executing
            SymbolRedefinitionError, AliasCollisionError: if a class name is already taken
        """
        file_path = to_host_path(path)
        key = file_path.resolve()

        if key in self.loaded:
            return self.loaded[key]
        if key in self.loading_stack:
            logger.debug(f"Unit {key} is already executing; not re-entering")
            return None

        module_name = self._module_name(key)
        self.loading_stack.append(key)
        try:
            module = self._execute(key, module_name)
            unit = self._define_symbols(key, module)
        except Exception:
            sys.modules.pop(module_name, None)
            raise
        finally:
            self.loading_stack.pop()

        self.loaded[key] = unit
        logger.debug(f"Loaded unit {key}: {len(unit.symbols)} symbols")
        return unit

    def loaded_units(self) -> List[LoadedUnit]:
        return list(self.loaded.values())

    def _module_name(self, file_path: Path) -> str:
        stem = _UNSAFE_CHARS.sub("_", file_path.stem)
        return f"{UNIT_MODULE_PREFIX}.u{next(_unit_sequence)}_{stem}"

    def _execute(self, file_path: Path, module_name: str) -> ModuleType:
        # Explicit loader: units may use any configured file extension
        loader = importlib.machinery.SourceFileLoader(module_name, str(file_path))
        spec = importlib.util.spec_from_file_location(module_name, file_path, loader=loader)
        module = importlib.util.module_from_spec(spec)
        setattr(module, UNIT_SPACE_GLOBAL, self.space)

        # Registered so dataclasses and pickling can find the unit's classes
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except SymloadError:
            raise
        except OSError as e:
            raise SourceUnitLoadError(file_path, str(e)) from e
        except Exception as e:
            raise SourceUnitLoadError(file_path, f"{type(e).__name__}: {e}") from e
        return module

    def _define_symbols(self, file_path: Path, module: ModuleType) -> LoadedUnit:
        namespace = getattr(module, UNIT_NAMESPACE_ATTR, GLOBAL_NAMESPACE) or GLOBAL_NAMESPACE
        unit = LoadedUnit(path=file_path, module=module, namespace=namespace)

        bindings = {}
        for attr, value in list(vars(module).items()):
            if attr.startswith("_") or not inspect.isclass(value):
                continue
            # Skip classes the unit merely imported or fetched from the space
            if value.__module__ != module.__name__:
                continue
            bindings[qualify(namespace, attr)] = value

        self.space.define_many(bindings)
        unit.symbols.extend(bindings)

        if not unit.symbols:
            logger.warning(f"Unit {file_path} defined no symbols")
        return unit
