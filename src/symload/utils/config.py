"""
Configuration constants and autoloader settings.

Naming conventions shared by the registries, the path resolver and the
source unit loader live here so none of them hardcode separators or
extensions.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Tuple, Union

from typing_extensions import Final

# Symbol naming constants
NAMESPACE_SEPARATOR: Final = "\\"
WORD_SEPARATOR: Final = "_"
GLOBAL_NAMESPACE: Final = ""

# Source unit constants
SOURCE_FILE_EXTENSION: Final = ".py"
DEFAULT_CLASS_DIR: Final = "classes"
UNIT_NAMESPACE_ATTR: Final = "__namespace__"
UNIT_SPACE_GLOBAL: Final = "symbols"
UNIT_MODULE_PREFIX: Final = "symload.units"

# Initialization constants
INIT_HOOK_NAME: Final = "_init"

# Core namespace constants
DEFAULT_CORE_NAMESPACE: Final = "Core"


@dataclass(frozen=True)
class AutoloaderConfig:
    """
    Autoloader settings. Immutable after creation.

    Override what you need::

        config = AutoloaderConfig(app_path="/srv/app", core_namespaces=("Framework\\\\Core",))
    """

    # Conventional fallback root: <app_path>/<class_dir>/<symbol path><ext>
    app_path: Optional[Union[str, Path]] = None
    class_dir: str = DEFAULT_CLASS_DIR

    # Core namespaces, highest precedence first
    core_namespaces: Tuple[str, ...] = (DEFAULT_CORE_NAMESPACE,)
    fallback_core_namespace: str = DEFAULT_CORE_NAMESPACE

    file_extension: str = SOURCE_FILE_EXTENSION
    init_hook: str = INIT_HOOK_NAME

    # Namespaced lookups lowercase the whole candidate path, base path included
    lowercase_base_paths: bool = True

    @property
    def class_root(self) -> Optional[Path]:
        """Directory holding conventionally laid out classes, or None when no app path is set."""
        if self.app_path is None:
            return None
        return Path(self.app_path) / self.class_dir

    def with_overrides(self, **changes) -> "AutoloaderConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
