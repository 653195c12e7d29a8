"""
Centralized file system utilities.

- Single place for path normalisation
- Unit source itself is read by importlib's SourceFileLoader
"""

import os
from pathlib import Path
from typing import Union


def to_host_path(path: Union[Path, str]) -> Path:
    """Normalise forward slashes in a registered path to the host separator."""
    if isinstance(path, Path):
        return path
    return Path(path.replace("/", os.sep))


def is_source_file(path: Union[Path, str]) -> bool:
    """True if path names an existing regular file."""
    return to_host_path(path).is_file()
