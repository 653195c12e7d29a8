"""
symload utilities package
"""

from .config import AutoloaderConfig
from .io_utils import is_source_file, to_host_path

__all__ = ["AutoloaderConfig", "is_source_file", "to_host_path"]
