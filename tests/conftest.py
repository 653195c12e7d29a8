"""
Pytest configuration and shared fixtures for all symload tests.

Fixtures build a fresh symbol space and autoloader per test; unit files
are written under tmp_path so every test has its own class tree.
"""

import sys
import textwrap
from pathlib import Path
from typing import Callable, Dict, List, Union

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from symload.loader import Autoloader
from symload.registry import AutoloadRegistry
from symload.runtime import SymbolSpace
from symload.utils.config import AutoloaderConfig


class RecordingUnitLoader:
    """
    In-memory load primitive.

    Files "exist" when listed in ``files``; loading one defines the classes
    mapped to it and records the path. Every existence probe is recorded too.
    """

    def __init__(self, space: SymbolSpace, files: Dict[str, Dict[str, type]] = None):
        self.space = space
        self.files: Dict[str, Dict[str, type]] = files or {}
        self.probed: List[str] = []
        self.loaded: List[str] = []

    def add_file(self, path: Union[Path, str], classes: Dict[str, type]) -> None:
        self.files[str(path)] = dict(classes)

    def file_exists(self, path: Union[Path, str]) -> bool:
        self.probed.append(str(path))
        return str(path) in self.files

    def load_unit(self, path: Union[Path, str]) -> None:
        self.loaded.append(str(path))
        for name, cls in self.files.get(str(path), {}).items():
            self.space.define(name, cls)


# =============================================================================
# Function-scoped fixtures (default - one per test)
# =============================================================================

@pytest.fixture
def space() -> SymbolSpace:
    """Fresh symbol space."""
    return SymbolSpace()


@pytest.fixture
def app_path(tmp_path: Path) -> Path:
    path = tmp_path / "app"
    (path / "classes").mkdir(parents=True)
    return path


@pytest.fixture
def config(app_path: Path) -> AutoloaderConfig:
    return AutoloaderConfig(app_path=app_path)


@pytest.fixture
def registry(config: AutoloaderConfig) -> AutoloadRegistry:
    return AutoloadRegistry.from_config(config)


@pytest.fixture
def autoloader(space: SymbolSpace, registry: AutoloadRegistry, config: AutoloaderConfig) -> Autoloader:
    """Autoloader on the real SourceUnitLoader, installed in the space's resolver chain."""
    loader = Autoloader(space, registry=registry, config=config)
    loader.register()
    return loader


@pytest.fixture
def recording_loader(space: SymbolSpace) -> RecordingUnitLoader:
    return RecordingUnitLoader(space)


@pytest.fixture
def fake_autoloader(space: SymbolSpace, recording_loader: RecordingUnitLoader) -> Autoloader:
    """Autoloader over the in-memory loader; conventional root is /app/classes."""
    loader = Autoloader(
        space,
        config=AutoloaderConfig(app_path="/app"),
        unit_loader=recording_loader,
    )
    loader.register()
    return loader


@pytest.fixture
def write_unit(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a unit file relative to tmp_path and return its path."""

    def _write(relative: str, source: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def calls() -> List[str]:
    """Shared call log; units append to it through ``symbols["Trace"]``."""
    return []


@pytest.fixture
def traced_space(space: SymbolSpace, calls: List[str]) -> SymbolSpace:
    """Space with a ``Trace`` helper defined so units can record hook calls."""

    class Trace:
        log = calls

        @staticmethod
        def record(event: str) -> None:
            calls.append(event)

    space.define("Trace", Trace)
    return space

