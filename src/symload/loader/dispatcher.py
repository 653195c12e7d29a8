"""
Initialization Dispatcher

Holds the pending-initialization marker and an explicit stack of
in-progress resolutions. Both are thread-local.

Rule: the marker is armed by a resolution that starts while it is empty
and is only ever cleared for the symbol that armed it. Loads that happen as
a side effect of an outer resolution find the marker holding the outer
symbol and therefore never fire a hook of their own.
"""

import inspect
import logging
import threading
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

from ..shared.names import SymbolName
from ..utils.config import INIT_HOOK_NAME

logger = logging.getLogger(__name__)


class InitializationDispatcher:
    """
    Exactly-once post-load initialization.

    - resolving(symbol): frame for one resolution (arm on entry, disarm on exit)
    - fire(symbol, definition): run the hook if symbol holds the marker
    """

    def __init__(self, hook_name: str = INIT_HOOK_NAME):
        self.hook_name = hook_name
        self._state = threading.local()

    # =========================================================================
    # Thread-local state
    # =========================================================================

    @property
    def pending(self) -> Optional[SymbolName]:
        """Symbol whose initialization is still owed on this thread."""
        return getattr(self._state, "pending", None)

    @pending.setter
    def pending(self, symbol: Optional[SymbolName]) -> None:
        self._state.pending = symbol

    @property
    def _frames(self) -> List[str]:
        frames = getattr(self._state, "frames", None)
        if frames is None:
            frames = self._state.frames = []
        return frames

    @property
    def depth(self) -> int:
        """Number of resolutions in progress on this thread."""
        return len(self._frames)

    def in_progress(self, symbol: SymbolName) -> bool:
        return symbol in self._frames

    # =========================================================================
    # Arming
    # =========================================================================

    def arm(self, symbol: SymbolName) -> bool:
        """Arm the marker with symbol if nothing is armed. Returns True if armed."""
        if self.pending is not None:
            return False
        self.pending = symbol
        return True

    def disarm(self, symbol: SymbolName) -> None:
        """Clear the marker, but only if symbol is the one holding it."""
        if self.pending == symbol:
            self.pending = None

    @contextmanager
    def resolving(self, symbol: SymbolName) -> Iterator[None]:
        """Frame for one resolution: arm on entry, disarm on exit (always, including on exception)."""
        self.arm(symbol)
        self._frames.append(symbol)
        try:
            yield
        finally:
            self._frames.pop()
            self.disarm(symbol)

    # =========================================================================
    # Hook dispatch
    # =========================================================================

    def fire(self, symbol: SymbolName, definition: Any) -> bool:
        """
        Run the initializer for a freshly loaded symbol.

        The marker is cleared before the hook runs, so a hook that resolves
        further symbols starts a new chain instead of recursing into this one.

        Returns:
            True if a hook was invoked
        """
        if self.pending != symbol:
            return False
        self.pending = None

        if definition is None or not self.has_initializer(definition):
            return False
        logger.debug(f"Initializing {symbol!r} via {self.hook_name}()")
        getattr(definition, self.hook_name)()
        return True

    def has_initializer(self, definition: Any) -> bool:
        """True if definition exposes a static or class method named after the hook."""
        try:
            raw = inspect.getattr_static(definition, self.hook_name)
        except AttributeError:
            return False
        return isinstance(raw, (staticmethod, classmethod))
