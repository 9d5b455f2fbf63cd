from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *

# --- fluent chaining ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)


# --- abstract base class ---

class Enumerator(ABC, _CoreOperations[T]):
    """
    pull-based cursor over a logical sequence.

    callers drive it with advance() and read with current(); reset() rewinds the
    whole upstream chain. subclasses implement _advance, _current and _reset, the
    base class keeps the bookkeeping every combinator shares:

    - current() is None unless the last advance() returned True
    - once advance() has raised, the enumerator stays closed (advance() is False,
      current() is None) until reset()
    """

    def __init__(self):
        self._has_current = False
        self._faulted = False

    @abstractmethod
    def _advance(self) -> bool:
        """move to the next value, True if there is one"""
        pass

    @abstractmethod
    def _current(self) -> T:
        """the value at the cursor, only called after a successful advance"""
        pass

    @abstractmethod
    def _reset(self) -> None:
        """rewind this enumerator and everything upstream of it"""
        pass

    def advance(self) -> bool:
        if self._faulted:
            return False
        try:
            self._has_current = self._advance()
        except Exception as e:
            self._has_current = False
            self._faulted = True
            logger.debug(f"{type(self).__name__} closed after error: {type(e).__name__}: {e}")
            raise
        return self._has_current

    def current(self) -> Optional[T]:
        if not self._has_current:
            return None
        return self._current()

    def reset(self) -> None:
        self._has_current = False
        self._faulted = False
        self._reset()

    @property
    def to(self) -> TerminalAccessor[T]:
        """terminal operations that drain this enumerator"""
        return TerminalAccessor(self)

    def __iter__(self) -> Iterator[T]:
        # drains from the current position, no implicit reset
        while self.advance():
            yield self.current()
