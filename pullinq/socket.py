from __future__ import annotations

from .types import *
from .enumerator import Enumerator


class Socket(Enumerator[T]):
    """
    enumerates a source that can be plugged in, or swapped out, at any time.
    behaves as empty until a source is set, and again after reset(), which
    resets the held source and then unplugs it.
    """

    def __init__(self):
        super().__init__()
        self._source: Option[Enumerator[T]] = Option.none()

    def set_source(self, source: Enumerator[T]) -> None:
        """replace the held source, the old one is left as it is"""
        self._source = Option.some(source)

    @property
    def has_source(self) -> bool: return self._source.has_value

    def _advance(self) -> bool:
        if not self._source.has_value:
            return False
        return self._source.value.advance()

    def _current(self) -> T:
        if not self._source.has_value:
            return None
        return self._source.value.current()

    def _reset(self) -> None:
        if self._source.has_value:
            self._source.value.reset()
        self._source = Option.none()
