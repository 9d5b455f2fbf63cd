from __future__ import annotations

from .types import *
from .enumerator import Enumerator


def _require_count(count: int, name: str) -> int:
    if count < 0:
        raise ValueError(f"{name} must be non-negative")
    return count


class Skip(Enumerator[T]):
    """
    discards the first `offset` upstream values.
    only values actually pulled count towards the offset, so an empty pull from
    a queue that is filled later does not eat into it.
    """

    def __init__(self, source: Enumerator[T], offset: int):
        super().__init__()
        self._source = source
        self._offset = _require_count(offset, "offset")
        self._count = 0

    def _advance(self) -> bool:
        while self._count < self._offset:
            if not self._source.advance():
                return False
            self._count += 1
        return self._source.advance()

    def _current(self) -> T:
        return self._source.current()

    def _reset(self) -> None:
        self._count = 0
        self._source.reset()


class Take(Enumerator[T]):
    """
    yields at most `limit` upstream values, never pulling past the limit.
    empty pulls do not count towards the limit.
    """

    def __init__(self, source: Enumerator[T], limit: int):
        super().__init__()
        self._source = source
        self._limit = _require_count(limit, "limit")
        self._count = 0

    def _advance(self) -> bool:
        if self._count >= self._limit:
            return False
        if not self._source.advance():
            return False
        self._count += 1
        return True

    def _current(self) -> T:
        return self._source.current()

    def _reset(self) -> None:
        self._count = 0
        self._source.reset()
