from __future__ import annotations

import logging
from bisect import bisect_right
from .types import *
from .enumerator import Enumerator
from .sources import SliceSource

logger = logging.getLogger(__name__)


class _LessComparable:
    """wraps an object so that bisect orders it with a user supplied less function"""
    __slots__ = ('obj', 'less')

    def __init__(self, obj, less):
        self.obj = obj
        self.less = less

    def __lt__(self, other):
        return self.less(self.obj, other.obj)


class Sort(Enumerator[T]):
    """
    yields the upstream values ordered by `less`.

    the upstream is drained on the first advance() (and again after reset()),
    reading at most capacity + 1 values. values are kept sorted as they arrive by
    binary insertion, which is fine for the small windows this is meant for but
    costs o(n^2) moves in the worst case. equal values keep their arrival order.
    """

    def __init__(self, source: Enumerator[T], less: Less[T], capacity: int):
        super().__init__()
        if not callable(less):
            raise TypeError("less must be callable")
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._source = source
        self._less = less
        self._capacity = capacity
        self._result: Optional[SliceSource[T]] = None

    def _materialize(self) -> SliceSource[T]:
        less = self._less
        result: List[T] = []
        # bisect_right places a new value after any equal ones already in the list
        key = lambda item: _LessComparable(item, less)

        for _ in range(self._capacity + 1):
            if not self._source.advance():
                break
            value = self._source.current()
            index = bisect_right(result, _LessComparable(value, less), key=key)
            result.insert(index, value)
        else:
            logger.warning(
                f"sort read {len(result)} values, more than its capacity of {self._capacity}; "
                f"remaining upstream values are ignored")

        return SliceSource(result)

    def _advance(self) -> bool:
        if self._result is None:
            self._result = self._materialize()
        return self._result.advance()

    def _current(self) -> T:
        return self._result.current()

    def _reset(self) -> None:
        # drop the output rather than rewinding it, so the whole chain is read again
        self._result = None
        self._source.reset()
