from __future__ import annotations

from .types import *
from .enumerator import Enumerator


class Concatenation(Enumerator[T]):
    """
    enumerates several sources one after another.

    sources may be appended, and existing sources may gain values, after
    enumeration has begun. when the last source runs dry the concatenation
    loops back to the first and keeps polling round robin, reporting the end
    only once a full lap turns up nothing.
    """

    def __init__(self, sources: Iterable[Enumerator[T]] = ()):
        super().__init__()
        self._sources: List[Enumerator[T]] = list(sources)
        self._index = 0

    def append(self, source: Enumerator[T]) -> None:
        """add a source to the end, allowed mid-enumeration"""
        self._sources.append(source)

    @property
    def sources(self) -> List[Enumerator[T]]:
        return list(self._sources)

    def _advance(self) -> bool:
        start = self._index
        has_looped = False

        while True:
            # the length is re-read every step, sources appended mid-lap get polled
            if self._index >= len(self._sources):
                # a lap that began at the first source is already complete here
                if not self._sources or has_looped or start == 0:
                    return False
                # earlier sources may have gained values while later ones were read
                self._index = 0
                has_looped = True

            if self._sources[self._index].advance():
                return True

            self._index += 1
            if self._index == start:
                # back where the lap began without finding anything
                return False

    def _current(self) -> T:
        return self._sources[self._index].current()

    def _reset(self) -> None:
        self._index = 0
        for source in self._sources:
            source.reset()

    def __repr__(self) -> str:
        return f"Concatenation(sources={len(self._sources)}, index={self._index})"
