from __future__ import annotations

from .types import *
from .enumerator import Enumerator


class SliceSource(Enumerator[T]):
    """enumerates a fixed, ordered snapshot of values"""

    def __init__(self, values: Iterable[T]):
        super().__init__()
        self._values: List[T] = list(values)
        self._index = -1

    def _advance(self) -> bool:
        if self._index >= len(self._values):
            return False
        self._index += 1
        return self._index < len(self._values)

    def _current(self) -> T:
        return self._values[self._index]

    def _reset(self) -> None:
        self._index = -1

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SliceSource(length={len(self._values)}, index={self._index})"


class GeneratorSource(Enumerator[T]):
    """
    lazily pulls from an iterable produced by a factory.
    the factory is called on the first advance() and again after every reset(),
    so generator functions and other one-shot iterables can be re-enumerated.
    """

    def __init__(self, factory: Factory[T]):
        super().__init__()
        if not callable(factory):
            raise TypeError("factory must be callable")
        self._factory = factory
        self._iterator: Optional[Iterator[T]] = None
        self._value: Optional[T] = None
        self._exhausted = False

    def _advance(self) -> bool:
        if self._exhausted:
            return False
        if self._iterator is None:
            self._iterator = iter(self._factory())
        try:
            self._value = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            self._value = None
            return False
        return True

    def _current(self) -> T:
        return self._value

    def _reset(self) -> None:
        self._iterator = None
        self._value = None
        self._exhausted = False
