from __future__ import annotations

from .types import *
from .enumerator import Enumerator


def _require_callable(func: Any, name: str) -> None:
    if not callable(func):
        raise TypeError(f"{name} must be callable")


class Where(Enumerator[T]):
    """yields the upstream values for which the predicate returns True"""

    def __init__(self, source: Enumerator[T], predicate: Predicate[T]):
        super().__init__()
        _require_callable(predicate, "predicate")
        self._source = source
        self._predicate = predicate

    def _advance(self) -> bool:
        while True:
            if not self._source.advance():
                return False
            # predicate errors propagate out of advance()
            if self._predicate(self._source.current()):
                return True

    def _current(self) -> T:
        return self._source.current()

    def _reset(self) -> None:
        self._source.reset()


class Select(Enumerator[U]):
    """yields selector(value) for every upstream value"""

    def __init__(self, source: Enumerator[T], selector: Selector[T, U]):
        super().__init__()
        _require_callable(selector, "selector")
        self._source = source
        self._selector = selector
        self._value: Optional[U] = None

    def _advance(self) -> bool:
        if not self._source.advance():
            return False
        # mapping happens here so that selector errors surface from advance(), not current()
        self._value = self._selector(self._source.current())
        return True

    def _current(self) -> U:
        return self._value

    def _reset(self) -> None:
        self._value = None
        self._source.reset()
