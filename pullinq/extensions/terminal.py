from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerator import Enumerator


class TerminalAccessor(Generic[T]):
    """
    operations that pull the enumerator to exhaustion (or to the first match).
    they start from wherever the cursor is, call reset() first to read everything.
    """

    def __init__(self, enumerator_instance: 'Enumerator[T]'):
        self._enumerator = enumerator_instance

    def list(self) -> List[T]:
        """drain into a list"""
        return [item for item in self._enumerator]

    def array(self) -> np.ndarray:
        """drain into a numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """drain into a pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """drain into a pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._enumerator)
        return sum(1 for x in self._enumerator if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition, stops pulling at the first hit"""
        if predicate is None: return self._enumerator.advance()
        return any(predicate(x) for x in self._enumerator)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element, stops pulling once found"""
        for item in self._enumerator:
            if predicate is None or predicate(item):
                return item
        if predicate is None: raise ValueError("sequence contains no elements")
        raise ValueError("no element satisfies the condition")
