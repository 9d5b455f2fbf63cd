from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerator import Enumerator
    from ..concat import Concatenation


class _CoreOperations(Generic[T]):
    def where(self: 'Enumerator[T]', predicate: Predicate[T]) -> 'Enumerator[T]':
        """filter elements based on a predicate"""
        from ..projection import Where
        return Where(self, predicate)

    def select(self: 'Enumerator[T]', selector: Selector[T, U]) -> 'Enumerator[U]':
        """project each element to a new form"""
        from ..projection import Select
        return Select(self, selector)

    def skip(self: 'Enumerator[T]', count: int) -> 'Enumerator[T]':
        """skip the first 'count' elements"""
        from ..paging import Skip
        return Skip(self, count)

    def take(self: 'Enumerator[T]', count: int) -> 'Enumerator[T]':
        """take at most 'count' elements"""
        from ..paging import Take
        return Take(self, count)

    def order_by(self: 'Enumerator[T]', less: Less[T], capacity: int) -> 'Enumerator[T]':
        """sort up to capacity + 1 elements with a less-than function"""
        from ..sort import Sort
        return Sort(self, less, capacity)

    def order_by_key(self: 'Enumerator[T]', key_selector: KeySelector[T, K], capacity: int,
                     descending: bool = False) -> 'Enumerator[T]':
        """sort by a key, ties keep their upstream order in both directions"""
        from ..sort import Sort
        if descending:
            return Sort(self, lambda a, b: key_selector(b) < key_selector(a), capacity)
        return Sort(self, lambda a, b: key_selector(a) < key_selector(b), capacity)

    def concat(self: 'Enumerator[T]', *others: 'Enumerator[T]') -> 'Concatenation[T]':
        """enumerate this sequence followed by the others, more can be appended later"""
        from ..concat import Concatenation
        return Concatenation([self, *others])
