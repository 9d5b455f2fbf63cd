import typing
from .types import *
from .sources import SliceSource, GeneratorSource
from .queue import Queue, GROWTH_RATE
from .socket import Socket
from .concat import Concatenation
from .projection import Where, Select
from .paging import Skip, Take
from .sort import Sort

if typing.TYPE_CHECKING:
    from .enumerator import Enumerator

# --- sources ---

def from_iterable(data: Iterable[T]) -> SliceSource[T]:
    """create enumerator over a snapshot of an iterable"""
    return SliceSource(data)

def from_range(start: int, count: int) -> SliceSource[int]:
    """create enumerator over a range"""
    return SliceSource(range(start, start + count))

def repeat(item: T, count: int) -> SliceSource[T]:
    """create enumerator with repeated item"""
    return SliceSource([item] * count)

def empty() -> SliceSource[Any]:
    """create empty enumerator"""
    return SliceSource([])

def generate(factory: Factory[T]) -> GeneratorSource[T]:
    """create a lazy enumerator, factory is called again after every reset"""
    return GeneratorSource(factory)

def new_queue(growth_rate: int = GROWTH_RATE) -> Queue[T]:
    """create an empty fifo queue that can be appended to while enumerating"""
    return Queue(growth_rate)

def new_socket(source: Optional['Enumerator[T]'] = None) -> Socket[T]:
    """create a socket, optionally plugged into a source"""
    socket = Socket()
    if source is not None:
        socket.set_source(source)
    return socket

# --- combinators ---

def concat(*sources: 'Enumerator[T]') -> Concatenation[T]:
    """stack sources one after another, more can be appended later"""
    return Concatenation(sources)

def where(source: 'Enumerator[T]', predicate: Predicate[T]) -> Where[T]:
    return Where(source, predicate)

def select(source: 'Enumerator[T]', selector: Selector[T, U]) -> Select[U]:
    return Select(source, selector)

def skip(source: 'Enumerator[T]', offset: int) -> Skip[T]:
    return Skip(source, offset)

def take(source: 'Enumerator[T]', limit: int) -> Take[T]:
    return Take(source, limit)

def sort(source: 'Enumerator[T]', less: Less[T], capacity: int) -> Sort[T]:
    return Sort(source, less, capacity)

# --- aliases ---
pullinq = from_iterable
P = from_iterable
