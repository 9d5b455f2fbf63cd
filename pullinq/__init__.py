"""
'               _ _ _
'    _ __  _  _| | (_)_ _  __ _
'   | '_ \| || | | | | ' \/ _` |
'   | .__/\_,_|_|_|_|_||_\__, |
'   |_|                     |_|
"""

# expose the protocol and combinators
from .enumerator import Enumerator
from .sources import SliceSource, GeneratorSource
from .queue import Queue, GROWTH_RATE
from .socket import Socket
from .concat import Concatenation
from .projection import Where, Select
from .paging import Skip, Take
from .sort import Sort

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    new_queue,
    new_socket,
    concat,
    where,
    select,
    skip,
    take,
    sort,
    pullinq,
    P
)

# expose supporting types
from .types import Option

# define what `import *` does
__all__ = [
    "Enumerator",
    "SliceSource",
    "GeneratorSource",
    "Queue",
    "GROWTH_RATE",
    "Socket",
    "Concatenation",
    "Where",
    "Select",
    "Skip",
    "Take",
    "Sort",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "new_queue",
    "new_socket",
    "concat",
    "where",
    "select",
    "skip",
    "take",
    "sort",
    "pullinq",
    "P",
    "Option"
]
