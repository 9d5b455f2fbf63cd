from __future__ import annotations

import logging
from enum import Enum
from .types import *
from .enumerator import Enumerator

logger = logging.getLogger(__name__)

# slots added per growth event. one at a time suits the append-while-reading
# pattern the queue exists for.
GROWTH_RATE = 1


class _Growth(Enum):
    """conditions under which put() must grow the backing list instead of reusing a slot"""
    EMPTY = "empty"
    ZERO_SLOT_OCCUPIED = "zero slot occupied"
    READ_COLLISION = "read collision"


class Queue(Enumerator[T]):
    """
    fifo queue that can be appended to while it is being enumerated.

    backed by a ring buffer that grows on demand and never shrinks (until reset).
    three cursors describe it:

    - read: the slot last handed out by advance(), kept intact while it is the
      current value because current() may be called on it again
    - head: the oldest unread slot
    - pending: how many unread values follow on from head, wrapping at the end

    a slot is occupied when it holds the current value or lies in the unread
    window; put() only grows the list when the next slot in line is occupied.

    not thread safe: producer (put) and consumer (advance/current) calls must be
    serialized by the caller, e.g. with one lock per queue.
    """

    def __init__(self, growth_rate: int = GROWTH_RATE):
        super().__init__()
        if growth_rate < 1:
            raise ValueError("growth rate must be positive")
        self._growth_rate = growth_rate
        self._grow = {
            _Growth.EMPTY: self._allocate,
            _Growth.ZERO_SLOT_OCCUPIED: self._grow_at_end,
            _Growth.READ_COLLISION: self._grow_at_read,
        }
        self._clear()

    def _clear(self) -> None:
        self._values: List[Optional[T]] = []
        self._read = -1
        self._head = 0
        self._pending = 0
        self._high_water = 0

    def _occupied(self, slot: int) -> bool:
        if self._has_current and slot == self._read:
            return True
        return (slot - self._head) % len(self._values) < self._pending

    # --- producer side ---

    def put(self, value: T) -> None:
        """add a value to the back of the queue, allowed at any point during enumeration"""
        # natural next slot, may run one past the end or round past slot 0
        natural = self._head + self._pending
        trigger = self._growth_trigger(natural)
        if trigger is not None:
            index = self._grow[trigger](natural)
            logger.debug(f"queue grew ({trigger.value}) to {len(self._values)} slots")
        else:
            index = natural % len(self._values)

        self._values[index] = value
        # growth may have moved the oldest unread value, it sits `pending` slots behind the new one
        self._head = (index - self._pending) % len(self._values)
        self._pending += 1

        held = self._pending + (1 if self._has_current else 0)
        if held > self._high_water:
            self._high_water = held

    def _growth_trigger(self, natural: int) -> Optional[_Growth]:
        if not self._values:
            return _Growth.EMPTY
        if natural == len(self._values):
            # wrapping to slot 0 would clobber an unread or current value
            return _Growth.ZERO_SLOT_OCCUPIED if self._occupied(0) else None
        if self._occupied(natural % len(self._values)):
            return _Growth.READ_COLLISION
        return None

    def _allocate(self, natural: int) -> int:
        self._values = [None] * self._growth_rate
        self._read = -1
        return 0

    def _grow_at_end(self, natural: int) -> int:
        # natural is the old length here, the new value goes straight after the old data
        self._values.extend([None] * self._growth_rate)
        return natural

    def _grow_at_read(self, natural: int) -> int:
        # open a gap between the newest and the oldest data, e.g. [3, 4, gap, 1, 2]
        index = natural % len(self._values)
        self._values[index:index] = [None] * self._growth_rate
        if self._read >= index:
            self._read += self._growth_rate
        return index

    # --- consumer side ---

    def _advance(self) -> bool:
        if self._pending == 0:
            # nothing unread, the read cursor stays where it is
            return False
        self._read = self._head
        self._head = (self._head + 1) % len(self._values)
        self._pending -= 1
        return True

    def _current(self) -> T:
        return self._values[self._read]

    def _reset(self) -> None:
        self._clear()

    # --- observability ---

    def size(self) -> int:
        """length of the backing list, including stale slots"""
        return len(self._values)

    @property
    def high_water(self) -> int:
        """largest number of values held at once, counting the current value"""
        return self._high_water

    def __len__(self) -> int:
        """number of values put but not yet read"""
        return self._pending

    def __repr__(self) -> str:
        return f"Queue(pending={self._pending}, size={len(self._values)}, read={self._read}, head={self._head})"
