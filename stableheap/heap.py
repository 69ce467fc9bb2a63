"""
Stable binary min‑heap.

Entries are kept in two parallel NumPy arrays, `values` (object) and
`counters` (unsigned int), laid out as an implicit binary heap.  Every entry
gets a strictly increasing insertion counter, and ties under the comparator
are broken by that counter, so equal elements leave in FIFO order.

Typical usage:

    q = StableHeap(lambda a, b: a.energy - b.energy)
    q.add(player)
    q.add(monster)
    while not q.is_empty():
        handle(q.poll())
"""

import logging
from typing import Any, Callable, Iterator, Optional

import numpy as np

from stableheap import datatypes
from stableheap.datatypes import ABSENT
from stableheap.exceptions import ConfigurationError, CounterExhaustedError

logger = logging.getLogger(__name__)

Comparator = Callable[[Any, Any], int]

# ──────────────────────────────────────────────────────────────────────────
DEFAULT_COUNTER_DTYPE = np.uint64
INITIAL_CAPACITY: int = 16


def natural_compare(a, b) -> int:
    """Ascending order by the values' own `<` / `>`."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


class StableHeap:
    """
    Priority queue that yields its minimum first and keeps insertion order
    among elements the comparator reports as equal.

    Parameters
    ----------
    compare : callable, optional
        ``compare(a, b)`` returns a negative number, zero or a positive
        number.  It must be a valid weak ordering; this is not checked.
        Defaults to `natural_compare`.
    counter_dtype : numpy unsigned integer type
        Storage type of the tie-break counters.
    initial_capacity : int
        Slots allocated by the first growth.
    """

    __slots__ = ("_compare", "_values", "_counters", "_size",
                 "_next_counter", "_counter_max", "_initial_capacity")

    def __init__(self, compare: Optional[Comparator] = None, *,
                 counter_dtype=DEFAULT_COUNTER_DTYPE,
                 initial_capacity: int = INITIAL_CAPACITY) -> None:
        if initial_capacity < 0:
            raise ConfigurationError(
                f"initial capacity must be >= 0, got {initial_capacity}"
            )
        dt = datatypes.counter_dtype(counter_dtype)
        self._compare: Comparator = (
            compare if compare is not None else natural_compare)
        self._values = np.empty(0, dtype=object)
        self._counters = np.empty(0, dtype=dt)
        self._size = 0
        self._next_counter = 0
        self._counter_max = datatypes.counter_limit(dt)
        self._initial_capacity = initial_capacity

    # ────────────────────────── public ──────────────────────────
    def add(self, value: Any) -> None:
        """Insert `value`.  O(log n)."""
        if self._next_counter > self._counter_max:
            if self._size > self._counter_max:
                raise CounterExhaustedError(
                    f"{self._size} live entries fill the whole "
                    f"{self._counters.dtype.name} counter range"
                )
            self.renumber()
        if self._size == len(self._values):
            self._grow()

        i = self._size
        self._values[i] = value
        self._counters[i] = self._next_counter
        self._next_counter += 1
        self._size += 1
        self._sift_up(i)

    def peek(self) -> Any:
        """Return the minimum without removing it, or `ABSENT`."""
        if self._size == 0:
            return ABSENT
        return self._values[0]

    def poll(self) -> Any:
        """Remove and return the minimum, or `ABSENT` if empty.  O(log n)."""
        if self._size == 0:
            return ABSENT
        top = self._values[0]
        self._size -= 1
        last = self._size
        if last > 0:
            self._values[0] = self._values[last]
            self._counters[0] = self._counters[last]
            self._values[last] = None
            self._sift_down(0)
        else:
            self._values[0] = None
        return top

    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        """Allocated slots, live or not."""
        return len(self._values)

    def trim(self) -> None:
        """Release the slots past the live entries."""
        released = len(self._values) - self._size
        if released == 0:
            return
        self._values = self._values[:self._size].copy()
        self._counters = self._counters[:self._size].copy()
        logger.debug("trim released %d slots (size=%d)", released, self._size)

    def renumber(self) -> None:
        """
        Reset the tie-break counters to ``0..n-1``.

        The queue is drained (which yields the final stable order), then
        every value is added back in that order.  O(n log n).  Called by
        `add` before the counter would overflow.
        """
        buffer = []
        while self._size:
            buffer.append(self.poll())
        self._next_counter = 0
        for value in buffer:
            self.add(value)
        logger.debug("renumbered %d entries", len(buffer))

    def drain(self) -> Iterator[Any]:
        """Yield and remove every element, minimum first."""
        while self._size:
            yield self.poll()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(size={self._size}, "
                f"capacity={len(self._values)})")

    # ───────────────────────── internals ─────────────────────────
    def _less(self, i: int, j: int) -> bool:
        """Stable order: comparator first, insertion counter on ties."""
        cmp = self._compare(self._values[i], self._values[j])
        return cmp < 0 or (cmp == 0 and self._counters[i] < self._counters[j])

    def _swap(self, i: int, j: int) -> None:
        values, counters = self._values, self._counters
        values[i], values[j] = values[j], values[i]
        counters[i], counters[j] = counters[j], counters[i]

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) >> 1
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        size = self._size
        half = size >> 1
        while i < half:
            child = (i << 1) + 1
            right = child + 1
            if right < size and self._less(right, child):
                child = right
            if not self._less(child, i):
                break
            self._swap(i, child)
            i = child

    def _grow(self) -> None:
        # allocate first: a MemoryError must leave the queue untouched
        capacity = max(self._initial_capacity, 2 * len(self._values), 1)
        values = np.empty(capacity, dtype=object)
        counters = np.zeros(capacity, dtype=self._counters.dtype)
        values[:self._size] = self._values[:self._size]
        counters[:self._size] = self._counters[:self._size]
        self._values, self._counters = values, counters
        logger.debug("storage grown to %d slots", capacity)