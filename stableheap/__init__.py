"""
Stable priority queue: a binary min-heap that breaks ties in insertion order.
"""

from stableheap.datatypes import ABSENT
from stableheap.exceptions import (
    ConfigurationError,
    CounterExhaustedError,
    StableHeapError,
)
from stableheap.heap import (
    DEFAULT_COUNTER_DTYPE,
    INITIAL_CAPACITY,
    StableHeap,
    natural_compare,
)

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "ConfigurationError",
    "CounterExhaustedError",
    "DEFAULT_COUNTER_DTYPE",
    "INITIAL_CAPACITY",
    "StableHeap",
    "StableHeapError",
    "natural_compare",
]
