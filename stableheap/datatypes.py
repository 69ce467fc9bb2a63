"""
Value types shared by the queue and its demonstration.

* `ABSENT` is what `peek` / `poll` hand back when the queue is empty.  It is
  a private singleton, so it can never collide with a caller payload (``None``
  included).
* Tie-break counters live in a NumPy unsigned-integer array; `counter_dtype`
  and `counter_limit` validate and describe that type.
* `Person` / `Player` are Numba jitclass records used by the demo.
"""

import numpy as np
from numba import int64
from numba.experimental import jitclass
from numba.types import unicode_type

from stableheap.exceptions import ConfigurationError


class _Absent:
    """Marker for "no element" (empty queue)."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


# ──────────────────────────── counters ────────────────────────────
def counter_dtype(dtype) -> np.dtype:
    """
    Normalise `dtype` and check it can hold tie-break counters.

    Raises
    ------
    ConfigurationError
        If `dtype` is not an unsigned integer type.
    """
    try:
        dt = np.dtype(dtype)
    except TypeError as exc:
        raise ConfigurationError(f"not a dtype: {dtype!r}") from exc
    if dt.kind != "u":
        raise ConfigurationError(
            f"counter dtype must be an unsigned integer type, got {dt.name}"
        )
    return dt


def counter_limit(dtype) -> int:
    """Largest counter value representable by `dtype`."""
    return int(np.iinfo(counter_dtype(dtype)).max)


# ───────────────────────── demo records ─────────────────────────
person_spec = [
    ('name', unicode_type),
    ('age',  int64),
]


@jitclass(person_spec)
class Person:
    """
    Named record, ordered by name in the demo.

    Attributes
    ----------
    name : unicode
    age : int64
    """
    def __init__(self, name: str, age: int):
        self.name = name
        self.age  = age


player_spec = [
    ('name',   unicode_type),
    ('energy', int64),
]


@jitclass(player_spec)
class Player:
    """
    Game entity, ordered by energy in the demo.  Entities with equal energy
    must come out in the order they were queued.
    """
    def __init__(self, name: str, energy: int):
        self.name   = name
        self.energy = energy


if __name__ == "__main__":
    # Simple sanity test when running this module directly
    p = Player("player", 10)
    print(f"Player created: name={p.name}, energy={p.energy}")
    print(f"uint64 counter limit: {counter_limit(np.uint64)}")
    print(f"empty marker: {ABSENT!r}, truthy={bool(ABSENT)}")
