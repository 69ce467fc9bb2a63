"""
Small demonstration of the stable queue.

Two runs:

* people ordered by name only; the three "Jack" records come out in the
  order they were queued, whatever their age.
* players ordered by energy only; all share the same energy, so the drain
  order is exactly the insertion order.

Usage
-----
$ python -m stableheap.demo
"""

from __future__ import annotations

from typing import List

from stableheap.datatypes import Person, Player
from stableheap.heap import StableHeap


def by_name(a: Person, b: Person) -> int:
    return (a.name > b.name) - (a.name < b.name)


def by_energy(a: Player, b: Player) -> int:
    return a.energy - b.energy


# ──────────────────────────────────────────────────────────────────────────
def run_demo() -> tuple[List[Person], List[Player]]:
    """
    Fill and drain both demo queues; return the drained records.
    """
    people = StableHeap(by_name)
    for name, age in [("Jack", 31), ("Anna", 111), ("Jack", 46),
                      ("Jack", 11), ("Abba", 31), ("Abba", 30)]:
        people.add(Person(name, age))

    players = StableHeap(by_energy)
    for name in ("player", "monster1", "monster2", "monster3"):
        players.add(Player(name, 10))

    return list(people.drain()), list(players.drain())


# ───────────────────────── sample run ─────────────────────────
if __name__ == "__main__":
    people_out, players_out = run_demo()
    print("People by name:")
    for p in people_out:
        print(f"    name={p.name:<5} age={p.age:3d}")
    print("Players by energy:")
    for pl in players_out:
        print(f"    name={pl.name:<8} energy={pl.energy:3d}")
