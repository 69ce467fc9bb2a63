import functools
import random
import unittest

from stableheap import ABSENT, StableHeap


def by_key(a, b):
    return a[0] - b[0]


def assert_heap_order(test, q):
    for i in range(1, q.size):
        parent = (i - 1) // 2
        test.assertFalse(q._less(i, parent), f"heap order broken at {i}")


class TestLiteralExamples(unittest.TestCase):
    def test_default_comparator(self):
        q = StableHeap()
        for v in (1, 0, 5, 4, 3):
            q.add(v)
        self.assertEqual(q.peek(), 0)
        self.assertEqual(q.size, 5)
        self.assertEqual([q.poll() for _ in range(5)], [0, 1, 3, 4, 5])

    def test_reverse_comparator(self):
        q = StableHeap(lambda a, b: b - a)
        for v in (1, 0, 5, 4, 3):
            q.add(v)
        self.assertEqual(list(q.drain()), [5, 4, 3, 1, 0])


class TestStability(unittest.TestCase):
    def test_equal_energy_keeps_insertion_order(self):
        q = StableHeap(lambda a, b: a["energy"] - b["energy"])
        for name in ("A", "B", "C"):
            q.add({"name": name, "energy": 10})
        self.assertEqual([q.poll()["name"] for _ in range(3)], ["A", "B", "C"])

    def test_ties_mixed_with_distinct_values(self):
        q = StableHeap(by_key)
        items = [(2, "a"), (1, "b"), (2, "c"), (1, "d"), (0, "e"), (2, "f")]
        for it in items:
            q.add(it)
        self.assertEqual(
            [tag for _, tag in q.drain()], ["e", "b", "d", "a", "c", "f"]
        )


class TestSortedRoundTrip(unittest.TestCase):
    def test_matches_stable_sort(self):
        rng = random.Random(1)
        for n in (0, 1, 2, 17, 1024, 1100):
            items = [(rng.randint(0, 20), i) for i in range(n)]
            q = StableHeap(by_key)
            for it in items:
                q.add(it)
            assert_heap_order(self, q)
            expected = sorted(items, key=functools.cmp_to_key(by_key))
            self.assertEqual(list(q.drain()), expected)

    def test_random_values_come_out_sorted(self):
        rng = random.Random(2)
        values = [rng.randint(1, 1000000) for _ in range(2048)]
        q = StableHeap()
        for v in values:
            q.add(v)
        self.assertEqual(list(q.drain()), sorted(values))

    def test_interleaved_add_poll(self):
        rng = random.Random(3)
        q = StableHeap(by_key)
        model = []
        seq = 0
        for _ in range(3000):
            if model and rng.random() < 0.45:
                idx = min(range(len(model)), key=lambda k: model[k][0])
                self.assertEqual(q.poll(), model.pop(idx))
            else:
                item = (rng.randint(0, 50), seq)
                seq += 1
                q.add(item)
                model.append(item)
            self.assertEqual(q.size, len(model))
        assert_heap_order(self, q)


class TestSizeAndPeek(unittest.TestCase):
    def test_size_tracks_adds_and_polls(self):
        q = StableHeap()
        self.assertTrue(q.is_empty())
        self.assertFalse(q)
        for i, v in enumerate((5, 3, 8)):
            q.add(v)
            self.assertEqual(q.size, i + 1)
            self.assertEqual(len(q), i + 1)
        self.assertTrue(q)
        q.poll()
        self.assertEqual(q.size, 2)
        q.poll()
        q.poll()
        self.assertTrue(q.is_empty())
        self.assertEqual(q.size, 0)

    def test_empty_queue_returns_absent(self):
        q = StableHeap()
        self.assertIs(q.peek(), ABSENT)
        self.assertIs(q.poll(), ABSENT)
        self.assertEqual(q.size, 0)
        self.assertFalse(ABSENT)

    def test_none_payload_is_not_absent(self):
        q = StableHeap()
        q.add(None)
        self.assertIsNone(q.peek())
        self.assertIsNone(q.poll())
        self.assertIs(q.poll(), ABSENT)

    def test_peek_does_not_mutate(self):
        q = StableHeap(by_key)
        for it in [(3, "x"), (1, "y"), (1, "z"), (2, "w")]:
            q.add(it)
        first = q.peek()
        for _ in range(5):
            self.assertEqual(q.peek(), first)
            self.assertEqual(q.size, 4)
        self.assertEqual(list(q.drain()), [(1, "y"), (1, "z"), (2, "w"), (3, "x")])

    def test_comparator_errors_propagate(self):
        def boom(a, b):
            raise ValueError("incomparable")

        q = StableHeap(boom)
        q.add(1)
        with self.assertRaises(ValueError):
            q.add(2)

    def test_repr(self):
        q = StableHeap(initial_capacity=4)
        q.add(1)
        self.assertEqual(repr(q), "StableHeap(size=1, capacity=4)")


if __name__ == "__main__":
    unittest.main()
