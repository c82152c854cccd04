import random
import time
import unittest

from src.core.subsequence import find_common_subsequences


def _runs(a, b, **kwargs):
    found = []
    find_common_subsequences(
        len(a), len(b),
        lambda i, j: a[i] == b[j],
        lambda n, i, j: found.append((n, i, j)),
        **kwargs,
    )
    return found


def _lcs_length(a, b):
    prev = [0] * (len(b) + 1)
    for x in a:
        cur = [0]
        for j, y in enumerate(b):
            cur.append(prev[j] + 1 if x == y else max(prev[j + 1], cur[j]))
        prev = cur
    return prev[-1]


class TestFindCommonSubsequences(unittest.TestCase):
    def test_identical(self):
        self.assertEqual(_runs(list("abc"), list("abc")), [(3, 0, 0)])

    def test_empty_sides(self):
        self.assertEqual(_runs([], list("abc")), [])
        self.assertEqual(_runs(list("abc"), []), [])
        self.assertEqual(_runs([], []), [])

    def test_nothing_in_common(self):
        self.assertEqual(_runs(list("ab"), list("xy")), [])

    def test_change_in_middle(self):
        self.assertEqual(_runs(list("abcd"), list("axcd")), [(1, 0, 0), (2, 2, 2)])

    def test_delete_at_start(self):
        self.assertEqual(_runs(["x", "y"], ["y"]), [(1, 1, 0)])

    def test_rotation(self):
        self.assertEqual(_runs(list("abc"), list("cab")), [(2, 0, 1)])

    def test_runs_are_ordered_common_and_longest(self):
        rng = random.Random(1234)
        for _ in range(200):
            a = [rng.choice("abcd") for _ in range(rng.randint(0, 12))]
            b = [rng.choice("abcd") for _ in range(rng.randint(0, 12))]
            runs = _runs(a, b)

            a_next = b_next = 0
            for n, i, j in runs:
                self.assertGreater(n, 0)
                self.assertGreaterEqual(i, a_next)
                self.assertGreaterEqual(j, b_next)
                # adjacent runs would have been reported as one
                self.assertFalse(i == a_next and j == b_next and (a_next or b_next))
                for offset in range(n):
                    self.assertEqual(a[i + offset], b[j + offset])
                a_next, b_next = i + n, j + n
            self.assertLessEqual(a_next, len(a))
            self.assertLessEqual(b_next, len(b))

            self.assertEqual(sum(n for n, _, _ in runs), _lcs_length(a, b), (a, b))

    def test_large_unrelated_inputs_finish_quickly(self):
        a = [f"a{i}" for i in range(2000)]
        b = [f"b{i}" for i in range(2000)]
        started = time.perf_counter()
        self.assertEqual(_runs(a, b), [])
        self.assertLess(time.perf_counter() - started, 5.0)

    def test_large_near_identical_inputs(self):
        a = [f"line {i}" for i in range(3000)]
        b = list(a)
        b[10] = "changed"
        del b[1500]
        b.insert(2500, "new")
        self.assertEqual(
            _runs(a, b),
            [(10, 0, 0), (1489, 11, 11), (1000, 1501, 1500), (499, 2501, 2501)],
        )

    def test_edit_cap_keeps_prefix_and_suffix(self):
        a, b = list("xaby"), list("xbay")
        self.assertEqual(len(_runs(a, b)), 3)
        self.assertEqual(_runs(a, b, max_edits=1), [(1, 0, 0), (1, 3, 3)])

    def test_capped_runs_are_still_ordered_and_common(self):
        rng = random.Random(99)
        for _ in range(100):
            a = [rng.choice("abc") for _ in range(rng.randint(0, 30))]
            b = [rng.choice("abc") for _ in range(rng.randint(0, 30))]
            a_next = b_next = 0
            for n, i, j in _runs(a, b, max_edits=2):
                self.assertGreaterEqual(i, a_next)
                self.assertGreaterEqual(j, b_next)
                self.assertEqual(a[i:i + n], b[j:j + n])
                a_next, b_next = i + n, j + n


if __name__ == "__main__":
    unittest.main()
