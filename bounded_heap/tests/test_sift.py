import unittest
import random
from itertools import permutations
from bounded_heap import sift_up, sift_down, heapify, verify_heap, by_item

TEST_SEQ = [10, 12, 9, 8, 7, 6, 5, 11, 3]

class TestSift(unittest.TestCase):

    def test_heapify(self):
        v = list(TEST_SEQ)
        heapify(v)
        self.assertEqual(v[0], 3)
        self.assertTrue(verify_heap(v))
        self.assertEqual(sorted(v), sorted(TEST_SEQ))

    def test_heapify_small(self):
        for v in ([], [1], [2, 1], [3, 2, 1], [4, 3, 2, 1]):
            heapify(v)
            self.assertTrue(verify_heap(v))
        v = [2, 1]
        heapify(v)
        self.assertEqual(v, [1, 2])

    def test_heapify_permutations(self):
        for n in range(1, 7):
            for perm in permutations(range(1, n+1)):
                v = list(perm)
                heapify(v)
                self.assertTrue(verify_heap(v))
                self.assertEqual(v[0], 1)

    def test_heapify_prefix(self):
        v = [5, 4, 3, 0, -1]
        heapify(v, length=3)
        self.assertEqual(v[0], 3)
        self.assertEqual(v[3:], [0, -1])
        self.assertTrue(verify_heap(v, length=3))
        self.assertFalse(verify_heap(v))

    def test_verify_heap(self):
        self.assertTrue(verify_heap([]))
        self.assertTrue(verify_heap([1]))
        self.assertTrue(verify_heap([1, 2, 3]))
        self.assertFalse(verify_heap([3, 2, 1]))
        self.assertFalse(verify_heap([2, 1]))
        # last child of an even length heap
        self.assertFalse(verify_heap([1, 3, 2, 0]))
        self.assertTrue(verify_heap([1, 1, 1, 1]))

    def test_sift_up(self):
        v = [1, 3, 2, 0]
        sift_up(v)
        self.assertEqual(v, [0, 1, 2, 3])

    def test_sift_up_prefix(self):
        v = [1, 3, 0, 99]
        sift_up(v, length=3)
        self.assertEqual(v, [0, 3, 1, 99])

    def test_sift_up_stops_on_equal(self):
        v = [1, 2, 1]
        sift_up(v)
        self.assertEqual(v, [1, 2, 1])

    def test_sift_down(self):
        v = [9, 1, 2, 3, 4]
        sift_down(v, 0)
        self.assertEqual(v, [1, 3, 2, 9, 4])
        self.assertTrue(verify_heap(v))

    def test_sift_down_prefers_left_on_tie(self):
        v = [(5, 'root'), (1, 'left'), (1, 'right')]
        sift_down(v, 0, less=by_item(0))
        self.assertEqual(v[0], (1, 'left'))
        self.assertEqual(v[1], (5, 'root'))

    def test_sift_down_prefix(self):
        v = [9, 1, 2, -5]
        sift_down(v, 0, length=3)
        self.assertEqual(v, [1, 9, 2, -5])

    def test_random(self):
        rng = random.Random(0)
        for _ in range(200):
            v = [rng.randint(-20, 20) for _ in range(rng.randint(0, 40))]
            heapify(v)
            self.assertTrue(verify_heap(v))
            if v:
                self.assertEqual(v[0], min(v))

if __name__ == '__main__':
    unittest.main()
