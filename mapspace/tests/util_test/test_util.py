import unittest

from mapspace import util


class TestUtil(unittest.TestCase):
    """
    Tests for util.
    """

    def test_get_divisors(self):
        self.assertListEqual(util.get_divisors(1), [1])
        self.assertListEqual(util.get_divisors(12), [1, 2, 3, 4, 6, 12])
        self.assertListEqual(util.get_divisors(49), [1, 7, 49])

    def test_get_divisors_invalid(self):
        with self.assertRaisesRegex(ValueError, 'positive'):
            _ = util.get_divisors(0)
        with self.assertRaisesRegex(TypeError, 'integers'):
            _ = util.get_divisors(4.0)

    def test_factorize(self):
        """
        Ordered factorizations, lexicographic.
        """
        self.assertListEqual(list(util.factorize(4, 2)),
                             [(1, 4), (2, 2), (4, 1)])
        self.assertListEqual(list(util.factorize(7, 1)), [(7,)])
        self.assertListEqual(list(util.factorize(1, 3)), [(1, 1, 1)])

        for fs in util.factorize(360, 4):
            self.assertEqual(util.prod(fs), 360)
        self.assertEqual(len(set(util.factorize(360, 4))),
                         len(list(util.factorize(360, 4))))

    def test_num_factorizations(self):
        self.assertEqual(util.num_factorizations(3, 3), 3)
        self.assertEqual(util.num_factorizations(40, 3), 30)
        self.assertEqual(util.num_factorizations(64, 3), 28)
        self.assertEqual(util.num_factorizations(1, 5), 1)
        for value in [1, 12, 97, 224, 360, 832]:
            for num in [1, 2, 3, 4]:
                self.assertEqual(util.num_factorizations(value, num),
                                 len(list(util.factorize(value, num))))

    def test_factorial(self):
        self.assertEqual(util.factorial(0), 1)
        self.assertEqual(util.factorial(7), 5040)
        self.assertEqual(util.factorial(30),
                         265252859812191058636308480000000)
        self.assertIsInstance(util.factorial(30), int)
        with self.assertRaises(ValueError):
            _ = util.factorial(-1)

    def test_permute(self):
        pool = ['a', 'b', 'c']
        self.assertListEqual(util.permute(pool, 0), ['a', 'b', 'c'])
        self.assertListEqual(util.permute(pool, 5), ['c', 'b', 'a'])
        self.assertListEqual(util.permute(pool, 3), ['b', 'c', 'a'])
        perms = [tuple(util.permute(pool, r)) for r in range(6)]
        self.assertEqual(len(set(perms)), 6)
        # Pool is not modified.
        self.assertListEqual(pool, ['a', 'b', 'c'])

    def test_permute_empty(self):
        self.assertListEqual(util.permute([], 0), [])

    def test_permute_invalid_rank(self):
        with self.assertRaisesRegex(IndexError, 'permute: .*range'):
            _ = util.permute('abc', 6)
        with self.assertRaises(IndexError):
            _ = util.permute('abc', -1)

    def test_rank_permutation(self):
        pool = list(range(7))
        for rank in [0, 1, 719, 2500, 5039]:
            perm = util.permute(pool, rank)
            self.assertEqual(util.rank_permutation(perm, pool), rank)

        with self.assertRaisesRegex(ValueError, 'length'):
            _ = util.rank_permutation([0, 1], [0, 1, 2])

    def test_get_ith_range(self):
        rng = (0, 2 ** 70 + 3)
        ranges = [util.get_ith_range(rng, i, 4) for i in range(4)]
        self.assertEqual(ranges[0][0], 0)
        self.assertEqual(ranges[-1][1], rng[1])
        for (_, end), (beg, _) in zip(ranges[:-1], ranges[1:]):
            self.assertEqual(end, beg)
