import unittest

from mapspace.mapping import Workload
from mapspace.mapping import dim_enum as de


class TestWorkload(unittest.TestCase):
    """
    Tests for Workload.
    """

    def test_conv(self):
        workload = Workload.conv(48, 96, 57, 3)
        self.assertListEqual(workload.dimension, [3, 3, 57, 57, 48, 96, 1])
        self.assertEqual(workload.get_bound(de.K), 96)
        self.assertEqual(workload.total_ops, 3 * 3 * 57 * 57 * 48 * 96)

    def test_conv_rect(self):
        workload = Workload.conv(3, 8, (10, 20), (1, 5), nimg=2)
        self.assertEqual(workload.get_bound(de.R), 5)
        self.assertEqual(workload.get_bound(de.S), 1)
        self.assertEqual(workload.get_bound(de.P), 20)
        self.assertEqual(workload.get_bound(de.Q), 10)
        self.assertEqual(workload.get_bound(de.N), 2)

    def test_dict_bounds(self):
        workload = Workload({d: d + 1 for d in range(de.NUM)})
        self.assertListEqual(workload.dimension, [1, 2, 3, 4, 5, 6, 7])
        with self.assertRaisesRegex(ValueError, 'miss dimensions N'):
            _ = Workload({d: 1 for d in range(de.NUM - 1)})

    def test_invalid(self):
        with self.assertRaisesRegex(ValueError, 'bound of C'):
            _ = Workload([3, 3, 5, 5, 0, 4, 1])
        with self.assertRaisesRegex(ValueError, 'needs 7 values'):
            _ = Workload([3, 3, 5])
        with self.assertRaisesRegex(ValueError, 'strd'):
            _ = Workload([1] * de.NUM, strd=(1, 2, 3))

    def test_get_bound_invalid(self):
        workload = Workload([1] * de.NUM)
        with self.assertRaises(IndexError):
            _ = workload.get_bound(de.NUM)
        with self.assertRaises(TypeError):
            _ = workload.get_bound('K')

    def test_pad_primes(self):
        workload = Workload.conv(48, 96, 57, 11).pad_primes()
        self.assertListEqual(workload.dimension,
                             [12, 12, 60, 60, 48, 96, 1])
        workload = Workload.conv(7, 13, 27, 1).pad_primes()
        self.assertListEqual(workload.dimension,
                             [1, 1, 28, 28, 7, 15, 1])

    def test_hash(self):
        self.assertEqual(Workload.conv(48, 96, 57, 3),
                         Workload.conv(48, 96, 57, 3))
        self.assertNotEqual(Workload.conv(48, 96, 57, 3),
                            Workload.conv(48, 96, 57, 3, strd=2))
        self.assertEqual(len({Workload.conv(48, 96, 57, 3),
                              Workload.conv(48, 96, 57, 3)}), 1)
