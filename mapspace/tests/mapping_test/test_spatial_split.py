import unittest

from mapspace.mapping import SpatialSplitSpace
from mapspace.mapping import dim_enum as de


class TestSpatialSplitSpace(unittest.TestCase):
    """
    Tests for SpatialSplitSpace.
    """

    def test_one_free_level(self):
        space = SpatialSplitSpace()
        space.init(3)
        space.init_level(1)
        self.assertEqual(space.size(), de.NUM + 1)
        splits = [space.get_splits(id_) for id_ in range(space.size())]
        self.assertListEqual(splits, [{1: s} for s in range(de.NUM + 1)])

    def test_unit_factors(self):
        space = SpatialSplitSpace()
        space.init(1)
        space.init_level(0, unit_factors=3)
        self.assertEqual(space.size(), 5)
        self.assertListEqual([space.get_splits(i)[0] for i in range(5)],
                             [3, 4, 5, 6, 7])

    def test_mixed_levels(self):
        space = SpatialSplitSpace()
        space.init(4)
        space.init_level(0)
        space.init_level(1, unit_factors=2)
        space.init_level_user_specified(3, 4)
        self.assertListEqual(space.spatial_levels(), [0, 1, 3])
        self.assertEqual(space.size(), 8 * 6)
        self.assertDictEqual(space.get_splits(13), {0: 5, 1: 3, 3: 4})
        self.assertDictEqual(space.get_splits(47), {0: 7, 1: 7, 3: 4})

    def test_no_spatial_level(self):
        space = SpatialSplitSpace()
        space.init(3)
        self.assertEqual(space.size(), 1)
        self.assertDictEqual(space.get_splits(0), {})

    def test_reconfigure_level(self):
        space = SpatialSplitSpace()
        space.init(2)
        space.init_level(0)
        space.init_level_user_specified(0, 2)
        self.assertEqual(space.size(), 1)
        self.assertDictEqual(space.get_splits(0), {0: 2})

    def test_reinit(self):
        space = SpatialSplitSpace()
        space.init(2)
        space.init_level(0)
        space.init(2)
        self.assertEqual(space.size(), 1)
        self.assertDictEqual(space.get_splits(0), {})

    def test_out_of_range(self):
        space = SpatialSplitSpace()
        space.init(2)
        space.init_level(1)
        with self.assertRaisesRegex(IndexError, 'SpatialSplitSpace: id 8'):
            _ = space.get_splits(8)
        with self.assertRaises(IndexError):
            space.init_level(2)
        with self.assertRaises(ValueError):
            space.init_level(0, unit_factors=de.NUM + 1)
        with self.assertRaises(ValueError):
            space.init_level_user_specified(0, -1)

    def test_not_initialized(self):
        with self.assertRaisesRegex(ValueError, 'not initialized'):
            SpatialSplitSpace().init_level(0)

    def test_non_integer(self):
        space = SpatialSplitSpace()
        space.init(1)
        with self.assertRaisesRegex(ValueError,
                                    'SpatialSplitSpace: unit_factors 2.5'):
            space.init_level(0, unit_factors=2.5)
        with self.assertRaisesRegex(ValueError,
                                    'SpatialSplitSpace: split 2.5'):
            space.init_level_user_specified(0, 2.5)
        with self.assertRaisesRegex(ValueError,
                                    'SpatialSplitSpace: split 3'):
            space.init_level_user_specified(0, '3')
        self.assertListEqual(space.spatial_levels(), [])
        self.assertEqual(space.size(), 1)
