"""
Spatial split space: how many of the ordered dimensions at each spatial
level are distributed across parallel units.
"""

from .. import util
from . import dim_enum as de


class SpatialSplitSpace(object):
    """
    Of all the tiling levels only a subset is spatial. A spatial level is
    either user-specified (one fixed split) or free (any split from its
    number of unit factors up to the number of dimensions). Levels that are
    never configured are temporal and take no part in the space.
    """

    def __init__(self):
        self.num_levels = None
        self.is_user_specified = {}
        self.user_splits = {}
        self.unit_factors = {}
        self.sizes = {}

    def init(self, num_levels):
        if not isinstance(num_levels, int) or num_levels <= 0:
            raise ValueError('SpatialSplitSpace: num_levels {} is invalid'
                             .format(num_levels))
        self.num_levels = num_levels
        self.is_user_specified = {}
        self.user_splits = {}
        self.unit_factors = {}
        self.sizes = {}

    def _check_level(self, level):
        if self.num_levels is None:
            raise ValueError('SpatialSplitSpace: space is not initialized')
        if not 0 <= level < self.num_levels:
            raise IndexError('SpatialSplitSpace: level {} is out of range '
                             '[0, {})'.format(level, self.num_levels))

    def init_level(self, level, unit_factors=0):
        self._check_level(level)
        if not isinstance(unit_factors, int):
            raise ValueError('SpatialSplitSpace: unit_factors {} of level {} '
                             'is invalid, needs to be an integer'
                             .format(unit_factors, level))
        if not 0 <= unit_factors <= de.NUM:
            raise ValueError('SpatialSplitSpace: unit_factors {} of level {} '
                             'is out of range [0, {}]'
                             .format(unit_factors, level, de.NUM))
        self.is_user_specified[level] = False
        self.user_splits.pop(level, None)
        self.unit_factors[level] = unit_factors
        self.sizes[level] = de.NUM + 1 - unit_factors

    def init_level_user_specified(self, level, split):
        self._check_level(level)
        if not isinstance(split, int):
            raise ValueError('SpatialSplitSpace: split {} of level {} is '
                             'invalid, needs to be an integer'
                             .format(split, level))
        if not 0 <= split <= de.NUM:
            raise ValueError('SpatialSplitSpace: split {} of level {} is out '
                             'of range [0, {}]'.format(split, level, de.NUM))
        self.is_user_specified[level] = True
        self.user_splits[level] = split
        self.unit_factors.pop(level, None)
        self.sizes[level] = 1

    def spatial_levels(self):
        return sorted(self.is_user_specified)

    def size(self):
        if self.num_levels is None:
            raise ValueError('SpatialSplitSpace: space is not initialized')
        return util.prod(self.sizes.values())

    def get_splits(self, id_):
        """
        Decode `id_` into {level: split} over the spatial levels, lowest
        level first.
        """
        size = self.size()
        if not 0 <= id_ < size:
            raise IndexError('SpatialSplitSpace: id {} is out of range [0, {})'
                             .format(id_, size))

        splits = {}
        for level in self.spatial_levels():
            if self.is_user_specified[level]:
                splits[level] = self.user_splits[level]
            else:
                id_, digit = divmod(id_, self.sizes[level])
                splits[level] = self.unit_factors[level] + digit
        return splits
