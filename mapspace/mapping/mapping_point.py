"""
Type for a specific mapping point.
"""

from .. import util
from . import dim_enum as de


class MappingPoint(object):
    """
    Configurations of a specific mapping.
    Mapping includes the complete description of the loop blocking factors of
    each dimension, the loop order of each tiling level, and the spatial split
    of each spatial level.
    Loop blockings are organized as the same order as dimension enum order,
    each a tuple of factors from inside level to outside level.
    Loop orders are organized by level, each a list of all dimensions, inner
    loop first.
    Spatial splits map each spatial level to the number of leading dimensions
    of its loop order that are distributed over parallel units; the
    remaining dimensions of that level are temporal.
    """

    def __init__(self, loop_blockings_list, loop_order_list,
                 spatial_split_dict=None):

        self.loop_blockings = loop_blockings_list
        self.loop_orders = loop_order_list
        self.spatial_splits = spatial_split_dict or {}

    @classmethod
    def decode(cls, spaces, factor_id, permutation_id, split_id=0):
        """
        Decode one id per space into a mapping point. The three ids are
        independent; how a search combines them is up to the search.
        """
        index_factorization, permutation, spatial_split = spaces
        return cls(index_factorization.get_factors(factor_id),
                   permutation.get_patterns(permutation_id),
                   spatial_split.get_splits(split_id))

    def loop_blocking(self, loop):
        """
        Loop blocking factors of the given loop.
        Return a tuple of factors for the given loop at all tiling levels,
        from inside level to outside level.
        E.g., (4, 2, 1) for loop R means the blocking factor is 4 for the
        innermost level, and 2 for the next level.
        """
        return self.loop_blockings[de.check(loop)]

    def loop_order(self, level):
        """
        Loop order at the given level, inner loop first.
        E.g., [R, S, C, P, Q, K, N] means R is the innermost loop and N the
        outermost loop at that level.
        """
        return self.loop_orders[level]

    def spatial_split(self, level):
        """
        Spatial split of the given level, 0 for temporal levels.
        """
        return self.spatial_splits.get(level, 0)

    def spatial_dims(self, level):
        return self.loop_orders[level][:self.spatial_split(level)]

    def temporal_dims(self, level):
        return self.loop_orders[level][self.spatial_split(level):]

    def tile_size(self, loop, level):
        """
        Tile size of the given loop held at the given level, i.e., the
        product of its blocking factors from the innermost level up to and
        including `level`.
        """
        return util.prod(self.loop_blocking(loop)[:level + 1])

    def __repr__(self):
        return '{}({})'.format(
            self.__class__.__name__,
            ', '.join([
                'loop_blockings={}'.format(repr(self.loop_blockings)),
                'loop_orders={}'.format(repr(self.loop_orders)),
                'spatial_splits={}'.format(repr(self.spatial_splits))]))
