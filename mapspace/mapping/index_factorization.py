"""
Index factorization space: the loop blocking factors of every dimension at
every tiling level.
"""

from . import dim_enum as de
from .cartesian_counter import CartesianCounter
from .factors import Factors


class IndexFactorizationSpace(object):
    """
    Cartesian product of the per-dimension factor sets. One id picks one
    factor choice for each of the 7 dimensions; dimension R is the least
    significant axis.
    """

    def __init__(self):
        self.dimension_factors = None
        self.tiling_counter = None

    def init(self, workload, cofactors_order, prefactors=None, is_print=False):
        """
        Build the space.

        workload : anything with `get_bound(dim)`.
        cofactors_order : number of tiling levels, either one integer shared
        by all dimensions, or a per-dimension list / {dim: levels} dict.
        prefactors : optional {dim: {level: value}} pinned cofactors.
        """
        if isinstance(cofactors_order, int):
            cofactors_order = [cofactors_order] * de.NUM
        elif isinstance(cofactors_order, dict):
            cofactors_order = [cofactors_order[d] for d in range(de.NUM)]
        if len(cofactors_order) != de.NUM:
            raise ValueError('IndexFactorizationSpace: cofactors_order {} '
                             'needs {} values'.format(cofactors_order, de.NUM))
        prefactors = prefactors or {}
        for dim in prefactors:
            de.check(dim)

        self.dimension_factors = [
            Factors(workload.get_bound(d), cofactors_order[d],
                    prefactors.get(d))
            for d in range(de.NUM)]
        self.tiling_counter = CartesianCounter(
            [f.size() for f in self.dimension_factors])

        if is_print:
            print('Initializing Index Factorization subspace.')
            for d in range(de.NUM):
                print('  Factorization options along problem dimension {} = {}'
                      .format(de.table[d], self.dimension_factors[d].size()))

    def _check_init(self):
        if self.tiling_counter is None:
            raise ValueError('IndexFactorizationSpace: space is not '
                             'initialized')

    def factors(self, dim):
        self._check_init()
        return self.dimension_factors[de.check(dim)]

    def num_levels(self, dim):
        return self.factors(dim).num_levels

    def size(self):
        self._check_init()
        return self.tiling_counter.total()

    def get_factors(self, id_):
        """
        Decode `id_` into the per-level cofactor tuple of every dimension,
        indexed by dimension ordinal.
        """
        self._check_init()
        cartesian_idx = self.tiling_counter.decode(id_)
        return [self.dimension_factors[d].at(cartesian_idx[d])
                for d in range(de.NUM)]

    def get_factor(self, id_, dim, level):
        """
        Cofactor of dimension `dim` at tiling level `level` under `id_`.
        """
        factors = self.factors(dim)
        if not 0 <= level < factors.num_levels:
            raise IndexError('IndexFactorizationSpace: level {} is out of '
                             'range [0, {}) for dimension {}'
                             .format(level, factors.num_levels, de.table[dim]))
        return self.get_factors(id_)[dim][level]
