"""
Permutation space: the loop order at every tiling level.
"""

from collections import namedtuple

from .. import util
from . import dim_enum as de


Pattern = namedtuple('Pattern', ['baked_prefix', 'permutable_suffix'])


class PermutationSpace(object):
    """
    Per-level loop orders. Each level is a fixed (baked) prefix followed by
    the remaining dimensions in any order; level 0 is the least significant
    digit of an id.
    """

    def __init__(self):
        self.num_levels = None
        self.patterns = {}
        self.sizes = {}

    def init(self, num_levels):
        if not isinstance(num_levels, int) or num_levels <= 0:
            raise ValueError('PermutationSpace: num_levels {} is invalid'
                             .format(num_levels))
        self.num_levels = num_levels
        self.patterns = {}
        self.sizes = {}

    def _check_init(self):
        if self.num_levels is None:
            raise ValueError('PermutationSpace: space is not initialized')

    def _check_level(self, level):
        self._check_init()
        if not 0 <= level < self.num_levels:
            raise IndexError('PermutationSpace: level {} is out of range '
                             '[0, {})'.format(level, self.num_levels))

    def init_level_canonical(self, level):
        self.init_level(level, [])

    def init_level(self, level, user_prefix, pruned_dimensions=()):
        """
        Configure one level as
        <pruned dimensions><user prefix><free dimensions>, where the first
        two parts form the baked prefix and the free dimensions, kept in
        ordinal order, are permuted.
        """
        self._check_level(level)
        for dims, what in ((user_prefix, 'user prefix'),
                           (pruned_dimensions, 'pruned dimensions')):
            for dim in dims:
                de.check(dim)
            if len(set(dims)) != len(dims):
                raise ValueError('PermutationSpace: {} {} of level {} has '
                                 'duplicates'.format(what, list(dims), level))

        baked_prefix = list(pruned_dimensions)
        baked_prefix += [d for d in user_prefix if d not in pruned_dimensions]
        permutable_suffix = [d for d in de.canonical()
                             if d not in baked_prefix]
        assert len(baked_prefix) + len(permutable_suffix) == de.NUM

        self.patterns[level] = Pattern(tuple(baked_prefix),
                                       tuple(permutable_suffix))
        self.sizes[level] = util.factorial(len(permutable_suffix))

    def pattern(self, level):
        self._check_level(level)
        if level not in self.patterns:
            raise ValueError('PermutationSpace: level {} is not initialized'
                             .format(level))
        return self.patterns[level]

    def size(self):
        self._check_init()
        size = 1
        for level in range(self.num_levels):
            self.pattern(level)
            size *= self.sizes[level]
        return size

    def get_patterns(self, id_):
        """
        Decode `id_` into one complete dimension order per level.
        """
        size = self.size()
        if not 0 <= id_ < size:
            raise IndexError('PermutationSpace: id {} is out of range [0, {})'
                             .format(id_, size))

        patterns = []
        for level in range(self.num_levels):
            pattern = self.patterns[level]
            if len(pattern.baked_prefix) == de.NUM:
                patterns.append(list(pattern.baked_prefix))
                continue
            id_, rank = divmod(id_, self.sizes[level])
            patterns.append(list(pattern.baked_prefix)
                            + util.permute(pattern.permutable_suffix, rank))
        return patterns
