"""
Factor set of one problem dimension.
"""

import numpy as np

from .. import util


class Factors(object):
    """
    All ordered ways to write a dimension bound as the product of one cofactor
    per tiling level.

    Choices are ordered lexicographically on the cofactor tuple, level 0
    first, i.e., for bound 4 over 2 levels: (1, 4), (2, 2), (4, 1).

    prefactors : optional {level: value} pins; a pinned level holds exactly
    the given cofactor in every choice.
    """

    def __init__(self, bound, num_levels, prefactors=None):
        if not isinstance(bound, int) or bound <= 0:
            raise ValueError('Factors: bound {} is invalid, needs to be a '
                             'positive integer'.format(bound))
        if not isinstance(num_levels, int) or num_levels <= 0:
            raise ValueError('Factors: num_levels {} is invalid, needs to be '
                             'a positive integer'.format(num_levels))

        prefactors = dict(prefactors or {})
        for level, value in prefactors.items():
            if not 0 <= level < num_levels:
                raise ValueError('Factors: pinned level {} is out of range '
                                 '[0, {})'.format(level, num_levels))
            if not isinstance(value, int) or value <= 0:
                raise ValueError('Factors: pinned cofactor {} at level {} is '
                                 'invalid'.format(value, level))

        pinned = util.prod(prefactors.values())
        if bound % pinned != 0:
            raise ValueError('Factors: pinned cofactors {} do not divide '
                             'bound {}'.format(prefactors, bound))
        free_levels = [l for l in range(num_levels) if l not in prefactors]
        if not free_levels and pinned != bound:
            raise ValueError('Factors: pinned cofactors {} of all levels do '
                             'not multiply to bound {}'
                             .format(prefactors, bound))

        self.bound = bound
        self.num_levels = num_levels
        self.prefactors = prefactors

        choices = []
        if free_levels:
            for free in util.factorize(bound // pinned, len(free_levels)):
                choice = [0] * num_levels
                for level, value in prefactors.items():
                    choice[level] = value
                for level, value in zip(free_levels, free):
                    choice[level] = value
                choices.append(choice)
            assert len(choices) == util.num_factorizations(bound // pinned,
                                                           len(free_levels))
        else:
            choices.append([prefactors[l] for l in range(num_levels)])

        # Bounds past int64 keep exact Python ints.
        dtype = np.int64 if bound <= np.iinfo(np.int64).max else object
        self.choices = np.array(choices, dtype=dtype).reshape(
            len(choices), num_levels)
        assert (np.prod(self.choices, axis=1) == bound).all()

    def size(self):
        return self.choices.shape[0]

    def at(self, index):
        """
        The `index`-th choice as a tuple of per-level cofactors.
        """
        if not 0 <= index < self.size():
            raise IndexError('Factors: index {} is out of range [0, {})'
                             .format(index, self.size()))
        return tuple(int(f) for f in self.choices[index])

    def __len__(self):
        return self.size()

    def __getitem__(self, index):
        return self.at(index)

    def __iter__(self):
        for index in range(self.size()):
            yield self.at(index)

    def __repr__(self):
        return '{}(bound={}, num_levels={}, prefactors={}, size={})'.format(
            self.__class__.__name__, self.bound, self.num_levels,
            self.prefactors, self.size())
