"""
Workload specification.
"""

from .. import util
from . import dim_enum as de
from . import data_type_enum as dte


# Primes (and a few awkward composites) that factor poorly, mapped to a
# nearby value with more divisors.
nearest_composite = {11: 12, 13: 15, 27: 28, 55: 56, 57: 60}


def _pair(val, what, owner='Workload'):
    if isinstance(val, int):
        return val, val
    elif len(val) == 2:
        return val[0], val[1]
    raise ValueError('{}: {} is invalid ({}), '
                     'needs to be either one integer or '
                     'a pair of integers'.format(owner, what, val))


class Workload(util.ContentHashClass):
    """
    CNN-layer workload, i.e., the bounds of the 7 problem dimensions.
    bounds : per-dimension bounds, indexed by dimension ordinal
    hstd, wstd : stride height/width
    hdil, wdil : dilation height/width
    densities : per-data-type densities, indexed by data type ordinal
    """

    def __init__(self, bounds, strd=1, dltn=1, densities=1.0):
        if isinstance(bounds, dict):
            missing = [de.table[d] for d in range(de.NUM) if d not in bounds]
            if missing:
                raise ValueError('Workload: bounds miss dimensions {}'
                                 .format(', '.join(missing)))
            bounds = [bounds[d] for d in range(de.NUM)]
        if len(bounds) != de.NUM:
            raise ValueError('Workload: bounds is invalid ({}), '
                             'needs {} values'.format(bounds, de.NUM))
        for d, b in enumerate(bounds):
            if not isinstance(b, int) or b <= 0:
                raise ValueError('Workload: bound of {} is invalid ({}), '
                                 'needs to be a positive integer'
                                 .format(de.table[d], b))

        self.bounds = tuple(bounds)
        self.hstd, self.wstd = _pair(strd, 'strd')
        self.hdil, self.wdil = _pair(dltn, 'dltn')

        if isinstance(densities, (int, float)):
            densities = (densities,) * dte.NUM
        if len(densities) != dte.NUM:
            raise ValueError('Workload: densities is invalid ({}), '
                             'needs {} values'.format(densities, dte.NUM))
        self.densities = tuple(float(d) for d in densities)

    @classmethod
    def conv(cls, nifm, nofm, sofm, sfil, strd=1, nimg=1):
        """
        Workload of a convolutional layer.
        nifm : # ifmap channels
        nofm : # ofmap channels
        sofm : ofmap size, one integer or (height, width)
        sfil : weight filter size, one integer or (height, width)
        """
        hofm, wofm = _pair(sofm, 'sofm', 'ConvWorkload')
        hfil, wfil = _pair(sfil, 'sfil', 'ConvWorkload')
        return cls([wfil, hfil, wofm, hofm, nifm, nofm, nimg], strd=strd)

    def get_bound(self, dim):
        return self.bounds[de.check(dim)]

    @property
    def dimension(self):
        return list(self.bounds)

    def density(self, data_type):
        return self.densities[data_type]

    @property
    def total_ops(self):
        """
        Get total number of MACs.
        """
        return util.prod(self.bounds)

    def pad_primes(self):
        """
        Get a copy with every bound found in `nearest_composite` replaced by
        its composite neighbour.
        """
        return self.replace(bounds=[nearest_composite.get(b, b)
                                    for b in self.bounds])

    def replace(self, bounds=None, strd=None, dltn=None, densities=None):
        """
        Get a copy with the given fields replaced.
        """
        return Workload(self.bounds if bounds is None else bounds,
                        strd=(self.hstd, self.wstd) if strd is None else strd,
                        dltn=(self.hdil, self.wdil) if dltn is None else dltn,
                        densities=self.densities if densities is None
                        else densities)

    def __repr__(self):
        return '{}({})'.format(
            self.__class__.__name__,
            ', '.join(['{}={}'.format(de.table[d], b)
                       for d, b in enumerate(self.bounds)]
                      + ['strd={}'.format(repr((self.hstd, self.wstd))),
                         'dltn={}'.format(repr((self.hdil, self.wdil)))]))
