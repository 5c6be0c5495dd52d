"""
Mixed-radix counter over a cartesian product of axes.
"""

from .. import util


class CartesianCounter(object):
    """
    Addresses the cartesian product of several axes with one integer.

    Axis 0 is the least significant digit: for radices (r_0, r_1, ...),
    d_0 = id mod r_0, then id = id div r_0, d_1 = id mod r_1, and so on.
    Python integers keep every product and quotient exact, however large
    the space is.

    The counter only holds its radices; decoding returns a fresh digit tuple
    and never stores it, so one counter can be shared by any number of
    concurrent callers.
    """

    def __init__(self, radices):
        radices = tuple(radices)
        for axis, r in enumerate(radices):
            if int(r) != r or r <= 0:
                raise ValueError('CartesianCounter: radix {} of axis {} is '
                                 'invalid, needs to be a positive integer'
                                 .format(r, axis))
        self.radices = tuple(int(r) for r in radices)
        self._total = util.prod(self.radices)

    def total(self):
        """
        Number of distinct ids, i.e., the product of all radices.
        """
        return self._total

    def decode(self, id_):
        """
        Digits of `id_`, one per axis.
        """
        if not 0 <= id_ < self._total:
            raise IndexError('CartesianCounter: id {} is out of range [0, {})'
                             .format(id_, self._total))
        digits = []
        for r in self.radices:
            id_, d = divmod(id_, r)
            digits.append(d)
        return tuple(digits)

    def encode(self, digits):
        """
        Id of the given per-axis digits. Inverse of `decode`.
        """
        if len(digits) != len(self.radices):
            raise ValueError('CartesianCounter: {} digits given for {} axes'
                             .format(len(digits), len(self.radices)))
        id_ = 0
        for d, r in reversed(list(zip(digits, self.radices))):
            if not 0 <= d < r:
                raise IndexError('CartesianCounter: digit {} is out of range '
                                 '[0, {})'.format(d, r))
            id_ = id_ * r + d
        return id_

    def __len__(self):
        return len(self.radices)
