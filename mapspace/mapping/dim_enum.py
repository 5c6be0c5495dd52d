"""
Problem dimension enum type.
Dimensions include filter width (R), filter height (S),
output width (P), output height (Q),
input channel (C), output channel (K),
batch (N).
"""
R = 0
S = 1
P = 2
Q = 3
C = 4
K = 5
N = 6
NUM = 7

table = {0: 'R',
         1: 'S',
         2: 'P',
         3: 'Q',
         4: 'C',
         5: 'K',
         6: 'N'}

dim_table = {'R': 0,
             'S': 1,
             'P': 2,
             'Q': 3,
             'C': 4,
             'K': 5,
             'N': 6}


def canonical():
    """
    All dimensions in ordinal order.
    """
    return list(range(NUM))


def check(dim):
    """
    Validate a dimension ordinal and return it.
    """
    if not isinstance(dim, int):
        raise TypeError('dim_enum: dimension {!r} must be an integer ordinal'
                        .format(dim))
    if not 0 <= dim < NUM:
        raise IndexError('dim_enum: dimension {} is out of range [0, {})'
                         .format(dim, NUM))
    return dim
