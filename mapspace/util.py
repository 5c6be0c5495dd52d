"""
Utilities.
"""
from collections import Counter
from functools import reduce
from operator import mul

from scipy.special import comb
from scipy.special import factorial as _sp_factorial


class ContentHashClass(object):
    """
    Class using the content instead of the object ID for hash.
    Such class instance can be used as key in dictionary.
    """

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.__dict__ == other.__dict__
        return NotImplemented

    def __ne__(self, other):
        r = self.__eq__(other)
        if r is NotImplemented:
            return r
        return not r

    def __hash__(self):
        return hash(frozenset(self.__dict__.items()))


def prod(lst):
    ''' Get the product of a list. '''
    return reduce(mul, lst, 1)


def get_divisors(value):
    '''
    Get all divisors of `value` in ascending order.
    '''
    if not isinstance(value, int):
        raise TypeError('value must be integers.')
    if value <= 0:
        raise ValueError('value must be positive.')

    divisors = [1]
    for p, e in Counter(get_prime_factors(value)).items():
        divisors = [d * p ** k for d in divisors for k in range(e + 1)]
    return sorted(divisors)


def get_prime_factors(value):
    '''
    Get the prime factorization of `value`, with repetition, ascending.
    '''
    factors = []
    d = 2
    while d * d <= value:
        while value % d == 0:
            factors.append(d)
            value //= d
        d += 1
    if value > 1:
        factors.append(value)
    return factors


def factorize(value, num):
    '''
    Factorize given `value` into `num` numbers. Return a tuple of length
    `num`.

    Iterate over all factor combinations of which the product is `value`,
    in lexicographic order of the tuples. Each position only walks over the
    divisors of what the previous positions leave.
    '''
    if num == 1:
        yield (value,)
        return

    for f in get_divisors(value):
        for rest in factorize(value // f, num - 1):
            yield (f,) + rest


def num_factorizations(value, num):
    '''
    Number of ordered `num`-tuples of positive integers with product
    `value`, i.e., the number of tuples `factorize(value, num)` yields.

    Each prime p^e is distributed over `num` slots independently, giving
    C(e + num - 1, num - 1) ways.
    '''
    if value <= 0 or num <= 0:
        raise ValueError('arguments must be positive.')
    exponents = Counter(get_prime_factors(value)).values()
    return prod(int(comb(e + num - 1, num - 1, exact=True)) for e in exponents)


def factorial(n):
    '''
    Exact factorial of `n` as an arbitrary precision integer.
    '''
    if not isinstance(n, int):
        raise TypeError('n must be integers.')
    if n < 0:
        raise ValueError('n must not be negative.')
    return int(_sp_factorial(n, exact=True))


def permute(sequence, rank):
    '''
    Get the `rank`-th permutation of `sequence` in the factorial number
    system (Lehmer code).

    At each position i, the floor(rank / (n-1-i)!)-th element still remaining
    in the pool is taken out and appended. Rank 0 keeps the given order,
    rank n! - 1 reverses it.
    '''
    pool = list(sequence)
    n = len(pool)
    if not 0 <= rank < factorial(n):
        raise IndexError('permute: rank {} is out of range [0, {}!)'
                         .format(rank, n))

    result = []
    for i in range(n):
        idx, rank = divmod(rank, factorial(n - 1 - i))
        result.append(pool.pop(idx))
    return result


def rank_permutation(permutation, pool):
    '''
    Get the rank of `permutation` among the permutations of `pool`. Inverse
    of `permute`, i.e., `permute(pool, rank_permutation(p, pool)) == p`.
    '''
    pool = list(pool)
    n = len(pool)
    if len(permutation) != n:
        raise ValueError('rank_permutation: permutation length {} does not '
                         'match pool length {}'.format(len(permutation), n))

    rank = 0
    for i, item in enumerate(permutation):
        idx = pool.index(item)
        rank += idx * factorial(n - 1 - i)
        pool.pop(idx)
    return rank


def get_ith_range(rng, idx, num):
    '''
    Divide the full range `rng` into `num` parts, and get the `idx`-th range.
    '''
    length = rng[1] - rng[0]
    beg = rng[0] + idx * length // num
    end = rng[0] + (idx + 1) * length // num
    assert end <= rng[1]
    return beg, end
