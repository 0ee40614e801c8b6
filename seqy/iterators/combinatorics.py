from __future__ import annotations
import logging
import math
from ..types import *

logger = logging.getLogger(__name__)


def _check_r(r: int) -> None:
    if r < 0:
        raise ValueError("r must be non-negative")


def combinations(iterable: Iterable[T], r: int) -> Iterator[Tuple[T, ...]]:
    """
    the r-length subsequences of the source, in lexicographic order of position.

    elements are unique by position, not value, so a sorted source gives sorted
    output. the source is fully read on the first pull and must be finite.
    r > len(source) yields nothing; r == 0 yields one empty tuple.
    """
    _check_r(r)
    return _combinations(iterable, r)


def _combinations(iterable: Iterable[T], r: int) -> Iterator[Tuple[T, ...]]:
    saved = tuple(iterable)
    n = len(saved)
    logger.debug("combinations: snapshot of %d elements, r=%d", n, r)
    if r > n:
        return

    indices = list(range(r))
    while True:
        yield tuple(saved[i] for i in indices)

        # rightmost position not yet at its ceiling i + n - r
        for i in reversed(range(r)):
            if indices[i] != i + n - r:
                break
        else:
            return

        indices[i] += 1
        for j in range(i + 1, r):
            indices[j] = indices[j - 1] + 1


def combinations_with_replacement(iterable: Iterable[T], r: int) -> Iterator[Tuple[T, ...]]:
    """
    like combinations, but a position may repeat within a tuple.

    >>> [''.join(c) for c in combinations_with_replacement('ABC', 2)]
    ['AA', 'AB', 'AC', 'BB', 'BC', 'CC']

    an empty source yields one empty tuple for r == 0 and nothing otherwise.
    """
    _check_r(r)
    return _combinations_with_replacement(iterable, r)


def _combinations_with_replacement(iterable: Iterable[T], r: int) -> Iterator[Tuple[T, ...]]:
    saved = tuple(iterable)
    n = len(saved)
    logger.debug("combinations_with_replacement: snapshot of %d elements, r=%d", n, r)
    if n == 0 and r != 0:
        return

    indices = [0] * r
    while True:
        yield tuple(saved[i] for i in indices)

        for i in reversed(range(r)):
            if indices[i] != n - 1:
                break
        else:
            return

        indices[i] += 1
        for j in range(i + 1, r):
            indices[j] = indices[j - 1]


def binomial_coefficient(n: int, r: int) -> int:
    """n choose r. zero for r outside [0, n]"""
    if r < 0 or n < 0:
        return 0
    return math.comb(n, r)


def count_combinations(n: int, r: int, replacement: bool = False) -> int:
    """how many tuples combinations (or combinations_with_replacement) yields for n elements"""
    if not replacement:
        return binomial_coefficient(n, r)
    if n == 0:
        return 1 if r == 0 else 0
    return binomial_coefficient(n + r - 1, r)
