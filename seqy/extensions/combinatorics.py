from __future__ import annotations
import typing
from ..types import *
from ..iterators.basic import chain_from_iterable
from ..iterators.combinatorics import (
    combinations,
    combinations_with_replacement,
    binomial_coefficient
)

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class CombinatoricsAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def binomial_coefficient(self, r: int) -> int:
        """n choose r for this sequence's length. reads the whole sequence"""
        return binomial_coefficient(self._sequence.to.count(), r)

    def combinations(self, r: int) -> 'Sequence[Tuple[T, ...]]':
        """r-length combinations by position, in lexicographic order. the source must be finite"""
        from ..sequence import Sequence
        if r < 0:
            raise ValueError("r must be non-negative")
        return Sequence(lambda: combinations(self._sequence, r))

    def combinations_with_replacement(self, r: int) -> 'Sequence[Tuple[T, ...]]':
        """
        r-length combinations where a position may be picked more than once.
        an empty source gives one empty tuple for r == 0 and nothing otherwise.
        """
        from ..sequence import Sequence
        if r < 0:
            raise ValueError("r must be non-negative")
        return Sequence(lambda: combinations_with_replacement(self._sequence, r))

    def power_set(self) -> 'Sequence[Tuple[T, ...]]':
        """
        every subset, smallest first: combinations of every length from 0 to n
        chained together over a single snapshot of the source.
        """
        from ..sequence import Sequence
        def power_set_data():
            data = tuple(self._sequence)
            return chain_from_iterable(combinations(data, r) for r in range(len(data) + 1))

        return Sequence(power_set_data)
