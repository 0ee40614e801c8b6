from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..iterators import basic
from ..iterators.slicing import islice

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class TerminalAccessor(Generic[T]):
    """eager operations. everything here pulls from the source now; keep infinite sequences bounded first."""
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._sequence)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._sequence)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._sequence)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._sequence}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self._sequence)
        return sum(1 for x in self._sequence if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition. stops at the first hit"""
        if predicate is None: return basic.any(self._sequence, lambda _: True)
        return basic.any(self._sequence, predicate)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition. stops at the first failure"""
        return basic.all(self._sequence, predicate)

    def contains(self, value: Any) -> bool:
        """membership test that only reads as far as the first match"""
        return basic.contains(self._sequence, value)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        source = self._sequence if predicate is None else basic.filter(self._sequence, predicate)
        for item in islice(source, 1):
            return item
        if predicate is None: raise ValueError("sequence contains no elements")
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except ValueError: return default

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one. reads at most two matches"""
        source = self._sequence if predicate is None else basic.filter(self._sequence, predicate)
        data = list(islice(source, 2))
        if len(data) == 0: raise ValueError("sequence contains no matching elements")
        if len(data) > 1: raise ValueError("sequence contains more than one matching element")
        return data[0]

    def aggregate(self, accumulator: Reducer[T, T], seed: Union[T, Any] = NO_INITIAL) -> T:
        """applies accumulator function over sequence"""
        if seed is NO_INITIAL:
            iterator = iter(self._sequence)
            try:
                first = next(iterator)
            except StopIteration:
                raise ValueError("cannot aggregate empty sequence without seed") from None
            return basic.reduce(iterator, accumulator, first)
        return basic.reduce(self._sequence, accumulator, seed)

    def aggregate_with_selector(self, seed: U, accumulator: Reducer[U, T],
                                result_selector: Selector[U, V]) -> V:
        """aggregate with seed and final transformation"""
        return result_selector(basic.reduce(self._sequence, accumulator, seed))
