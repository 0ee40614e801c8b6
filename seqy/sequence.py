from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .iterators.slicing import islice, to_selector

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.grouping import GroupingAccessor
from .extensions.combinatorics import CombinatoricsAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.zip import ZipAccessor

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def _iter_source(self) -> Iterator[T]:
        """get a fresh iterator over the underlying source"""
        pass

# --- base sequence implementation ---

class _BaseSequence(ISequence[T]):
    def __init__(self, source_func: SourceFunc[T]):
        """init with a function that returns an iterable when called. nothing is pulled yet"""
        self._source_func = source_func

    def _iter_source(self) -> Iterator[T]:
        return iter(self._source_func())

    def __iter__(self) -> Iterator[T]:
        return self._iter_source()

    def __getitem__(self, index):
        """
        seq[a:b:c] is a lazy slice (non-negative bounds only, same rules as islice).
        seq[i] pulls up to position i. a negative i has to read the whole source.
        """
        if isinstance(index, slice):
            # validate now, not on first iteration
            to_selector(index.start, index.stop, index.step)
            return Sequence(lambda: islice(self, index.start, index.stop, index.step))

        if index < 0:
            data = list(self)
            if abs(index) > len(data):
                raise IndexError("index out of range")
            return data[index]

        for item in islice(self, index, index + 1):
            return item
        raise IndexError("index out of range")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source_func!r})"

# --- main sequence class ---

class Sequence(
    _BaseSequence[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired wrapper over any python iterable."""
    def __init__(self, source_func: SourceFunc[T]):
        super().__init__(source_func)
        # --- initialize accessors ---
        self.zip = ZipAccessor(self)
        self.group = GroupingAccessor(self)
        self.comb = CombinatoricsAccessor(self)
        self.to = TerminalAccessor(self)
