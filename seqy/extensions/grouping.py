from __future__ import annotations
import typing
from ..types import *
from ..iterators.grouping import group_by

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class GroupingAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def group_by(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Sequence[Tuple[K, Group[K, T]]]':
        """
        (key, group) pairs for each run of consecutive equal keys.
        a group is only readable until the next pair is pulled; after that it
        is stale and yields nothing. use group_by_materialized to keep groups.
        """
        from ..sequence import Sequence
        return Sequence(lambda: group_by(self._sequence, key_selector))

    def group_by_materialized(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Sequence[Tuple[K, List[T]]]':
        """like group_by, but each group is read into a list before it is handed out"""
        from ..sequence import Sequence
        return Sequence(lambda: ((key, list(group)) for key, group in group_by(self._sequence, key_selector)))

    def run_length_encode(self) -> 'Sequence[Tuple[T, int]]':
        """
        performs run-length encoding on the sequence. consecutive identical elements
        are grouped into (element, count) tuples.
        """
        from ..sequence import Sequence
        def rle_data():
            for key, group in group_by(self._sequence):
                yield key, sum(1 for _ in group)

        return Sequence(rle_data)

    def batch_by(self, key_selector: KeySelector[T, K]) -> 'Sequence[List[T]]':
        """batch consecutive elements with same key"""
        from ..sequence import Sequence
        return Sequence(lambda: (list(group) for _, group in group_by(self._sequence, key_selector)))
