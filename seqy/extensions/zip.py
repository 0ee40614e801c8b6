from __future__ import annotations
import typing
from ..types import *
from ..iterators.basic import map
from ..iterators.zipping import zip, zip_longest

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


class ZipAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def zip(self, *others: Iterable[Any]) -> 'Sequence[Tuple[Any, ...]]':
        """lock-step tuples with this sequence first. stops at the shortest input"""
        from ..sequence import Sequence
        return Sequence(lambda: zip(self._sequence, *others))

    def zip_longest(self, *others: Iterable[Any], fill_value: Any = None) -> 'Sequence[Tuple[Any, ...]]':
        """lock-step tuples padded with fill_value until every input is done"""
        from ..sequence import Sequence
        return Sequence(lambda: zip_longest(self._sequence, *others, fill_value=fill_value))

    def zip_with(self, other: Iterable[U], result_selector: Callable[[T, U], V]) -> 'Sequence[V]':
        """zip two sequences with custom result selector"""
        from ..sequence import Sequence
        return Sequence(lambda: map(zip(self._sequence, other), lambda pair: result_selector(*pair)))

    def zip_longest_with(self, other: Iterable[U],
                         result_selector: Callable[[Optional[T], Optional[U]], V],
                         default_self: Optional[T] = None, default_other: Optional[U] = None) -> 'Sequence[V]':
        """zip sequences padding shorter with defaults"""
        from ..sequence import Sequence
        def zip_longest_data():
            # use a sentinel object to distinguish from a fill value of none
            sentinel = object()
            for t, u in zip_longest(self._sequence, other, fill_value=sentinel):
                s_item = t if t is not sentinel else default_self
                o_item = u if u is not sentinel else default_other
                yield result_selector(s_item, o_item)

        return Sequence(zip_longest_data)

    def unzip(self) -> Tuple['Sequence[Any]', ...]:
        """
        the inverse of zip. transforms a sequence of tuples into a tuple of sequences.
        e.g., [(a, 1), (b, 2)] -> ( (a, b), (1, 2) )
        this reads the whole source now; the columns come from a snapshot.
        """
        from ..factories import from_iterable
        data = self._sequence.to.list()
        if not data:
            return tuple()
        return tuple(from_iterable(column) for column in zip(*data))
