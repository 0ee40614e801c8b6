from __future__ import annotations
import typing
from ..types import *
from ..iterators import basic
from ..iterators.slicing import islice, to_selector

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class _CoreOperations(Generic[T]):
    def where(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """filter elements based on a predicate"""
        from ..sequence import Sequence
        return Sequence(lambda: basic.filter(self, predicate))

    def where_not(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """drop elements matching a predicate"""
        from ..sequence import Sequence
        return Sequence(lambda: basic.filter_false(self, predicate))

    def select(self: 'Sequence[T]', selector: Selector[T, U]) -> 'Sequence[U]':
        """project each element to a new form"""
        from ..sequence import Sequence
        return Sequence(lambda: basic.map(self, selector))

    def select_many(self: 'Sequence[T]', selector: Selector[T, Iterable[U]]) -> 'Sequence[U]':
        """project and flatten sequences"""
        from ..sequence import Sequence
        return Sequence(lambda: basic.chain_from_iterable(basic.map(self, selector)))

    def select_with_index(self: 'Sequence[T]', selector: Callable[[T, int], U]) -> 'Sequence[U]':
        """project each element to a new form, using the element's index"""
        from ..sequence import Sequence
        return Sequence(lambda: (selector(item, index) for index, item in basic.enumerate(self)))

    def enumerate(self: 'Sequence[T]', start: int = 0) -> 'Sequence[Tuple[int, T]]':
        """pair each element with its position"""
        from ..sequence import Sequence
        return Sequence(lambda: basic.enumerate(self, start))

    # --- slicing ---

    def slice(self: 'Sequence[T]', start: Optional[int], stop: Optional[int] = None,
              step: Optional[int] = None) -> 'Sequence[T]':
        """elements at start, start + step, ... below stop (none = unbounded)"""
        from ..sequence import Sequence
        to_selector(start, stop, step)
        return Sequence(lambda: islice(self, start, stop, step))

    def take(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """take the first 'count' elements"""
        from ..sequence import Sequence
        to_selector(count)
        return Sequence(lambda: islice(self, count))

    def skip(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """skip the first 'count' elements"""
        return self.slice(count, None)

    def take_while(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """take elements while predicate is true"""
        from ..sequence import Sequence
        return Sequence(lambda: basic.take_while(self, predicate))

    def skip_while(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """skip elements while predicate is true"""
        from ..sequence import Sequence
        return Sequence(lambda: basic.drop_while(self, predicate))

    # --- combining ---

    def concat(self: 'Sequence[T]', *others: Iterable[T]) -> 'Sequence[T]':
        """this sequence followed by each of the others"""
        from ..sequence import Sequence
        return Sequence(lambda: basic.chain(self, *others))

    def append(self: 'Sequence[T]', element: T) -> 'Sequence[T]':
        """appends a value to the end of the sequence"""
        return self.concat((element,))

    def prepend(self: 'Sequence[T]', element: T) -> 'Sequence[T]':
        """adds a value to the beginning of the sequence"""
        from ..sequence import Sequence
        return Sequence(lambda: basic.chain((element,), self))

    def compress(self: 'Sequence[T]', selectors: Iterable[Any]) -> 'Sequence[T]':
        """keep elements whose matching selector is truthy"""
        from ..sequence import Sequence
        return Sequence(lambda: basic.compress(self, selectors))

    def cycle(self: 'Sequence[T]') -> 'Sequence[T]':
        """repeat the sequence forever. an empty sequence stays empty"""
        from ..sequence import Sequence
        return Sequence(lambda: basic.cycle(self))

    def accumulate(self: 'Sequence[T]', reducer: Optional[Reducer[U, T]] = None,
                   initial: Union[U, Any] = NO_INITIAL) -> 'Sequence[U]':
        """running reductions; see iterators.accumulate for how reducer and initial combine"""
        from ..sequence import Sequence
        return Sequence(lambda: basic.accumulate(self, reducer, initial))

    def tee(self: 'Sequence[T]', n: int = 2) -> Tuple['Sequence[T]', ...]:
        """
        n single-pass sequences reading one shared pass over this one.
        unlike the rest of the api the split happens now, so each copy can only
        be iterated once.
        """
        from ..sequence import Sequence
        return tuple(Sequence(lambda it=it: it) for it in basic.tee(self, n))

    def side_effect(self: 'Sequence[T]', action: Callable[[T], Any]) -> 'Sequence[T]':
        """
        performs a side-effect action for each element as it passes through the
        sequence without modifying it. handy for watching what a pipeline pulls.
        """
        from ..sequence import Sequence
        def side_effect_generator():
            for item in self:
                action(item)
                yield item
        return Sequence(side_effect_generator)

    def default_if_empty(self: 'Sequence[T]', default_value: T) -> 'Sequence[T]':
        """the elements of a sequence, or the default value alone if it is empty"""
        from ..sequence import Sequence
        def default_generator():
            empty = True
            for item in self:
                empty = False
                yield item
            if empty:
                yield default_value
        return Sequence(default_generator)
