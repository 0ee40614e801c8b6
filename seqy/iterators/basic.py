"""
single-pass building blocks. several names shadow builtins on purpose
(map, filter, range, all, any, enumerate); import the module, not the names,
if you also need the builtins nearby.
"""
from __future__ import annotations
import builtins
import numbers
from collections import deque
from ..types import *


def map(iterable: Iterable[T], map_function: Selector[T, U]) -> Iterator[U]:
    """apply map_function to each element, once, as it is pulled"""
    for item in iterable:
        yield map_function(item)


def filter(iterable: Iterable[T], predicate: Predicate[T] = bool) -> Iterator[T]:
    """keep elements matching the predicate (truthiness by default)"""
    for item in iterable:
        if predicate(item):
            yield item


def filter_false(iterable: Iterable[T], predicate: Predicate[T] = bool) -> Iterator[T]:
    """keep elements for which the predicate is false"""
    return filter(iterable, lambda v: not predicate(v))


def chain(*iterables: Iterable[T]) -> Iterator[T]:
    """iterate over each iterable in turn"""
    for iterable in iterables:
        for item in iterable:
            yield item


def chain_from_iterable(iterables: Iterable[Iterable[T]]) -> Iterator[T]:
    """like chain, but the iterables come lazily from a single outer iterable"""
    for iterable in iterables:
        for item in iterable:
            yield item


def count(start: int = 0, step: int = 1) -> Iterator[int]:
    """
    the infinite sequence start, start + step, start + 2 * step, ...
    never materialize this without a bound.
    """
    value = start
    while True:
        yield value
        value += step


def cycle(iterable: Iterable[T]) -> Iterator[T]:
    """yield the source once while saving it, then repeat the saved copy forever"""
    saved = []
    for item in iterable:
        yield item
        saved.append(item)
    # an empty source must not spin forever
    while saved:
        for item in saved:
            yield item


def take_while(iterable: Iterable[T], predicate: Predicate[T] = bool) -> Iterator[T]:
    """yield elements until the predicate first fails"""
    for item in iterable:
        if not predicate(item):
            break
        yield item


def drop_while(iterable: Iterable[T], predicate: Predicate[T] = bool) -> Iterator[T]:
    """skip elements while the predicate holds, then yield everything else"""
    iterator = iter(iterable)
    for item in iterator:
        if not predicate(item):
            yield item
            break
    yield from iterator


def range(start_or_stop: int, stop: Optional[int] = None, step: int = 1) -> Iterator[int]:
    """
    range(stop) -> 0 .. stop-1
    range(start, stop, step=1) -> start, start+step, ... while short of stop.

    a positive step counts up to stop (exclusive), a negative step counts down.
    a zero step is rejected immediately, before anything is iterated.
    """
    if stop is None:
        start, stop = 0, start_or_stop
    else:
        start = start_or_stop

    if not builtins.all(isinstance(v, numbers.Integral) for v in (start, stop, step)):
        raise TypeError("range arguments must be integers")

    if step == 0:
        raise ValueError("step must not be zero")

    if step > 0:
        bound = lambda v: v < stop
    else:
        bound = lambda v: v > stop

    return take_while(count(start, step), bound)


def enumerate(iterable: Iterable[T], start: int = 0) -> Iterator[Tuple[int, T]]:
    """pair each element with a running index"""
    from .zipping import zip
    return zip(count(start), iterable)


def compress(data: Iterable[T], selectors: Iterable[Any]) -> Iterator[T]:
    """keep elements of data whose matching selector is truthy. stops at the shorter input"""
    from .zipping import zip
    for item, selector in zip(data, selectors):
        if selector:
            yield item


def _add_numbers(accumulated: Any, item: Any) -> Any:
    if not isinstance(item, numbers.Number):
        raise TypeError("a reducer must be given for non-numeric elements")
    return item if accumulated is None else accumulated + item


def accumulate(iterable: Iterable[T],
               reducer: Optional[Reducer[U, T]] = None,
               initial: Union[U, Any] = NO_INITIAL) -> Iterator[U]:
    """
    running reductions of the source.

    - initial given: yield initial, then fold every element with the reducer
      (numeric addition when no reducer is given).
    - no initial, reducer given: the first value is reducer(None, first).
    - no initial, no reducer: the first element is the first value as is,
      later numbers are added to it. a non-numeric later element raises
      TypeError when it is reached, not before.
    """
    iterator = iter(iterable)
    fold = reducer if reducer is not None else _add_numbers

    if initial is NO_INITIAL:
        try:
            first = next(iterator)
        except StopIteration:
            return
        accumulated = first if reducer is None else reducer(None, first)
    else:
        accumulated = initial

    yield accumulated
    for item in iterator:
        accumulated = fold(accumulated, item)
        yield accumulated


def reduce(iterable: Iterable[T], reducer: Reducer[U, T], initial: U) -> U:
    """fold the whole source into one value (eager)"""
    accumulated = initial
    for item in iterable:
        accumulated = reducer(accumulated, item)
    return accumulated


def reduce_(iterable: Iterable[T], reducer: Reducer[T, T]) -> Optional[T]:
    """reduce seeded with the first element. none for an empty source"""
    iterator = iter(iterable)
    try:
        first = next(iterator)
    except StopIteration:
        return None
    return reduce(iterator, reducer, first)


def all(iterable: Iterable[T], predicate: Predicate[T] = bool) -> bool:
    """true when every element satisfies the predicate. stops at the first failure"""
    for item in iterable:
        if not predicate(item):
            return False
    return True


def any(iterable: Iterable[T], predicate: Predicate[T] = bool) -> bool:
    """true when some element satisfies the predicate. stops at the first hit"""
    return not all(iterable, lambda item: not predicate(item))


def contains(haystack: Iterable[T], needle: Any) -> bool:
    """membership by identity or equality, pulling only as far as needed"""
    return any(haystack, lambda value: value is needle or value == needle)


def tee(iterable: Iterable[T], n: int = 2) -> Tuple[Iterator[T], ...]:
    """
    split one source into n independent iterators. each consumer gets its own
    buffer; the source is pulled once per element no matter how many consumers.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    iterator = iter(iterable)
    buffers = [deque() for _ in builtins.range(n)]

    def consumer(buffer: deque) -> Iterator[T]:
        while True:
            if not buffer:
                try:
                    value = next(iterator)
                except StopIteration:
                    return
                for other in buffers:
                    other.append(value)
            yield buffer.popleft()

    return tuple(consumer(buffer) for buffer in buffers)
