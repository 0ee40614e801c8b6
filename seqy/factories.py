import typing
from .types import *
from .iterators import basic

if typing.TYPE_CHECKING:
    from .sequence import Sequence

def from_iterable(data: Iterable[T]) -> 'Sequence[T]':
    """
    wrap an iterable. nothing is read until the sequence is iterated.
    a list or range can be iterated again; a generator only once.
    """
    from .sequence import Sequence
    return Sequence(lambda: data)

def from_range(start_or_stop: int, stop: Optional[int] = None, step: int = 1) -> 'Sequence[int]':
    """create sequence from range. a zero step fails here, not on iteration"""
    from .sequence import Sequence
    basic.range(start_or_stop, stop, step)
    return Sequence(lambda: basic.range(start_or_stop, stop, step))

def from_count(start: int = 0, step: int = 1) -> 'Sequence[int]':
    """the infinite sequence start, start + step, ..."""
    from .sequence import Sequence
    return Sequence(lambda: basic.count(start, step))

def repeat(item: T, count: Optional[int] = None) -> 'Sequence[T]':
    """create sequence with repeated item. count=None repeats forever"""
    from .sequence import Sequence
    if count is None:
        return Sequence(lambda: basic.map(basic.count(), lambda _: item))
    return Sequence(lambda: basic.map(basic.range(max(count, 0)), lambda _: item))

def empty() -> 'Sequence[Any]':
    """create empty sequence"""
    from .sequence import Sequence
    return Sequence(lambda: ())

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Sequence[T]':
    """sequence of generator_func() results, called once per pull. count=None never ends"""
    return repeat(None, count).select(lambda _: generator_func())

# --- aliases ---
seq = from_iterable
P = from_iterable
p = from_iterable
