from __future__ import annotations
import logging
from ..types import *
from .basic import count, take_while, enumerate

logger = logging.getLogger(__name__)

# tells islice(it, k) apart from islice(it, start, None)
_OMITTED = object()


def islice(iterable: Iterable[T], start_or_stop: Optional[int],
           stop: Any = _OMITTED, step: Optional[int] = None) -> Iterator[T]:
    """
    islice(iterable, stop)
    islice(iterable, start, stop, step=None)
    islice(iterable, start, step=step)

    the elements at positions start, start + step, ... below stop, pulled from
    a single pass over the source. stop=None means unbounded, as does leaving
    stop out while passing step. start=None means 0. negative values and
    non-positive steps are rejected at call time, before the source is touched.
    the source is never read past the last wanted position.

    >>> list(islice(range(100), 2, 10, 3))
    [2, 5, 8]
    """
    selector = to_selector(start_or_stop, stop, step)
    logger.debug("islice: %r", selector)
    return _islice(iterable, selector)


def to_selector(start_or_stop: Optional[int], stop: Any = _OMITTED,
                step: Optional[int] = None) -> SliceSelector:
    """normalize islice-style arguments into a validated selector"""
    if stop is _OMITTED:
        if step is not None:
            # islice(it, start, step=n) runs from start with no end
            return SliceSelector(start_or_stop, None, step)
        # single argument form, sugar for (0, k, 1)
        return SliceSelector(0, start_or_stop, 1)
    start = 0 if start_or_stop is None else start_or_stop
    return SliceSelector(start, stop, 1 if step is None else step)


def _islice(iterable: Iterable[T], selector: SliceSelector) -> Iterator[T]:
    positions = count(selector.start, selector.step)
    if selector.stop is not None:
        positions = take_while(positions, lambda p: p < selector.stop)

    enumerated = enumerate(iterable)
    for wanted in positions:
        for position, value in enumerated:
            if position == wanted:
                yield value
                break
        else:
            # source ran out before the wanted position
            return
