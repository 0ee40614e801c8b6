from __future__ import annotations
import logging
from ..types import *

logger = logging.getLogger(__name__)

_DONE = object()


def zip(*iterables: Iterable[Any]) -> Iterator[Tuple[Any, ...]]:
    """
    tuples pulled from every source in lock-step, left to right. stops the
    moment any source runs out; values already pulled at that step are dropped.
    with no sources the result is empty.

    >>> list(zip('Hello', [3, 2, 1]))
    [('H', 3), ('e', 2), ('l', 1)]
    """
    iterators = [iter(i) for i in iterables]
    logger.debug("zip over %d sources", len(iterators))
    return _zip(iterators)


def _zip(iterators: List[Iterator[Any]]) -> Iterator[Tuple[Any, ...]]:
    if not iterators:
        return
    while True:
        result = []
        for iterator in iterators:
            value = next(iterator, _DONE)
            if value is _DONE:
                return
            result.append(value)
        yield tuple(result)


def zip_longest(*iterables: Iterable[Any], fill_value: Any = None) -> Iterator[Tuple[Any, ...]]:
    """
    like zip, but keeps going until every source is done at the same step.
    sources that ran out contribute fill_value. every source is still asked
    on every step, even after it ended.

    >>> list(zip_longest('Hat', [3]))
    [('H', 3), ('a', None), ('t', None)]
    """
    iterators = [iter(i) for i in iterables]
    logger.debug("zip_longest over %d sources", len(iterators))
    return _zip_longest(iterators, fill_value)


def _zip_longest(iterators: List[Iterator[Any]], fill_value: Any) -> Iterator[Tuple[Any, ...]]:
    while True:
        result = [next(iterator, _DONE) for iterator in iterators]
        if all(value is _DONE for value in result):
            # also covers the zero-source case
            return
        yield tuple(fill_value if value is _DONE else value for value in result)
