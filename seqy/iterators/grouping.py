from __future__ import annotations
from ..types import *


def _identity(value):
    return value


def group_by(iterable: Iterable[T],
             key: Optional[KeySelector[T, K]] = None) -> Iterator[Tuple[K, Group[K, T]]]:
    """
    consecutive runs of equal-key elements as (key, group) pairs.

    like unix `uniq`, a new group starts every time the key changes, so the
    source usually needs to be sorted by the same key first. this is not sql's
    group by: non-adjacent elements with the same key land in separate groups.

    every group reads from the same underlying iterator. pulling the next pair
    makes the previous group stale, and a stale group yields nothing more even
    if it was never read:

    >>> [(k, list(g)) for k, g in group_by([0, 0, 1, 1, 2])]
    [(0, [0, 0]), (1, [1, 1]), (2, [2])]
    >>> [list(g) for k, g in list(group_by([0, 0, 1, 1, 2]))]
    [[], [], []]
    """
    cursor = GroupCursor(iter(iterable), key if key is not None else _identity)
    return _group_pairs(cursor)


def _group_pairs(cursor: GroupCursor[T, K]) -> Iterator[Tuple[K, Group[K, T]]]:
    while True:
        token = cursor.mint()
        # skip whatever the previous group left unread
        while same_key(cursor.current_key, cursor.target_key):
            if not cursor.advance():
                return
        if cursor.exhausted:
            return
        cursor.target_key = cursor.current_key
        yield cursor.current_key, Group(cursor, token, cursor.current_key)
