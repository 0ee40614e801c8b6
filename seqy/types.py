from dataclasses import dataclass
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Reducer = Callable[[U, T], U]
SourceFunc = Callable[[], Iterator[T]]


class _NoInitial:
    """marker type for 'no initial value given'. none is a legal initial value."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_INITIAL"

    def __bool__(self) -> bool:
        return False


NO_INITIAL = _NoInitial()

# never equal to any key a key function can produce
_UNSET = object()


def same_key(a: Any, b: Any) -> bool:
    """key equality that treats an object as equal to itself (so nan keys still group)"""
    return a is b or a == b


@dataclass(frozen=True)
class SliceSelector:
    """the (start, stop, step) triple picked by islice. stop=None is unbounded."""
    start: int = 0
    stop: Optional[int] = None
    step: int = 1

    def __post_init__(self):
        if self.start < 0:
            raise ValueError("start must be non-negative")
        if self.stop is not None and self.stop < 0:
            raise ValueError("stop must be non-negative or None")
        if self.step <= 0:
            raise ValueError("step must be positive")


class GroupCursor(Generic[T, K]):
    """
    shared state behind one group_by call. the outer iterator and every group
    it hands out read the same cursor, so only the newest group (the one whose
    token matches) may pull from the source.
    """

    def __init__(self, iterator: Iterator[T], key_func: KeySelector[T, K]):
        self.iterator = iterator
        self.key_func = key_func
        self.current_key: Any = _UNSET
        self.target_key: Any = _UNSET
        self.current_value: Any = _UNSET
        self.token: object = object()
        self.exhausted = False

    def advance(self) -> bool:
        """pull one element and refresh key/value. false once the source is done."""
        if self.exhausted:
            return False
        try:
            self.current_value = next(self.iterator)
        except StopIteration:
            self.exhausted = True
            return False
        self.current_key = self.key_func(self.current_value)
        return True

    def mint(self) -> object:
        """start a new generation; any group holding the old token goes stale"""
        self.token = object()
        return self.token

    def __repr__(self) -> str:
        return f"GroupCursor(target_key={self.target_key!r}, exhausted={self.exhausted})"


class Group(Generic[K, T]):
    """a lazily consumed run of equal-key elements. stops once it is no longer current."""

    def __init__(self, cursor: GroupCursor[T, K], token: object, key: K):
        self._cursor = cursor
        self._token = token
        self.key = key

    @property
    def is_stale(self) -> bool:
        return self._cursor.token is not self._token

    def __iter__(self) -> 'Group[K, T]':
        return self

    def __next__(self) -> T:
        cursor = self._cursor
        if self.is_stale or cursor.exhausted or not same_key(cursor.current_key, cursor.target_key):
            raise StopIteration
        value = cursor.current_value
        cursor.advance()
        return value

    def __repr__(self) -> str:
        return f"Group(key={self.key!r}, stale={self.is_stale})"
