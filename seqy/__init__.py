"""
 ___  ___  __ _ _   _
/ __|/ _ \/ _` | | | |
\__ \  __/ (_| | |_| |
|___/\___|\__, |\__, |
             |_| |___/

lazy, itertools-style pipelines with a fluent face.
"""

# expose the main classes
from .sequence import Sequence

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    from_count,
    repeat,
    empty,
    generate,
    seq,
    P
)

# expose supporting data classes
from .types import (
    Group,
    GroupCursor,
    SliceSelector,
    NO_INITIAL
)

# define what `import *` does
__all__ = [
    "Sequence",
    "from_iterable",
    "from_range",
    "from_count",
    "repeat",
    "empty",
    "generate",
    "seq",
    "P",
    "Group",
    "GroupCursor",
    "SliceSelector",
    "NO_INITIAL"
]
