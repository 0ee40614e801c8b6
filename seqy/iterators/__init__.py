"""
plain generator functions over any iterable. everything here is lazy unless
its docstring says otherwise; the fluent Sequence api is built on top of them.
"""

from .basic import (
    map,
    filter,
    filter_false,
    chain,
    chain_from_iterable,
    count,
    cycle,
    take_while,
    drop_while,
    range,
    enumerate,
    compress,
    accumulate,
    reduce,
    reduce_,
    all,
    any,
    contains,
    tee
)
from .combinatorics import (
    combinations,
    combinations_with_replacement,
    binomial_coefficient,
    count_combinations
)
from .grouping import group_by
from .slicing import islice
from .zipping import zip, zip_longest

__all__ = [
    "map",
    "filter",
    "filter_false",
    "chain",
    "chain_from_iterable",
    "count",
    "cycle",
    "take_while",
    "drop_while",
    "range",
    "enumerate",
    "compress",
    "accumulate",
    "reduce",
    "reduce_",
    "all",
    "any",
    "contains",
    "tee",
    "combinations",
    "combinations_with_replacement",
    "binomial_coefficient",
    "count_combinations",
    "group_by",
    "islice",
    "zip",
    "zip_longest"
]
