"""Methods exposed on host lists and tuples.

Scripts call these through property paths (``arr.map``) and ``thread`` steps,
so Python sequences answer the same method names script authors use on
arrays. Callbacks are plain callables: host functions, ``jsfn`` adapters or
language closures (which accept plain values when called from Python).
"""
from __future__ import annotations

from functools import partial
from typing import Any, Callable, Sequence

from cloji import HostValue
from cloji.types.undefined import Undefined


def seq_map(seq: Sequence, fn: Callable) -> list[HostValue]:
    return [fn(item) for item in seq]


def seq_filter(seq: Sequence, fn: Callable) -> list[HostValue]:
    return [item for item in seq if fn(item)]


def seq_reduce(seq: Sequence, fn: Callable, initial: Any = Undefined) -> HostValue:
    """(thread xs (reduce f init)) folds left; without init the first element seeds."""
    items = list(seq)
    if initial is Undefined:
        if not items:
            raise TypeError("reduce of empty sequence with no initial value")
        acc, items = items[0], items[1:]
    else:
        acc = initial
    for item in items:
        acc = fn(acc, item)
    return acc


def seq_for_each(seq: Sequence, fn: Callable) -> HostValue:
    for item in seq:
        fn(item)
    return Undefined


def seq_find(seq: Sequence, fn: Callable) -> HostValue:
    return next((item for item in seq if fn(item)), Undefined)


def seq_some(seq: Sequence, fn: Callable) -> bool:
    return any(fn(item) for item in seq)


def seq_every(seq: Sequence, fn: Callable) -> bool:
    return all(fn(item) for item in seq)


def seq_slice(seq: Sequence, start: int = 0, end: Any = Undefined) -> list[HostValue]:
    stop = None if end is Undefined or end is None else end
    return list(seq[start:stop])


def seq_concat(seq: Sequence, *others: Any) -> list[HostValue]:
    result = list(seq)
    for other in others:
        if isinstance(other, (list, tuple)):
            result.extend(other)
        else:
            result.append(other)
    return result


def seq_join(seq: Sequence, separator: str = ",") -> str:
    return separator.join("" if item is None or item is Undefined else str(item) for item in seq)


def seq_includes(seq: Sequence, value: Any) -> bool:
    return value in seq


def seq_index_of(seq: Sequence, value: Any) -> int:
    try:
        return seq.index(value)
    except ValueError:
        return -1


def seq_push(seq: list, *values: Any) -> int:
    seq.extend(values)
    return len(seq)


SEQUENCE_METHODS: dict[str, Callable[..., HostValue]] = {
    "map": seq_map,
    "filter": seq_filter,
    "reduce": seq_reduce,
    "forEach": seq_for_each,
    "find": seq_find,
    "some": seq_some,
    "every": seq_every,
    "slice": seq_slice,
    "concat": seq_concat,
    "join": seq_join,
    "includes": seq_includes,
    "indexOf": seq_index_of,
    "push": seq_push,
}


def bind_sequence_method(seq: Sequence, name: str) -> Callable[..., HostValue] | None:
    method = SEQUENCE_METHODS.get(name)
    if method is None:
        return None
    return partial(method, seq)


# Methods scripts may call on strings. Anything that interprets its argument
# as a template or attribute path (format, format_map) stays out.
STRING_METHODS: frozenset[str] = frozenset({
    "capitalize", "casefold", "center", "count", "endswith", "find", "index",
    "isalnum", "isalpha", "isdigit", "islower", "isspace", "isupper", "join",
    "ljust", "lower", "lstrip", "partition", "removeprefix", "removesuffix",
    "replace", "rfind", "rjust", "rpartition", "rsplit", "rstrip", "split",
    "splitlines", "startswith", "strip", "swapcase", "title", "upper", "zfill",
})
