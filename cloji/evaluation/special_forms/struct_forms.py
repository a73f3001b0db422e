from collections.abc import Iterable, Mapping
from typing import Any

from cloji import HostValue
from cloji.evaluation.evaluator import evaluate, struct_object
from cloji.evaluation.special_forms.lambda_form import jsfn_form
from cloji.types.node import Node
from cloji.types.scope import Scope
from cloji.types.undefined import Undefined, is_nullish


def object_form(scope: Scope, *items: Node) -> dict[str, HostValue]:
    """(object :name "john" :age 20)"""
    return struct_object(scope, items)


def array_from(source: Any) -> list[HostValue]:
    """Array.from semantics: `{:length n}` gives n index-read slots, iterables are copied."""
    if isinstance(source, Mapping):
        length = source.get("length", 0)
        if is_nullish(length):
            return []
        return [source.get(i, source.get(str(i), Undefined)) for i in range(int(length))]
    if is_nullish(source) or not isinstance(source, Iterable):
        return []
    return list(source)


def array_form(scope: Scope, array_like: Node | None = None, map_fn: Node | None = None) -> list[HostValue]:
    """
    (array {:length 4})
    (array xs (fn [x idx] idx))
    The optional mapping function receives each element and its index.
    """
    fn = jsfn_form(scope, map_fn)
    items = array_from(evaluate(scope, array_like))
    if fn is Undefined:
        return items
    return [fn(item, index) for index, item in enumerate(items)]
