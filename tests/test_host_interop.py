from types import SimpleNamespace

import pytest

from cloji.builtin.sequence_methods import bind_sequence_method, seq_reduce
from cloji.evaluation.object_path import get_property, object_path_get, own_properties, set_property
from cloji.errors import ForbiddenAccessError, NotCallableError
from cloji.interpreter import execute
from cloji.types.undefined import Undefined


@pytest.fixture
def host():
    return {
        "arr": [1, 2, 3],
        "user": SimpleNamespace(name="ann", pets=["cat"]),
        "s": "hello",
        "data": {"items": [{"id": 7}]},
    }


# ------------------ Property reads ------------------

@pytest.mark.parametrize(
    "src,expected",
    [
        ("arr.length", 3),
        ("arr.0", 1),
        ("arr.5", Undefined),
        ("user.name", "ann"),
        ("user.pets.0", "cat"),
        ("s.length", 5),
        ("data.items.0.id", 7),
        ("(s.upper)", "HELLO"),
        ('(s.replace "l" "L")', "heLLo"),
        ("(aget arr 1)", 2),
        ("(aget user :pets :length)", 1),
    ]
)
def test_reads(src, expected, host):
    result = execute(src, host).value
    if expected is Undefined:
        assert result is Undefined
    else:
        assert result == expected


def test_read_through_nullish_raises(host):
    host["empty"] = None
    with pytest.raises(TypeError, match="Cannot read property"):
        execute("empty.name", host)


# ------------------ Property writes ------------------

def test_set_attribute_on_host_object(host):
    execute('(set user.name "bob")', host)
    assert host["user"].name == "bob"


def test_aset_on_list_index(host):
    result = execute("(aset arr 0 10)", host)
    assert result.value is host["arr"]
    assert host["arr"] == [10, 2, 3]


def test_aset_appends_at_length(host):
    execute("(aset arr 3 4)", host)
    assert host["arr"] == [1, 2, 3, 4]


def test_set_dotted_index(host):
    execute("(set data.items.0.id 8)", host)
    assert host["data"]["items"][0]["id"] == 8


# ------------------ Sequence methods ------------------

@pytest.mark.parametrize(
    "src,expected",
    [
        ("(thread arr (map (fn [x] (* x x))))", [1, 4, 9]),
        ("(thread arr (filter (fn [x] (> x 1))))", [2, 3]),
        ("(thread arr (reduce (fn [acc x] (+ acc x)) 0))", 6),
        ("(thread arr (reduce (fn [acc x] (* acc x))))", 6),
        ('(thread arr (join "-"))', "1-2-3"),
        ("(thread arr (join))", "1,2,3"),
        ("(thread arr (find (fn [x] (> x 1))))", 2),
        ("(thread arr (some (fn [x] (> x 2))))", True),
        ("(thread arr (every (fn [x] (> x 2))))", False),
        ("(thread arr (includes 2))", True),
        ("(thread arr (indexOf 9))", -1),
        ("(thread arr (slice 1))", [2, 3]),
        ("(thread arr (concat [4] 5))", [1, 2, 3, 4, 5]),
        ("(arr.map (fn [x] (+ x 1)))", [2, 3, 4]),
    ]
)
def test_sequence_methods(src, expected, host):
    assert execute(src, host).value == expected


def test_push_mutates_and_returns_length(host):
    assert execute("(thread arr (push 4 5))", host).value == 5
    assert host["arr"] == [1, 2, 3, 4, 5]


def test_for_each_calls_host_callback(host):
    seen = []
    host["record"] = seen.append
    assert execute("(thread arr (forEach record))", host).value is Undefined
    assert seen == [1, 2, 3]


def test_find_without_match_is_undefined(host):
    assert execute("(thread arr (find (fn [x] (> x 10))))", host).value is Undefined


def test_reduce_of_empty_without_initial():
    with pytest.raises(TypeError):
        seq_reduce([], lambda a, b: a + b)


def test_bind_unknown_method():
    assert bind_sequence_method([1], "nope") is None


def test_strings_do_not_get_sequence_methods():
    assert get_property("abc", "map") is Undefined


# ------------------ Helpers ------------------

def test_get_property_on_mapping_reads_keys_only():
    assert get_property({"items": 1}, "items") == 1
    assert get_property({}, "missing") is Undefined
    assert get_property({"a": 1}, "items") is Undefined


@pytest.mark.parametrize("name", ["get", "items", "keys", "pop", "clear", "update"])
def test_object_destructuring_ignores_dict_methods(name):
    assert execute(f"(def {{{name}}} {{:a 1}}) {name}").value is Undefined


def test_missing_object_key_falls_back_with_nullish_operator():
    assert execute('(def o {:a 1}) (?? o.items "default")').value == "default"


def test_object_methods_are_not_callable_from_scripts():
    obj = {"a": 1}
    with pytest.raises(NotCallableError):
        execute("(o.clear)", {"o": obj})
    assert obj == {"a": 1}


def test_get_property_non_string_key_on_object():
    assert get_property(SimpleNamespace(a=1), 0) is Undefined


def test_set_property_on_nullish_raises():
    with pytest.raises(TypeError, match="Cannot set property"):
        set_property(None, "a", 1)


def test_object_path_get_on_tuple():
    assert object_path_get({"t": (4, 5)}, ["t", 1]) == 5


@pytest.mark.parametrize(
    "value,expected",
    [
        ({"a": 1}, {"a": 1}),
        (SimpleNamespace(a=1, _b=2), {"a": 1}),
        ([1, 2], {"0": 1, "1": 2}),
        ((3,), {"0": 3}),
        ("ab", {"0": "a", "1": "b"}),
        (None, {}),
        (Undefined, {}),
        (5, {}),
    ]
)
def test_own_properties(value, expected):
    assert own_properties(value) == expected


def test_object_spread_of_list_uses_indices(host):
    assert execute("{&arr :x 1}", host).value == {"0": 1, "1": 2, "2": 3, "x": 1}


# ------------------ Strings ------------------

@pytest.mark.parametrize(
    "src,expected",
    [
        ('(s.split "l")', ["he", "", "o"]),
        ('(s.startswith "he")', True),
        ("(thread s (strip \"ho\"))", "ell"),
        ("s.1", "e"),
    ]
)
def test_allowed_string_methods(src, expected, host):
    assert execute(src, host).value == expected


@pytest.mark.parametrize("name", ["format", "format_map", "encode", "maketrans"])
def test_other_string_methods_are_forbidden(name, host):
    with pytest.raises(ForbiddenAccessError):
        execute(f"s.{name}", host)


def test_unknown_string_property_is_undefined(host):
    assert execute("s.nope", host).value is Undefined


# ------------------ Operators as host callables ------------------

def test_operator_passed_to_sequence_method(host):
    assert execute("(thread arr (reduce +))", host).value == 6
    assert execute("(thread arr (reduce * 10))", host).value == 60


def test_operator_called_from_host():
    result = execute("(apply-op + 2 3)", {"apply-op": lambda op, a, b: op(a, b)})
    assert result.value == 5
