import pytest

from cloji.errors import ForbiddenAccessError, UndefinedVariableError
from cloji.types.scope import Scope
from cloji.types.undefined import Undefined


@pytest.fixture
def globals_scope():
    return Scope({"x": 1, "user": {"name": "ann", "tags": ["a", "b"]}})


def test_constructor_names_are_read_only(globals_scope):
    assert globals_scope.is_read_only("x")
    assert globals_scope.is_read_only("user")
    assert not globals_scope.is_read_only("y")


def test_later_bindings_are_writable(globals_scope):
    globals_scope.set("y", 2)
    assert globals_scope.get_var("y") == 2
    assert not globals_scope.is_read_only("y")


def test_read_only_is_per_scope(globals_scope):
    child = Scope(parent=globals_scope)
    assert not child.is_read_only("x")
    assert child.get_var("x") == 1


def test_get_var_unbound_is_undefined(globals_scope):
    assert globals_scope.get_var("missing") is Undefined


def test_get_unbound_raises(globals_scope):
    with pytest.raises(UndefinedVariableError, match="missing is not defined"):
        globals_scope.get("missing")


def test_get_unbound_base_of_path_raises(globals_scope):
    with pytest.raises(UndefinedVariableError, match="nobody is not defined"):
        globals_scope.get("nobody.name")


def test_bound_to_undefined_is_defined():
    scope = Scope({"u": Undefined})
    assert scope.is_defined("u")
    assert scope.get("u") is Undefined


def test_dotted_get(globals_scope):
    assert globals_scope.get("user.name") == "ann"
    assert globals_scope.get("user.tags.1") == "b"
    assert globals_scope.get("user.tags.length") == 2
    assert globals_scope.get("user.nope") is Undefined


def test_dotted_set_writes_into_base(globals_scope):
    assert globals_scope.set("user.name", "bob") == "bob"
    assert globals_scope.get_var("user")["name"] == "bob"


def test_dotted_set_through_missing_parent_raises(globals_scope):
    with pytest.raises(TypeError):
        globals_scope.set("user.address.city", "x")


def test_set_binds_locally_without_touching_parent(globals_scope):
    child = Scope(parent=globals_scope)
    child.set("x", 99)
    assert child.get("x") == 99
    assert globals_scope.get("x") == 1


def test_lookup_walks_to_root():
    root = Scope({"a": 1})
    leaf = Scope(parent=Scope(parent=Scope(parent=root)))
    assert leaf.is_defined("a")
    assert leaf.get("a") == 1
    assert not leaf.is_defined("b")


def test_inner_binding_shadows(globals_scope):
    child = Scope({"x": "inner"}, globals_scope)
    assert child.get("x") == "inner"


@pytest.mark.parametrize("name", ["__proto__", "constructor", "prototype"])
def test_forbidden_names(name, globals_scope):
    with pytest.raises(ForbiddenAccessError):
        globals_scope.get(name)
    with pytest.raises(ForbiddenAccessError):
        globals_scope.get_var(name)
    with pytest.raises(ForbiddenAccessError):
        globals_scope.set(name, 1)


@pytest.mark.parametrize("path", ["user.__class__", "user.constructor", "user.tags.__len__"])
def test_forbidden_path_segments(path, globals_scope):
    with pytest.raises(ForbiddenAccessError):
        globals_scope.get(path)
    with pytest.raises(ForbiddenAccessError):
        globals_scope.set(path, 1)


def test_str_lists_local_vars():
    scope = Scope({"a": 1}, Scope())
    assert str(scope) == "{a: 1} -> ..."
    assert repr(scope) == "<Scope 1 vars (1 read-only)>"
