from __future__ import annotations


class UndefinedType:
    """The dialect's ``void``: distinct from ``None`` (``nil``) and always falsy."""

    __slots__ = ()
    _instance: UndefinedType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "undefined"
    def __bool__(self): return False

    def __reduce__(self):
        return (UndefinedType, ())


Undefined = UndefinedType()


def is_nullish(value) -> bool:
    return value is None or value is Undefined
