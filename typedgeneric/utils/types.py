from __future__ import annotations

import inspect
import io
import socket
from types import NoneType
from typing import Any

from typedgeneric.base.errors import TypeMismatchError, UnsupportedTypeError

# built-in type identifiers
ARRAY = "array"
BOOLEAN = "boolean"
CALLABLE = "callable"
FLOAT = "float"
INTEGER = "integer"
NULL = "null"
RESOURCE = "resource"
STRING = "string"

BUILTIN_TYPES = frozenset(
    [ARRAY, BOOLEAN, CALLABLE, FLOAT, INTEGER, NULL, RESOURCE, STRING]
)

# value categories
ARRAY_TYPES = (list, tuple, dict, set, frozenset)
HANDLE_TYPES = (io.IOBase, socket.socket)

# builtin classes used in type declarations
BUILTIN_CLASSES = {
    str: STRING,
    int: INTEGER,
    bool: BOOLEAN,
    float: FLOAT,
    NoneType: NULL,
} | {t: ARRAY for t in ARRAY_TYPES}


class BuiltinTypes(object):
    """Mixin exposing the built-in type identifiers"""

    TYPE_ARRAY = ARRAY
    TYPE_BOOL = BOOLEAN
    TYPE_BOOLEAN = BOOLEAN
    TYPE_CALLABLE = CALLABLE
    TYPE_DOUBLE = FLOAT
    TYPE_FLOAT = FLOAT
    TYPE_INT = INTEGER
    TYPE_INTEGER = INTEGER
    TYPE_NULL = NULL
    TYPE_RESOURCE = RESOURCE
    TYPE_STRING = STRING


def type_name(cls: type) -> str:
    """Get the type identifier of a class

    Classes from the `builtins` module are identified by their bare
    name, all others by their fully qualified name.

    Arguments:
        cls (type): the class

    Returns:
        name (str): the type identifier
    """
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return "%s.%s" % (cls.__module__, cls.__qualname__)


def is_object(value: Any) -> bool:
    T = type(value)
    # instances of user-level classes, but neither classes nor handles
    return (
        (T is object or T.__module__ != "builtins")
        and not isinstance(value, (type, *HANDLE_TYPES))
        and not inspect.isroutine(value)
    )


def classify(value: Any) -> str:
    """Classify a runtime value

    The checks are applied in priority order, i.e. a callable instance
    of a custom class is classified by its class and a boolean is never
    classified as an integer.

    Arguments:
        value (Any): the value to classify

    Returns:
        t (str): the built-in type identifier or class identifier
    """
    if is_object(value):
        return type_name(type(value))

    if isinstance(value, ARRAY_TYPES):
        return ARRAY

    if callable(value):
        return CALLABLE

    if isinstance(value, bool):
        return BOOLEAN

    if isinstance(value, int):
        return INTEGER

    if isinstance(value, float):
        return FLOAT

    if value is None:
        return NULL

    if isinstance(value, str):
        return STRING

    if isinstance(value, HANDLE_TYPES):
        return RESOURCE

    raise UnsupportedTypeError(
        "Generic type `%s` is not supported." % type_name(type(value))
    )


def resolve_type(declaration: Any) -> str:
    """Resolve a type declaration to a type identifier

    Strings are taken literally, i.e. `"string"` declares the built-in
    string type and `"app.models.User"` a class. Classes map to their
    identifier and all other values are classified, so an instance
    declares its own class.

    Arguments:
        declaration (Any): the declared type

    Returns:
        t (str): the type identifier
    """
    if isinstance(declaration, str):
        return declaration

    if declaration is None:
        return NULL

    if isinstance(declaration, type):
        return BUILTIN_CLASSES.get(declaration) or type_name(declaration)

    return classify(declaration)


def assert_type_matches(expected: str, value: Any) -> None:
    """Raise a `TypeMismatchError` if the value isn't of the expected type

    Arguments:
        expected (str): the expected type identifier
        value (Any): the value to check
    """
    actual = classify(value)

    if expected != actual:
        raise TypeMismatchError(expected, actual)


def is_identical(a: Any, b: Any) -> bool:
    # strict equality, i.e. same type and equal value
    return (a is b) or (type(a) is type(b) and a == b)
