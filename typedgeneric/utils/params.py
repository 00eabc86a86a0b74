from __future__ import annotations

import inspect
import re
from typing import Any, Callable

# attribute set by the `generic_params` decorator
PARAMS_ATTRIBUTE = "__generic_params__"

# google style argument sections and their entries
_SECTION = re.compile(r"^(Arguments|Args|Parameters):\s*$")
_SECTION_ENTRY = re.compile(r"^(\w+)\s*(\([^)]*\))?\s*:")
# restructured text parameter fields
_FIELD = re.compile(r"^:param\s+(?:[\w\[\], .|]+\s+)?(\w+)\s*:", re.MULTILINE)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def generic_params(*names: str) -> Callable[[Callable], Callable]:
    """Decorator explicitly declaring the parameter names of a function

    Explicit names take precedence over the names found in the
    signature and the docstring of the function.

    Arguments:
        *names (str): ordered parameter names
    """

    def decorator(f: Callable) -> Callable:
        setattr(f, PARAMS_ATTRIBUTE, tuple(names))
        return f

    return decorator


def parse_doc_params(doc: None | str) -> list[str]:
    """Parse the parameter names documented in a docstring

    Supports the `Arguments:` sections used throughout this package,
    i.e. entries of the form `name (type): description`, as well as
    restructured text `:param name:` fields.

    Arguments:
        doc (None | str): the docstring

    Returns:
        names (list[str]): documented parameter names in order
    """
    if not doc:
        return []

    doc = inspect.cleandoc(doc)
    names, indent = [], None

    for line in doc.splitlines():
        if indent is None:
            # look for the start of the arguments section
            if _SECTION.match(line):
                indent = -1
            continue

        if not line.strip():
            continue

        depth = len(line) - len(line.lstrip())
        # unindented line ends the section
        if depth == 0:
            break
        # the first entry fixes the indentation of entries, deeper
        # lines continue the description of the previous entry
        if indent == -1:
            indent = depth
        if depth == indent:
            match = _SECTION_ENTRY.match(line.strip())
            if match is not None:
                names.append(match.group(1))

    return names or _FIELD.findall(doc)


def get_signature_params(f: Callable) -> tuple[list[str], list[str]]:
    """Get the named parameters from the signature of a function

    Arguments:
        f (Callable): the function or method

    Returns:
        positional (list[str]): names of parameters passable by position
        keyword_only (list[str]): names of keyword-only parameters
    """
    try:
        sig = inspect.signature(f)
    except (TypeError, ValueError):
        # builtins without signature information
        return [], []

    params = sig.parameters.values()
    return (
        [p.name for p in params if p.kind in _POSITIONAL],
        [p.name for p in params if p.kind is inspect.Parameter.KEYWORD_ONLY],
    )


def get_param_names(f: Callable, bound: bool = True) -> list[str]:
    """Get the ordered positional parameter names of a function

    The names are taken from the first of the following sources
    that provides any:

    1. explicit names set by the `generic_params` decorator
    2. the signature of the function
    3. the docstring of the function

    Keyword-only parameters are not positional and thus never part
    of the returned names. The docstring is only used if the signature
    has no named parameters at all.

    Arguments:
        f (Callable): the function or method
        bound (bool):
            whether the first parameter is bound, i.e. `self` for
            methods accessed through the class. Defaults to True.

    Returns:
        names (list[str]): ordered parameter names
    """
    explicit = getattr(f, PARAMS_ATTRIBUTE, None)
    if explicit is not None:
        return list(explicit)

    names, keyword_only = get_signature_params(f)
    if not bound and len(names) > 0:
        names = names[1:]

    # documented names only stand in for a signature without any
    if names or keyword_only:
        return names
    return parse_doc_params(inspect.getdoc(f))


def get_keyword_only_names(f: Callable) -> list[str]:
    return get_signature_params(f)[1]


def is_bound(cls: type, name: str) -> bool:
    # plain functions accessed through the class still take `self`,
    # class and static methods don't
    static = inspect.getattr_static(cls, name)
    return isinstance(static, (classmethod, staticmethod))


def get_public_methods(cls: type) -> dict[str, tuple[list[str], list[str]]]:
    """Get the parameter names of all public methods of a class

    Arguments:
        cls (type): the class to inspect

    Returns:
        methods (dict[str, tuple[list[str], list[str]]]):
            mapping of public method names to their positional and
            keyword-only parameter names
    """
    methods = {}

    for name, value in inspect.getmembers(cls):
        if name.startswith("_") or not inspect.isroutine(value):
            continue

        methods[name] = (
            get_param_names(value, bound=is_bound(cls, name)),
            get_keyword_only_names(value),
        )

    return methods


def has_public_method(obj: Any, name: str) -> bool:
    return (
        not name.startswith("_")
        and hasattr(obj, name)
        and callable(getattr(obj, name))
    )
