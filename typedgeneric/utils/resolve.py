from __future__ import annotations

import inspect
from functools import partial
from importlib import import_module
from typing import Any


def import_class(path: str) -> type:
    """Import a class from its dotted path

    Arguments:
        path (str): path of the class, e.g. `package.module.Class`

    Returns:
        cls (type): the imported class
    """
    module_name, _, class_name = path.rpartition(".")

    if not module_name:
        raise ValueError(
            "Template `%s` must be given as `module.Class` path" % path
        )

    try:
        return getattr(import_module(module_name), class_name)
    except (ImportError, AttributeError) as e:
        raise ValueError("Template class `%s` not found" % path) from e


def is_factory(obj: Any) -> bool:
    return inspect.isroutine(obj) or isinstance(obj, partial)


def resolve_template(template: Any) -> Any:
    """Resolve the untyped template instance from an argument

    The argument can be

    1. a dotted class path, which is imported and instantiated
    2. a class, which is instantiated without arguments
    3. a factory function, which is called without arguments and its
       return value is resolved again
    4. an instance, which is returned as is

    Arguments:
        template (Any): the argument to resolve

    Returns:
        instance (Any): the template instance
    """
    if isinstance(template, str):
        return import_class(template)()

    if isinstance(template, type):
        return template()

    if is_factory(template):
        return resolve_template(template())

    # already constructed
    return template
