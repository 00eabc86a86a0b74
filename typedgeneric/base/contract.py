from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from typedgeneric.utils.types import BuiltinTypes


class Contract(BuiltinTypes, ABC):
    """Base class for untyped templates

    Templates are ordinary classes whose public methods are wrapped
    by a typed generic. The parameter names documented on `generic`
    declare the type slots of the template. Every argument of a public
    method whose parameter name matches a type slot is checked against
    the type declared for that slot.
    """

    @classmethod
    @abstractmethod
    def generic(cls, *types: Any, **kwargs: Any) -> Any:
        """Make a new typed generic wrapping the template, must be
        implemented by sub-types

        Arguments:
            *types (Any): the type declarations of the generic
            **kwargs (Any): further arguments of the generic, e.g. the config

        Returns:
            generic (Generic): the typed generic
        """
        ...
