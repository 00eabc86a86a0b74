from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, ClassVar

from wrapt import ObjectProxy

from typedgeneric.base.config import GenericConfig
from typedgeneric.base.errors import (
    GenericDeclarationError,
    UnknownMethodError,
)
from typedgeneric.base.registry import (
    SignatureMap,
    SignatureRegistry,
    default_registry,
)
from typedgeneric.utils.params import has_public_method
from typedgeneric.utils.resolve import resolve_template
from typedgeneric.utils.types import (
    BuiltinTypes,
    assert_type_matches,
    resolve_type,
    type_name,
)

logger = logging.getLogger(__name__)


class Generic(ObjectProxy, BuiltinTypes):
    """Typed Generic

    Typed proxy to an untyped template. The types given on construction
    are assigned, in order, to the type slots declared by the `generic`
    method of the template. Every call to a public method of the
    template is forwarded through the proxy, which checks all arguments
    whose parameter names match a type slot before the call.

    Arguments:
        template (Any):
            the untyped template, either an instance, a class, a dotted
            class path or a factory creating the template
        *types (Any):
            the type declarations, one for each type slot of the template
        config (None | GenericConfig):
            configuration of the generic, read from the environment
            if not given
    """

    _registry: ClassVar[SignatureRegistry] = default_registry

    def __init__(
        self, template: Any, *types: Any, config: None | GenericConfig = None
    ) -> None:
        super(Generic, self).__init__(resolve_template(template))

        if config is None:
            config = GenericConfig.from_env()

        self._self_enabled = config.enabled
        self._self_types = ()
        self._self_signature = None

        if not self._self_enabled:
            logger.debug(
                "Type checks disabled for generic %s",
                type_name(type(self.__wrapped__)),
            )
            return

        self._self_types = tuple(map(resolve_type, types))
        self._self_signature = type(self)._registry.get_signature_map(
            type(self.__wrapped__)
        )
        # one type for each slot
        if len(self._self_types) != len(self._self_signature):
            raise GenericDeclarationError(
                "Generic %s expects %i types (%s) but got %i."
                % (
                    type_name(type(self.__wrapped__)),
                    len(self._self_signature),
                    ", ".join(self._self_signature.slots),
                    len(self._self_types),
                )
            )

    @classmethod
    def generic(cls, *args: Any, **kwargs: Any) -> Generic:
        """Make a new typed generic, arguments are forwarded to
        the constructor
        """
        return cls(*args, **kwargs)

    @property
    def template(self) -> Any:
        """The untyped template wrapped by the generic"""
        return self.__wrapped__

    @property
    def types(self) -> tuple[str, ...]:
        """Type identifiers declared for the type slots"""
        return self._self_types

    @property
    def enabled(self) -> bool:
        """Whether type checks are enabled for the generic"""
        return self._self_enabled

    @property
    def signature(self) -> None | SignatureMap:
        """Signature map of the template, None if type checks
        are disabled
        """
        return self._self_signature

    def invoke(self, method: str, *args: Any, **kwargs: Any) -> Any:
        """Invoke a method of the template

        Checks the types of all arguments that correspond to a type
        slot before forwarding the call to the template.

        Arguments:
            method (str): name of the template method
            *args (Any): positional arguments forwarded to the method
            **kwargs (Any): keyword arguments forwarded to the method

        Returns:
            output (Any): the unchanged return value of the method
        """
        f = self._self_get_method(method)

        if self._self_enabled:
            self._self_check_args(method, args, kwargs)

        # return values are forwarded unchecked
        return f(*args, **kwargs)

    def _self_get_method(self, method: str) -> Callable[..., Any]:
        if not has_public_method(self.__wrapped__, method):
            raise UnknownMethodError(
                "Generic %s.%s() method does not exist."
                % (type_name(type(self.__wrapped__)), method)
            )
        return getattr(self.__wrapped__, method)

    def _self_check_args(
        self, method: str, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> None:
        signature = self._self_signature.methods.get(method, None)
        # methods added to the instance aren't part of the signature map
        if signature is None:
            return

        for i, value in enumerate(args):
            # only check arguments templated as a generic type
            if i in signature.positions:
                slot = signature.positions[i]
                assert_type_matches(self._self_types[slot], value)

        for name, value in kwargs.items():
            if name in signature.keywords:
                slot = signature.keywords[name]
                assert_type_matches(self._self_types[slot], value)

    def __getattr__(self, name: str) -> Any:
        # proxy internals
        if name == "__wrapped__" or name.startswith("_self_"):
            return super(Generic, self).__getattr__(name)

        f = self._self_get_method(name)

        @wraps(f)
        def forward(*args: Any, **kwargs: Any) -> Any:
            return self.invoke(name, *args, **kwargs)

        return forward

    def __repr__(self) -> str:
        return "<%s[%s]>" % (
            type_name(type(self.__wrapped__)),
            ", ".join(self._self_types),
        )
