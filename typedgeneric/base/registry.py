from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

from typedgeneric.base.errors import GenericDeclarationError
from typedgeneric.utils.params import (
    get_param_names,
    get_public_methods,
    is_bound,
)
from typedgeneric.utils.types import type_name

logger = logging.getLogger(__name__)

# name of the method declaring the generic type slots of a template
DECLARATION_METHOD = "generic"


@dataclass(frozen=True)
class MethodSignature(object):
    """Signature of a template method

    Attributes:
        params (tuple[str, ...]): ordered parameter names of the method
        positions (Mapping[int, int]):
            maps argument positions to type slot indices
        keywords (Mapping[str, int]):
            maps parameter names to type slot indices
    """

    params: tuple[str, ...]
    positions: Mapping[int, int]
    keywords: Mapping[str, int]

    @classmethod
    def from_params(
        cls,
        params: list[str],
        slots: tuple[str, ...],
        keyword_only: Sequence[str] = (),
    ) -> MethodSignature:
        """Match the parameters of a method against the canonical slots

        Parameters that don't match any slot are unconstrained. Duplicate
        slot names resolve to the first occurrence.

        Arguments:
            params (list[str]): ordered positional parameter names
            slots (tuple[str, ...]): canonical slot names
            keyword_only (Sequence[str]): keyword-only parameter names

        Returns:
            signature (MethodSignature): the method signature
        """
        positions = {
            i: slots.index(name)
            for i, name in enumerate(params)
            if name in slots
        }
        keywords = {params[i]: slot for i, slot in positions.items()}
        keywords.update(
            {name: slots.index(name) for name in keyword_only if name in slots}
        )
        return cls(
            params=tuple(params),
            positions=MappingProxyType(positions),
            keywords=MappingProxyType(keywords),
        )


@dataclass(frozen=True)
class SignatureMap(object):
    """Signature Map of a template class

    Attributes:
        slots (tuple[str, ...]): canonical slot names in declaration order
        methods (Mapping[str, MethodSignature]):
            signatures of all public methods of the template
    """

    slots: tuple[str, ...]
    methods: Mapping[str, MethodSignature]

    def __len__(self) -> int:
        return len(self.slots)


def build_signature_map(T: type) -> SignatureMap:
    """Build the signature map of a template class

    Arguments:
        T (type): the template class

    Returns:
        signature_map (SignatureMap): the signature map of the class
    """
    declaration = getattr(T, DECLARATION_METHOD, None)
    if declaration is None:
        raise GenericDeclarationError(
            "Template %s doesn't define the %s() method."
            % (type_name(T), DECLARATION_METHOD)
        )

    # the parameter names of the declaration method define
    # the canonical type slots
    slots = tuple(
        get_param_names(declaration, bound=is_bound(T, DECLARATION_METHOD))
    )
    if len(slots) == 0:
        raise GenericDeclarationError(
            "Invalid docstring on %s.%s() method."
            % (type_name(T), DECLARATION_METHOD)
        )
    if len(set(slots)) < len(slots):
        logger.warning(
            "Duplicate type slot names in %s.%s(): %s",
            type_name(T),
            DECLARATION_METHOD,
            ", ".join(slots),
        )

    methods = {
        name: MethodSignature.from_params(params, slots, keyword_only)
        for name, (params, keyword_only) in get_public_methods(T).items()
        if name != DECLARATION_METHOD
    }

    logger.debug(
        "Built signature map of %s with type slots (%s)",
        type_name(T),
        ", ".join(slots),
    )

    return SignatureMap(slots=slots, methods=MappingProxyType(methods))


class SignatureRegistry(object):
    """Signature Registry

    Process-wide cache of the signature maps of template classes. Each
    signature map is built exactly once, on first request.
    """

    def __init__(self):
        self.global_signature_register = dict()
        self.lock = threading.Lock()

    @property
    def signature_maps(self) -> Mapping[type, SignatureMap]:
        """Immutable view on all built signature maps"""
        return MappingProxyType(self.global_signature_register)

    def is_registered(self, T: type) -> bool:
        return T in self.global_signature_register

    def get_signature_map(self, T: type) -> SignatureMap:
        """Get the signature map of a template class, building it
        if it isn't registered yet

        Arguments:
            T (type): the template class

        Returns:
            signature_map (SignatureMap): the signature map of the class
        """
        signature_map = self.global_signature_register.get(T, None)
        if signature_map is not None:
            return signature_map

        with self.lock:
            # another thread might have built it in the meantime
            if T not in self.global_signature_register:
                self.global_signature_register[T] = build_signature_map(T)

            return self.global_signature_register[T]

    def clear(self) -> None:
        with self.lock:
            self.global_signature_register.clear()


# create default signature registry
default_registry = SignatureRegistry()
