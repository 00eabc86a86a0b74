from . import base, types, utils
from .base import (
    Contract,
    GenericConfig,
    GenericDeclarationError,
    GenericError,
    TypeMismatchError,
    UnknownMethodError,
    UnsupportedTypeError,
)
from .generic import Generic
from .utils.params import generic_params
from .utils.types import classify, resolve_type

__all__ = [
    "base",
    "types",
    "utils",
    "Contract",
    "Generic",
    "GenericConfig",
    "GenericDeclarationError",
    "GenericError",
    "TypeMismatchError",
    "UnknownMethodError",
    "UnsupportedTypeError",
    "classify",
    "generic_params",
    "resolve_type",
]
