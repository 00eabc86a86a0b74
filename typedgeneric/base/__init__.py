from .config import ENV_VARIABLE, GenericConfig
from .contract import Contract
from .errors import (
    GenericDeclarationError,
    GenericError,
    TypeMismatchError,
    UnknownMethodError,
    UnsupportedTypeError,
)
from .registry import (
    DECLARATION_METHOD,
    MethodSignature,
    SignatureMap,
    SignatureRegistry,
    build_signature_map,
    default_registry,
)
