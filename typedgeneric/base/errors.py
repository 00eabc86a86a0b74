class GenericError(Exception):
    """Base class of all errors raised by typed generics"""


class GenericDeclarationError(GenericError, TypeError):
    """Raised when a template doesn't declare its generic type slots,
    or when a generic is declared with the wrong number of types
    """


class UnsupportedTypeError(GenericError, TypeError):
    """Raised when a value cannot be classified"""


class TypeMismatchError(GenericError, TypeError):
    """Raised when an argument doesn't match the declared slot type

    Arguments:
        expected (str): type identifier declared for the slot
        actual (str): type identifier of the supplied argument
    """

    def __init__(self, expected: str, actual: str) -> None:
        super(TypeMismatchError, self).__init__(
            "Expecting %s type argument but received %s instead."
            % (expected, actual)
        )
        self.expected = expected
        self.actual = actual


class UnknownMethodError(GenericError, AttributeError):
    """Raised when a call cannot be forwarded to the template"""
