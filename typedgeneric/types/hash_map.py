from typing import Any

from typedgeneric.generic import Generic
from typedgeneric.types import templates


class HashMap(Generic):
    """Typed Hash Map

    Arguments:
        key (Any): type of the keys of the hash map
        value (Any): type of the values of the hash map
        **kwargs (Any): forwarded to `Generic`, e.g. the `config`
    """

    def __init__(self, key: Any, value: Any, **kwargs: Any) -> None:
        super(HashMap, self).__init__(
            templates.HashMap, key, value, **kwargs
        )
