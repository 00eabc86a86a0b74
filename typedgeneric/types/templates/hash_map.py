from __future__ import annotations

from typing import Any

from typedgeneric.base.contract import Contract
from typedgeneric.utils.types import is_identical


class HashMap(Contract):
    """Untyped Hash Map Template"""

    def __init__(self) -> None:
        self.map = dict()

    @classmethod
    def generic(cls, *types: Any, **kwargs: Any) -> Contract:
        """Make a new typed hash map

        Arguments:
            key (Any): type of the keys of the hash map
            value (Any): type of the values of the hash map

        Returns:
            hash_map (typedgeneric.types.HashMap): typed hash map
        """
        from typedgeneric.types.hash_map import HashMap as Type

        return Type(*types, **kwargs)

    def all(self) -> dict[Any, Any]:
        """Get the untyped map"""
        return dict(self.map)

    def get(self, key: Any) -> Any:
        """Get value by key

        Arguments:
            key (Any): the key to look up

        Returns:
            value (Any): the value stored at the key
        """
        if key not in self.map:
            raise KeyError("The key %s is not set in the map." % str(key))

        return self.map[key]

    def set(self, key: Any, value: Any) -> None:
        self.map[key] = value

    def unset(self, key: Any) -> None:
        self.map.pop(key, None)

    def key(self, value: Any) -> Any:
        """Reverse lookup of the key of a value

        Arguments:
            value (Any): the value to look up

        Returns:
            key (Any): the first key at which the value is stored
        """
        for key, other in self.map.items():
            if is_identical(other, value):
                return key

        raise KeyError("The value is not set in the map.")
