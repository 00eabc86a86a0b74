from __future__ import annotations

from typing import Any

from typedgeneric.base.contract import Contract
from typedgeneric.utils.types import is_identical


class Collection(Contract):
    """Untyped Collection Template"""

    def __init__(self) -> None:
        self.items = []

    @classmethod
    def generic(cls, *types: Any, **kwargs: Any) -> Contract:
        """Make a new typed collection

        Arguments:
            item (Any): type of the items in the collection

        Returns:
            collection (typedgeneric.types.Collection): typed collection
        """
        from typedgeneric.types.collection import Collection as Type

        return Type(*types, **kwargs)

    def all(self) -> list[Any]:
        """Get all untyped items in the collection"""
        return list(self.items)

    def add(self, item: Any) -> None:
        self.items.append(item)

    def remove(self, item: Any) -> None:
        # remove the first strictly equal item if present
        for i, other in enumerate(self.items):
            if is_identical(other, item):
                del self.items[i]
                return
