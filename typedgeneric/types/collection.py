from typing import Any

from typedgeneric.generic import Generic
from typedgeneric.types import templates


class Collection(Generic):
    """Typed Collection

    Arguments:
        item (Any): type of the items in the collection
        **kwargs (Any): forwarded to `Generic`, e.g. the `config`
    """

    def __init__(self, item: Any, **kwargs: Any) -> None:
        super(Collection, self).__init__(templates.Collection, item, **kwargs)
