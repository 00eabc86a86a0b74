from . import templates
from .collection import Collection
from .hash_map import HashMap

__all__ = ["templates", "Collection", "HashMap"]
