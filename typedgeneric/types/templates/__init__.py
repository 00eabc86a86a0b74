from .collection import Collection
from .hash_map import HashMap

__all__ = ["Collection", "HashMap"]
