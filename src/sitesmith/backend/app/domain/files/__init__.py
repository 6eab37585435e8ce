from .errors import ObjectNotFound, ObjectStoreError
from .interfaces import ObjectStore

__all__ = [
    "ObjectNotFound",
    "ObjectStore",
    "ObjectStoreError",
]
