"""Object storage access for S3-compatible services."""

from .clients import S3ClientManager
from .store import ObjectInfo, ObjectStore, S3ObjectStore

__all__ = [
    "ObjectInfo",
    "ObjectStore",
    "S3ClientManager",
    "S3ObjectStore",
]
