"""A command-line client for S3-compatible object storage.

Uploads local files to a bucket and prints their public URL, lists the
bucket contents and deletes objects, waiting until the store confirms the
deletion. Connection settings come from a small TOML file.

Library usage:

    >>> from s3_client import (
    ...     S3ClientManager, S3ObjectStore, load_settings, upload_file
    ... )
    >>> settings = load_settings("s3config.toml")
    >>> manager = S3ClientManager(settings)
    >>> store = S3ObjectStore(manager.client, settings.bucket)
    >>> url = upload_file(store, settings, "photo.png", directory="pics")
"""

__version__ = "0.1.0"

from .config_loader import ClientSettings, load_settings, resolve_config_path
from .objectstorage import ObjectInfo, ObjectStore, S3ClientManager, S3ObjectStore
from .operations import (
    build_url,
    delete_object,
    list_objects,
    object_key,
    upload_file,
)

__all__ = [
    # Configuration
    "ClientSettings",
    "load_settings",
    "resolve_config_path",
    # Object storage
    "ObjectInfo",
    "ObjectStore",
    "S3ClientManager",
    "S3ObjectStore",
    # Operations
    "build_url",
    "delete_object",
    "list_objects",
    "object_key",
    "upload_file",
]
