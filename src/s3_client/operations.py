"""Upload, list and delete operations.

Each operation wraps one remote call on an ObjectStore plus a thin policy:
overwrite confirmation and URL construction for uploads, page walking for
listings, and confirmed absence for deletes.
"""

import posixpath
from pathlib import Path
from typing import Callable, Iterator, Optional

from s3_client.config_loader import ClientSettings
from s3_client.core import get_logger, get_tracer
from s3_client.core.exceptions import FileNotFound, UploadCancelled
from s3_client.objectstorage.store import ObjectInfo, ObjectStore

logger = get_logger(__name__)
tracer = get_tracer(__name__)

OVERWRITE_PROMPT = "The file already exists. Overwrite? [y/n]"

Confirm = Callable[[str], bool]


def _decline(prompt: str) -> bool:
    return False


def object_key(file_path: str, directory: Optional[str] = None) -> str:
    """Build the object key for a local file.

    The key is the file's base name, placed under ``directory`` when one is
    given. Backslashes are treated as separators and the result never starts
    with a slash.

    Examples:
        >>> object_key("photo.png", "/pics/")
        'pics/photo.png'
        >>> object_key("C:\\\\tmp\\\\photo.png", "pics\\\\2024")
        'pics/2024/photo.png'
    """
    name = file_path.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]

    prefix = ""
    if directory:
        prefix = directory.replace("\\", "/").strip("/")

    key = posixpath.join(prefix, name) if prefix else name
    return posixpath.normpath(key).lstrip("/")


def build_url(return_url: str, key: str) -> str:
    """Join the public URL prefix and an object key."""
    return f"{return_url.rstrip('/')}/{key.lstrip('/')}"


def upload_file(
    store: ObjectStore,
    settings: ClientSettings,
    file_path: str,
    directory: Optional[str] = None,
    overwrite: bool = False,
    confirm: Optional[Confirm] = None,
) -> str:
    """Upload a local file and return its public URL.

    Args:
        store: Object store bound to the configured bucket
        settings: Client settings, used for the return URL
        file_path: Local file to upload
        directory: Optional key prefix to upload under
        overwrite: Replace an existing object without asking
        confirm: Called with a prompt when the object already exists;
            returns True to overwrite. Declines when not given.

    Returns:
        Public URL of the uploaded object

    Raises:
        FileNotFound: If the local file does not exist
        UploadCancelled: If overwriting was declined
        RemoteAPIError: If the existence check or the upload fails
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFound(f"File does not exist: {file_path}")

    key = object_key(file_path, directory)

    with tracer.start_as_current_span("s3_client.upload") as span:
        span.set_attribute("s3.bucket", store.bucket)
        span.set_attribute("s3.key", key)

        if not overwrite and store.exists(key):
            ask = confirm or _decline
            if not ask(OVERWRITE_PROMPT):
                logger.info("Upload cancelled", key=key)
                raise UploadCancelled("Upload cancelled.")

        with path.open("rb") as body:
            store.put(key, body)

    url = build_url(settings.return_url, key)
    logger.info("File uploaded", file=file_path, key=key, url=url)
    return url


def list_objects(store: ObjectStore) -> Iterator[ObjectInfo]:
    """Yield every object in the bucket, walking all result pages.

    Raises:
        ListError: If a page cannot be retrieved; objects from earlier
            pages have already been yielded by then.
    """
    with tracer.start_as_current_span("s3_client.list") as span:
        span.set_attribute("s3.bucket", store.bucket)

        count = 0
        for items in store.list_pages():
            for item in items:
                count += 1
                yield item

        logger.info("Bucket listed", bucket=store.bucket, object_count=count)


def delete_object(store: ObjectStore, key: str) -> str:
    """Delete an object and wait until it is confirmed absent.

    Returns:
        The normalized key that was deleted

    Raises:
        DeleteError: If the delete request fails
        WaitTimeoutError: If the object is not confirmed absent in time
    """
    key = key.lstrip("/")

    with tracer.start_as_current_span("s3_client.delete") as span:
        span.set_attribute("s3.bucket", store.bucket)
        span.set_attribute("s3.key", key)

        store.delete(key)
        store.wait_absent(key)

    logger.info("File deleted", bucket=store.bucket, key=key)
    return key
