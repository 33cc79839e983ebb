"""Bucket-scoped object store used by the CLI operations.

Operations depend on the small ObjectStore protocol rather than on boto3
directly, so pagination (the boto3 paginator) and deletion polling (the
object_not_exists waiter) stay opaque SDK capabilities
and tests can substitute an in-memory store.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import BinaryIO, Iterator, Protocol

from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import BotoCoreError, ClientError, WaiterError

from s3_client.core import get_logger
from s3_client.core.exceptions import (
    DeleteError,
    ListError,
    RemoteAPIError,
    UploadError,
    WaitTimeoutError,
)

logger = get_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_NOT_FOUND_CODES = {"404", "NoSuchKey", "NotFound"}


@dataclass(frozen=True)
class ObjectInfo:
    """A single object returned by a bucket listing."""

    key: str
    size: int
    last_modified: datetime

    def format(self) -> str:
        """Render the object as a listing line."""
        return (
            f"- {self.key} (Size: {self.size} bytes, "
            f"Last modified: {self.last_modified.strftime(TIMESTAMP_FORMAT)})"
        )


class ObjectStore(Protocol):
    """Protocol for the remote calls the operations need."""

    bucket: str

    def exists(self, key: str) -> bool:
        """Return True if an object is stored under key."""
        ...

    def put(self, key: str, body: BinaryIO) -> None:
        """Stream body to key, replacing any existing object."""
        ...

    def list_pages(self) -> Iterator[list[ObjectInfo]]:
        """Yield the bucket's objects one result page at a time."""
        ...

    def delete(self, key: str) -> None:
        """Delete the object stored under key."""
        ...

    def wait_absent(self, key: str) -> None:
        """Block until key is confirmed absent."""
        ...


class S3ObjectStore:
    """ObjectStore backed by a boto3 S3 client and a single bucket."""

    def __init__(
        self,
        client,
        bucket: str,
        page_size: int = 1000,
        wait_delay: int = 5,
        wait_max_attempts: int = 20,
    ):
        self.client = client
        self.bucket = bucket
        self.page_size = page_size
        self.wait_delay = wait_delay
        self.wait_max_attempts = wait_max_attempts

    def exists(self, key: str) -> bool:
        try:
            self.client.head_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            code = str(e.response.get("Error", {}).get("Code", ""))
            if code in _NOT_FOUND_CODES:
                logger.debug("Object not found", bucket=self.bucket, key=key)
                return False
            error_msg = f"Error checking whether '{key}' exists: {e}"
            logger.error(error_msg, bucket=self.bucket, key=key)
            raise RemoteAPIError(error_msg)
        except BotoCoreError as e:
            error_msg = f"Error checking whether '{key}' exists: {e}"
            logger.error(error_msg, bucket=self.bucket, key=key)
            raise RemoteAPIError(error_msg)

        logger.debug("Object exists", bucket=self.bucket, key=key)
        return True

    def put(self, key: str, body: BinaryIO) -> None:
        try:
            # Managed transfer switches to multipart for large files
            self.client.upload_fileobj(body, self.bucket, key)
        except (S3UploadFailedError, ClientError, BotoCoreError) as e:
            error_msg = f"Error uploading file to S3: {e}"
            logger.error(error_msg, bucket=self.bucket, key=key)
            raise UploadError(error_msg)

        logger.info("Object uploaded", bucket=self.bucket, key=key)

    def list_pages(self) -> Iterator[list[ObjectInfo]]:
        paginator = self.client.get_paginator("list_objects_v2")
        page_iterator = paginator.paginate(
            Bucket=self.bucket, PaginationConfig={"PageSize": self.page_size}
        )

        try:
            for page in page_iterator:
                items = [
                    ObjectInfo(
                        key=obj["Key"],
                        size=obj.get("Size", 0),
                        last_modified=obj["LastModified"],
                    )
                    for obj in page.get("Contents", [])
                ]
                logger.debug(
                    "Listing page retrieved", bucket=self.bucket, item_count=len(items)
                )
                yield items
        except (ClientError, BotoCoreError) as e:
            # PaginationError (a repeated continuation token) lands here too
            error_msg = f"Error listing files: {e}"
            logger.error(error_msg, bucket=self.bucket)
            raise ListError(error_msg)

    def delete(self, key: str) -> None:
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            error_msg = f"Error deleting file: {e}"
            logger.error(error_msg, bucket=self.bucket, key=key)
            raise DeleteError(error_msg)

        logger.info("Delete requested", bucket=self.bucket, key=key)

    def wait_absent(self, key: str) -> None:
        waiter = self.client.get_waiter("object_not_exists")
        try:
            waiter.wait(
                Bucket=self.bucket,
                Key=key,
                WaiterConfig={
                    "Delay": self.wait_delay,
                    "MaxAttempts": self.wait_max_attempts,
                },
            )
        except WaiterError as e:
            error_msg = f"Error waiting for file deletion: {e}"
            logger.error(error_msg, bucket=self.bucket, key=key)
            raise WaitTimeoutError(error_msg)
        except BotoCoreError as e:
            error_msg = f"Error waiting for file deletion: {e}"
            logger.error(error_msg, bucket=self.bucket, key=key)
            raise RemoteAPIError(error_msg)

        logger.info("Object confirmed absent", bucket=self.bucket, key=key)
