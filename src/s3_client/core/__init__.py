"""Core utilities and shared components for s3-client."""

from .config import settings
from .exceptions import S3ClientError
from .observability import get_logger, get_tracer

__all__ = ["settings", "S3ClientError", "get_logger", "get_tracer"]
