"""S3 client management and configuration."""

from .s3_client import S3ClientManager

__all__ = ["S3ClientManager"]
