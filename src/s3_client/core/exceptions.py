"""Exception hierarchy for s3-client."""


class S3ClientError(Exception):
    """Base exception for all s3-client errors."""

    pass


class ConfigNotFound(S3ClientError):
    """Raised when no configuration file can be located."""

    pass


class ConfigParseError(S3ClientError):
    """Raised when the configuration file is malformed or incomplete."""

    pass


class AuthConfigurationError(S3ClientError):
    """Raised when the SDK rejects the region, credentials or profile."""

    pass


class FileNotFound(S3ClientError):
    """Raised when the local file to upload does not exist."""

    pass


class RemoteAPIError(S3ClientError):
    """Raised when a request to the object store fails."""

    pass


class UploadError(RemoteAPIError):
    """Raised when writing an object fails."""

    pass


class ListError(RemoteAPIError):
    """Raised when a listing page cannot be retrieved."""

    pass


class DeleteError(RemoteAPIError):
    """Raised when deleting an object fails."""

    pass


class WaitTimeoutError(S3ClientError):
    """Raised when an object is not confirmed absent after deletion."""

    pass


class UploadCancelled(S3ClientError):
    """Raised when the user declines to overwrite an existing object."""

    pass
