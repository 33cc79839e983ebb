"""Test configuration and fixtures for s3-client."""

from datetime import datetime

import pytest

from s3_client.core.observability import setup_logging
from s3_client.objectstorage.store import ObjectInfo


class FakeStore:
    """In-memory ObjectStore that records every call."""

    def __init__(self, bucket="test", page_size=2):
        self.bucket = bucket
        self.page_size = page_size
        self.objects = {}
        self.calls = []

    def exists(self, key):
        self.calls.append(("exists", key))
        return key in self.objects

    def put(self, key, body):
        self.calls.append(("put", key))
        self.objects[key] = body.read()

    def list_pages(self):
        keys = sorted(self.objects)
        for start in range(0, max(len(keys), 1), self.page_size):
            self.calls.append(("list_pages", start))
            yield [
                ObjectInfo(
                    key=key,
                    size=len(self.objects[key]),
                    last_modified=datetime(2024, 1, 2, 3, 4, 5),
                )
                for key in keys[start : start + self.page_size]
            ]

    def delete(self, key):
        self.calls.append(("delete", key))
        self.objects.pop(key, None)

    def wait_absent(self, key):
        self.calls.append(("wait_absent", key))

    def remote_calls(self, name):
        return [call for call in self.calls if call[0] == name]


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch, tmp_path):
    """Keep boto3 away from real credentials and profiles."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "aws_config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "aws_credentials"))


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the default logging setup after tests that enable -v."""
    yield
    setup_logging()


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def fake_store():
    """Create an empty in-memory object store."""
    return FakeStore()


@pytest.fixture
def photo_file(temp_dir):
    """Create a local file to upload."""
    path = temp_dir / "photo.png"
    path.write_bytes(b"\x89PNG fake image data")
    return path


@pytest.fixture
def config_file(temp_dir):
    """Create a client config file pointing at the mocked bucket."""
    path = temp_dir / "s3config.toml"
    path.write_text(
        'aws_access_key_id = "testing"\n'
        'aws_secret_access_key = "testing"\n'
        'region = "us-east-1"\n'
        'bucket = "test"\n'
        'returnurl = "https://cdn.example.com"\n'
    )
    return path
