"""Root pytest configuration for s3-path tests."""
import logging

import pytest

from s3_path import S3PathBuf
from s3_path.settings import Settings


# Keep the developer's environment out of settings-driven tests
@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Automatically clear s3-path environment variables."""
    for name in ("S3PATH_KEY_PREFIX", "S3PATH_LOCAL_ROOT", "S3PATH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


# Standardized test fixtures
@pytest.fixture
def settings():
    """Standard test settings (no prefix, no local root)."""
    return Settings()


@pytest.fixture
def foo_bar():
    """Owned path 'foo/bar'."""
    return S3PathBuf(["foo", "bar"])


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo logging.basicConfig() calls made by CLI invocations."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
