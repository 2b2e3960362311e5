"""
Shared test fixtures for the vaultsource test suite.

Key derivation is lowered to a handful of rounds so encryption-heavy tests
stay fast; every test gets a clean settings cache and credentials channel.
"""

import pytest

from vaultsource.config import reset_settings
from vaultsource.credentials import Credentials, credentials_channel
from vaultsource.datasources import FileDatasource
from vaultsource.storage import MemoryFileStorage

VAULT_PATH = "/data/vault.bcup"
PASSWORD = "correct horse battery staple"


@pytest.fixture(autouse=True)
def fast_settings(monkeypatch):
    """Isolate settings from the host environment and keep PBKDF2 cheap."""
    for name in ("BCUP_ATOMIC_WRITES", "BCUP_VALIDATE_IDS", "BCUP_LOG_DIR", "BCUP_PASSWORD"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("BCUP_PBKDF2_ITERATIONS", "1000")
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def clean_channel():
    """Forget every credential registered during a test."""
    yield
    credentials_channel.clear()


@pytest.fixture
def credentials():
    """Credentials for a file vault at /data/vault.bcup."""
    return Credentials.from_datasource({"type": "file", "path": VAULT_PATH}, PASSWORD)


@pytest.fixture
def other_credentials():
    """Credentials for the same vault path but a different password."""
    return Credentials.from_datasource({"type": "file", "path": VAULT_PATH}, "a different password")


@pytest.fixture
def storage():
    """In-memory storage with the vault's parent directory present."""
    return MemoryFileStorage(dirs=["/data"])


@pytest.fixture
def datasource(credentials, storage):
    """File datasource over in-memory storage."""
    return FileDatasource(credentials, storage=storage)


@pytest.fixture
def local_credentials(tmp_path):
    """Credentials for a file vault in a real temp directory."""
    return Credentials.from_datasource({"type": "file", "path": str(tmp_path / "vault.bcup")}, PASSWORD)
