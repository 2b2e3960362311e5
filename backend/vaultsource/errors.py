"""Fault taxonomy for datasource operations.

Every failure surfaced by a datasource is one of these. Storage adapters and
codecs translate the low-level exception (OSError, InvalidTag, ...) and chain
it, so callers can tell "can't reach the data" from "reached it but it's
unusable" without inspecting library-specific types.
"""


class DatasourceError(Exception):
    """Base class for all datasource failures."""


class NotFound(DatasourceError):
    """A stat/read/delete targeted a path that does not exist."""

    def __init__(self, path: str, message: str = ""):
        self.path = path
        super().__init__(message or f"Not found: {path}")


class StorageFault(DatasourceError):
    """Directory creation, read, write or delete failed for a reason other than absence."""

    def __init__(self, path: str, message: str = ""):
        self.path = path
        super().__init__(message or f"Storage failure: {path}")


class DecodeFault(DatasourceError):
    """Decryption or deserialization failed (wrong key, corrupt data, bad format)."""


class EncodeFault(DatasourceError):
    """Serialization or encryption failed. Raised before any write is attempted."""


class InvalidIdentifier(DatasourceError, ValueError):
    """A vault or attachment ID cannot be used as a single path segment."""


class CredentialsError(DatasourceError):
    """A credentials handle is unknown, disposed, or lacks required configuration."""


class UnsupportedOperation(DatasourceError):
    """The datasource does not implement the requested capability."""
