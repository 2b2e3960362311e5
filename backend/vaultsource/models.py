"""Value types exchanged by datasources."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


# Opaque vault content, owned by the content codec
History = Any
EncryptedContent = str


@dataclass(frozen=True)
class StatResult:
    """Result of a storage stat call."""
    size: int


@dataclass(frozen=True)
class AttachmentDetails:
    """Describes a stored attachment. Derived from a stat, never persisted."""
    id: str
    vault_id: str
    name: str
    filename: str
    size: int
    mime: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "vaultID": self.vault_id,
            "name": self.name,
            "filename": self.filename,
            "size": self.size,
            "mime": self.mime,
        }


class ContentState(str, Enum):
    """Where a datasource's cached vault content came from."""
    UNLOADED = "unloaded"    # Nothing cached yet
    BYPASS = "bypass"        # Injected by the caller, storage never read
    READ = "read"            # Mirrors what the backing store holds


@dataclass(frozen=True)
class LoadedContent:
    """Cached encrypted vault content and its origin."""
    content: EncryptedContent
    state: ContentState
