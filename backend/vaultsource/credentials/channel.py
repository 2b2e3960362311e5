"""
Credentials channel - holds decrypted credential data in memory.

Handles only carry an ID. The secrets they stand for live here, keyed by that
ID, until the handle is disposed.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..errors import CredentialsError

if TYPE_CHECKING:
    from .credentials import CredentialsData


@dataclass
class CredentialsChannel:
    """Maps credentials IDs to their decrypted data."""

    _entries: dict[str, "CredentialsData"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._entries)

    def has(self, credentials_id: str) -> bool:
        """Check if data is registered for an ID."""
        return credentials_id in self._entries

    def get(self, credentials_id: str) -> "CredentialsData":
        """Get the data for an ID. Raises if the handle is unknown or disposed."""
        data = self._entries.get(credentials_id)
        if data is None:
            raise CredentialsError(f"Credentials not found or disposed: {credentials_id}")
        return data

    def set(self, credentials_id: str, data: "CredentialsData") -> None:
        """Register (or replace) the data for an ID."""
        self._entries[credentials_id] = data

    def remove(self, credentials_id: str) -> None:
        """Forget the data for an ID. No-op if it was never registered."""
        self._entries.pop(credentials_id, None)

    def clear(self) -> None:
        """Forget every registered credential."""
        self._entries.clear()


# Global singleton - the credentials channel for this process
credentials_channel = CredentialsChannel()
