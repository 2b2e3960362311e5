"""FileStorage protocol for datasource backing stores."""

from pathlib import Path
from typing import Protocol

from ..models import StatResult


class FileStorage(Protocol):
    """Path-addressed byte storage (local filesystem, in-memory fake).

    Implementations raise NotFound when the target path does not exist and
    StorageFault for every other failure.
    """

    async def make_dirs(self, path: Path) -> None:
        """Create a directory and its parents. Succeeds if it already exists."""
        ...

    async def read_bytes(self, path: Path) -> bytes:
        ...

    async def read_text(self, path: Path) -> str:
        """Read as UTF-8, replacing invalid bytes."""
        ...

    async def write_bytes(self, path: Path, data: bytes) -> None:
        """Replace the whole file content."""
        ...

    async def write_text(self, path: Path, text: str) -> None:
        """Replace the whole file content."""
        ...

    async def stat(self, path: Path) -> StatResult:
        ...

    async def delete(self, path: Path) -> None:
        """Delete a file. Missing files raise NotFound."""
        ...
