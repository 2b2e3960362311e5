"""Local filesystem storage."""

import asyncio
import os
import tempfile
from pathlib import Path

from ..errors import NotFound, StorageFault
from ..logging import get_logger
from ..models import StatResult

logger = get_logger("storage")


def _translate(path: Path, exc: OSError) -> Exception:
    """Map an OSError onto the datasource fault taxonomy."""
    if isinstance(exc, FileNotFoundError):
        return NotFound(str(path), f"Not found: {path}")
    return StorageFault(str(path), f"Storage failure on {path}: {exc.strerror or exc}")


class LocalFileStorage:
    """
    FileStorage backed by the local filesystem.

    Blocking calls run in a worker thread so the event loop only suspends at
    I/O boundaries. Every call opens and closes its own file handle.

    With atomic=True writes go to a temp file in the target directory which
    then replaces the target, so a crash leaves either the old or the new
    content. The default is a direct overwrite.
    """

    def __init__(self, atomic: bool = False):
        self.atomic = atomic

    async def make_dirs(self, path: Path) -> None:
        path = Path(path)
        try:
            await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise _translate(path, exc) from exc

    async def read_bytes(self, path: Path) -> bytes:
        path = Path(path)
        try:
            data = await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            raise _translate(path, exc) from exc
        logger.debug(f"Read {len(data)} bytes from {path}")
        return data

    async def read_text(self, path: Path) -> str:
        path = Path(path)
        try:
            # Invalid UTF-8 is replaced; the codec reports unusable content
            text = await asyncio.to_thread(path.read_text, encoding="utf-8", errors="replace")
        except OSError as exc:
            raise _translate(path, exc) from exc
        logger.debug(f"Read {len(text)} chars from {path}")
        return text

    async def write_bytes(self, path: Path, data: bytes) -> None:
        path = Path(path)
        try:
            await asyncio.to_thread(self._write, path, bytes(data))
        except OSError as exc:
            raise _translate(path, exc) from exc
        logger.debug(f"Wrote {len(data)} bytes to {path}")

    async def write_text(self, path: Path, text: str) -> None:
        await self.write_bytes(path, text.encode("utf-8"))

    async def stat(self, path: Path) -> StatResult:
        path = Path(path)
        try:
            result = await asyncio.to_thread(path.stat)
        except OSError as exc:
            raise _translate(path, exc) from exc
        return StatResult(size=result.st_size)

    async def delete(self, path: Path) -> None:
        path = Path(path)
        try:
            await asyncio.to_thread(path.unlink)
        except OSError as exc:
            raise _translate(path, exc) from exc
        logger.debug(f"Deleted {path}")

    def _write(self, path: Path, data: bytes) -> None:
        if not self.atomic:
            path.write_bytes(data)
            return

        # Atomic write: temp file + fsync + rename
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=f".{path.name}.tmp",
            delete=False,
        ) as tmp_file:
            tmp_file.write(data)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())
            tmp_path = Path(tmp_file.name)

        try:
            os.replace(tmp_path, path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
