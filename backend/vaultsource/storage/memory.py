"""In-memory storage with the same fault semantics as the local filesystem."""

from pathlib import PurePosixPath

from ..errors import NotFound, StorageFault
from ..models import StatResult


class MemoryFileStorage:
    """
    FileStorage kept in a dict, for tests and ephemeral vaults.

    Directories are tracked explicitly so that writes into a missing directory
    and mkdir over an existing file fail the way a real filesystem would.
    Paths are normalised to POSIX form.
    """

    def __init__(self, dirs=()):
        self.files: dict[str, bytes] = {}
        self.dirs: set[str] = {"/", "."}
        self.dirs.update(self._key(d) for d in dirs)
        self.read_count = 0
        self.write_count = 0

    @staticmethod
    def _key(path) -> str:
        return str(PurePosixPath(str(path)))

    @staticmethod
    def _parent(key: str) -> str:
        return str(PurePosixPath(key).parent)

    async def make_dirs(self, path) -> None:
        key = self._key(path)
        missing = []
        current = PurePosixPath(key)
        while str(current) not in self.dirs:
            if str(current) in self.files:
                raise StorageFault(key, f"Cannot create directory {key}: {current} is a file")
            missing.append(str(current))
            if current.parent == current:
                break
            current = current.parent
        self.dirs.update(missing)

    async def read_bytes(self, path) -> bytes:
        key = self._key(path)
        if key in self.dirs:
            raise StorageFault(key, f"Is a directory: {key}")
        if key not in self.files:
            raise NotFound(key)
        self.read_count += 1
        return self.files[key]

    async def read_text(self, path) -> str:
        data = await self.read_bytes(path)
        return data.decode("utf-8", errors="replace")

    async def write_bytes(self, path, data: bytes) -> None:
        key = self._key(path)
        if key in self.dirs:
            raise StorageFault(key, f"Is a directory: {key}")
        if self._parent(key) not in self.dirs:
            raise NotFound(key, f"Parent directory does not exist: {key}")
        self.write_count += 1
        self.files[key] = bytes(data)

    async def write_text(self, path, text: str) -> None:
        await self.write_bytes(path, text.encode("utf-8"))

    async def stat(self, path) -> StatResult:
        key = self._key(path)
        if key not in self.files:
            raise NotFound(key)
        return StatResult(size=len(self.files[key]))

    async def delete(self, path) -> None:
        key = self._key(path)
        if key not in self.files:
            raise NotFound(key)
        del self.files[key]
