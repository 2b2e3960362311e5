"""File datasource: a vault stored as one file, attachments stored beside it."""

from pathlib import Path
from typing import Optional

from ..codec import ContentCodec
from ..config import DatasourceSettings, get_settings
from ..credentials import Credentials, resolve_datasource_config
from ..errors import CredentialsError
from ..logging import get_logger
from ..models import AttachmentDetails, EncryptedContent
from ..paths import attachment_filename, attachment_path, attachments_dir, validate_identifier
from ..storage import FileStorage, LocalFileStorage
from ..tools.attachments import decrypt_attachment, encrypt_attachment
from .base import Datasource

logger = get_logger("datasource")
attachments_logger = get_logger("attachments")


class FileDatasource(Datasource):
    """
    Datasource for loading and saving vault files.

    The vault body lives at the credentials' datasource path. Attachments live
    under <base_dir>/.buttercup/<vault_id>/, one file each. No file handle is
    held between calls.
    """

    type = "file"

    def __init__(
        self,
        credentials: Credentials,
        storage: Optional[FileStorage] = None,
        codec: Optional[ContentCodec] = None,
        settings: Optional[DatasourceSettings] = None,
    ):
        super().__init__(credentials, codec=codec)
        config = resolve_datasource_config(credentials)
        if not config.path:
            raise CredentialsError(f"File datasource requires a path (credentials {credentials.id})")
        self.settings = settings or get_settings()
        self._filename = config.path
        self.storage: FileStorage = storage or LocalFileStorage(atomic=self.settings.atomic_writes)
        logger.debug(f"File datasource created for {self._filename}")

    @property
    def path(self) -> str:
        """The vault file path."""
        return self._filename

    @property
    def base_dir(self) -> Path:
        return Path(self._filename).parent

    def _attachments_dir(self, vault_id: str) -> Path:
        if self.settings.validate_ids:
            validate_identifier(vault_id, "vault ID")
        return attachments_dir(self.base_dir, vault_id)

    def _attachment_path(self, vault_id: str, attachment_id: str) -> Path:
        directory = self._attachments_dir(vault_id)
        if self.settings.validate_ids:
            validate_identifier(attachment_id, "attachment ID")
        return attachment_path(directory, attachment_id)

    async def _ensure_attachments_paths(self, vault_id: str) -> None:
        """Ensure the vault's attachment directory exists."""
        await self.storage.make_dirs(self._attachments_dir(vault_id))

    async def fetch_content(self) -> EncryptedContent:
        logger.debug(f"Reading vault file {self.path}")
        return await self.storage.read_text(Path(self.path))

    async def store_content(self, content: EncryptedContent) -> None:
        logger.debug(f"Writing vault file {self.path}")
        await self.storage.write_text(Path(self.path), content)

    async def get_attachment(
        self, vault_id: str, attachment_id: str, credentials: Optional[Credentials] = None
    ) -> bytes:
        """
        Get attachment buffer.

        Args:
            vault_id: The ID of the vault
            attachment_id: The ID of the attachment
            credentials: Credentials to decrypt the buffer with. Without them
                the stored (encrypted) bytes are returned as-is.
        """
        file_path = self._attachment_path(vault_id, attachment_id)
        await self._ensure_attachments_paths(vault_id)
        data = await self.storage.read_bytes(file_path)
        attachments_logger.debug(
            f"Read attachment ({len(data)} bytes)",
            extra={"vault_id": vault_id, "attachment_id": attachment_id},
        )
        return await decrypt_attachment(data, credentials) if credentials else data

    async def get_attachment_details(self, vault_id: str, attachment_id: str) -> AttachmentDetails:
        """Describe a stored attachment without reading its contents."""
        file_path = self._attachment_path(vault_id, attachment_id)
        await self._ensure_attachments_paths(vault_id)
        file_stat = await self.storage.stat(file_path)
        return AttachmentDetails(
            id=attachment_id,
            vault_id=vault_id,
            name=attachment_filename(attachment_id),
            filename=str(file_path),
            size=file_stat.size,
            mime=None,
        )

    async def put_attachment(
        self, vault_id: str, attachment_id: str, buffer: bytes, credentials: Optional[Credentials] = None
    ) -> None:
        """
        Put attachment data, replacing any existing file.

        Args:
            vault_id: The ID of the vault
            attachment_id: The ID of the attachment
            buffer: The attachment data
            credentials: Credentials for encrypting the buffer. If not
                provided, the buffer is presumed to be in encrypted form and
                is written as-is.
        """
        file_path = self._attachment_path(vault_id, attachment_id)
        await self._ensure_attachments_paths(vault_id)
        data = await encrypt_attachment(buffer, credentials) if credentials else bytes(buffer)
        await self.storage.write_bytes(file_path, data)
        attachments_logger.info(
            f"Attachment written ({len(data)} bytes)",
            extra={"vault_id": vault_id, "attachment_id": attachment_id},
        )

    async def remove_attachment(self, vault_id: str, attachment_id: str) -> None:
        """Remove an attachment. Removing a missing attachment raises NotFound."""
        file_path = self._attachment_path(vault_id, attachment_id)
        await self._ensure_attachments_paths(vault_id)
        await self.storage.delete(file_path)
        attachments_logger.info(
            "Attachment removed",
            extra={"vault_id": vault_id, "attachment_id": attachment_id},
        )

    def supports_attachments(self) -> bool:
        return True

    def supports_remote_bypass(self) -> bool:
        return True
