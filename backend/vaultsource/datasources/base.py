"""
Datasource base: cached-content state machine and capability defaults.

The codec is composed in rather than inherited, so persistence logic does
not change when the content format does.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..codec import ContentCodec, TextCodec
from ..credentials import Credentials
from ..errors import UnsupportedOperation
from ..logging import get_logger
from ..models import AttachmentDetails, ContentState, EncryptedContent, History, LoadedContent

logger = get_logger("datasource")


class Datasource(ABC):
    """Base class for vault datasources.

    Subclasses implement fetch_content() and store_content() for their
    backing store; load() and save() drive them.

    Load state is UNLOADED until content is either injected with
    set_content() (BYPASS) or fetched from the backing store (READ). Once
    content is cached, load() never fetches again until clear_content().
    """

    type = "datasource"

    def __init__(self, credentials: Credentials, codec: Optional[ContentCodec] = None):
        self.credentials = credentials
        self.codec: ContentCodec = codec or TextCodec()
        self._loaded: Optional[LoadedContent] = None

    @property
    def content_state(self) -> ContentState:
        return self._loaded.state if self._loaded else ContentState.UNLOADED

    @property
    def has_content(self) -> bool:
        return self._loaded is not None

    @property
    def content(self) -> Optional[EncryptedContent]:
        return self._loaded.content if self._loaded else None

    def set_content(self, content: EncryptedContent) -> "Datasource":
        """Inject encrypted content so the next load() skips the backing store."""
        self._loaded = LoadedContent(content=content, state=ContentState.BYPASS)
        logger.info(f"{self.type}: content set for remote bypass")
        return self

    def clear_content(self) -> None:
        """Drop cached content so the next load() reads the backing store again."""
        self._loaded = None

    @abstractmethod
    async def fetch_content(self) -> EncryptedContent:
        """Read encrypted content from the backing store."""

    @abstractmethod
    async def store_content(self, content: EncryptedContent) -> None:
        """Write encrypted content to the backing store."""

    async def load(self, credentials: Credentials) -> History:
        """
        Load vault history.

        Reads the backing store at most once per cached content; decoding
        failures leave the cache untouched.
        """
        if self._loaded is None:
            content = await self.fetch_content()
            self._loaded = LoadedContent(content=content, state=ContentState.READ)
            logger.info(f"{self.type}: content read from storage and cached")
        else:
            logger.debug(f"{self.type}: using cached content ({self._loaded.state.value})")
        return await self.codec.decrypt_and_deserialize(self._loaded.content, credentials)

    async def save(self, history: History, credentials: Credentials) -> EncryptedContent:
        """Encode history and write it. Nothing is written if encoding fails."""
        content = await self.codec.serialize_and_encrypt(history, credentials)
        await self.store_content(content)
        # The store now holds exactly this content
        self._loaded = LoadedContent(content=content, state=ContentState.READ)
        logger.info(f"{self.type}: vault saved")
        return content

    def supports_attachments(self) -> bool:
        return False

    def supports_remote_bypass(self) -> bool:
        return False

    async def get_attachment(
        self, vault_id: str, attachment_id: str, credentials: Optional[Credentials] = None
    ) -> bytes:
        raise UnsupportedOperation(f"Attachments not supported by '{self.type}' datasource")

    async def get_attachment_details(self, vault_id: str, attachment_id: str) -> AttachmentDetails:
        raise UnsupportedOperation(f"Attachments not supported by '{self.type}' datasource")

    async def put_attachment(
        self, vault_id: str, attachment_id: str, buffer: bytes, credentials: Optional[Credentials] = None
    ) -> None:
        raise UnsupportedOperation(f"Attachments not supported by '{self.type}' datasource")

    async def remove_attachment(self, vault_id: str, attachment_id: str) -> None:
        raise UnsupportedOperation(f"Attachments not supported by '{self.type}' datasource")
