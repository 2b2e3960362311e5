"""Content-only datasource with no backing store."""

from ..errors import NotFound
from ..models import EncryptedContent
from .base import Datasource


class TextDatasource(Datasource):
    """Datasource whose content is only ever supplied by the caller.

    save() returns the encrypted content for the caller to keep; load()
    requires content to have been set first.
    """

    type = "text"

    async def fetch_content(self) -> EncryptedContent:
        raise NotFound("<text>", "Failed to load vault: content is empty")

    async def store_content(self, content: EncryptedContent) -> None:
        return None

    def supports_remote_bypass(self) -> bool:
        return True
