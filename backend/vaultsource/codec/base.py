"""ContentCodec protocol for vault content encoders."""

from typing import Protocol

from ..credentials import Credentials
from ..models import EncryptedContent, History


class ContentCodec(Protocol):
    """Converts vault history to and from its encrypted string form."""

    async def serialize_and_encrypt(self, history: History, credentials: Credentials) -> EncryptedContent:
        """Encode history. Raises EncodeFault on failure."""
        ...

    async def decrypt_and_deserialize(self, content: EncryptedContent, credentials: Credentials) -> History:
        """Decode content. Raises DecodeFault on failure."""
        ...
