"""
Text content codec.

History is serialized as JSON, sealed with the master password, and stored as
a signed base64 string:

    b~>buttercup/a<base64 sealed blob>
"""

import asyncio
import base64
import binascii
import json
import struct
from typing import Optional

from ..config import get_settings
from ..credentials import Credentials, get_master_password
from ..errors import DecodeFault, EncodeFault
from ..logging import get_logger
from ..models import EncryptedContent, History
from ..vault.crypto import CryptoError, seal, unseal

SIGNATURE = "b~>buttercup/a"

logger = get_logger("codec")


def has_valid_signature(content: str) -> bool:
    """Check if content carries the text codec signature."""
    return isinstance(content, str) and content.startswith(SIGNATURE)


class TextCodec:
    """JSON + AES-GCM codec producing signed base64 strings."""

    def __init__(self, iterations: Optional[int] = None):
        self._iterations = iterations

    @property
    def iterations(self) -> int:
        return self._iterations or get_settings().pbkdf2_iterations

    async def serialize_and_encrypt(self, history: History, credentials: Credentials) -> EncryptedContent:
        password = get_master_password(credentials)
        try:
            payload = json.dumps(history, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise EncodeFault(f"Failed to serialize history: {exc}") from exc

        try:
            sealed = await asyncio.to_thread(seal, password, payload, self.iterations)
        except (ValueError, OverflowError, struct.error) as exc:
            raise EncodeFault(f"Failed to encrypt history: {exc}") from exc
        content = SIGNATURE + base64.b64encode(sealed).decode("ascii")
        logger.debug(f"Encoded history: {len(payload)} bytes -> {len(content)} chars")
        return content

    async def decrypt_and_deserialize(self, content: EncryptedContent, credentials: Credentials) -> History:
        password = get_master_password(credentials)
        if not has_valid_signature(content):
            raise DecodeFault("Content is not a recognised encrypted vault (bad signature)")

        try:
            sealed = base64.b64decode(content[len(SIGNATURE):].strip(), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise DecodeFault(f"Content is not valid base64: {exc}") from exc

        try:
            payload = await asyncio.to_thread(unseal, password, sealed)
        except CryptoError as exc:
            raise DecodeFault(f"Failed to decrypt vault: {exc}") from exc

        try:
            return json.loads(payload.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DecodeFault(f"Failed to deserialize vault: {exc}") from exc
