"""Attachment encryption, keyed by the credentials' master password."""

import asyncio
import struct

from ..config import get_settings
from ..credentials import Credentials, get_master_password
from ..errors import DecodeFault, EncodeFault
from ..logging import get_logger
from ..vault.crypto import CryptoError, seal, unseal

# File extension for stored attachments, shared by every datasource
ATTACHMENT_EXT = "bcatt"

logger = get_logger("attachments")


async def encrypt_attachment(buffer: bytes, credentials: Credentials) -> bytes:
    """
    Encrypt an attachment buffer.

    Raises:
        EncodeFault if the buffer cannot be encrypted
        CredentialsError if the credentials carry no master password
    """
    password = get_master_password(credentials)
    iterations = get_settings().pbkdf2_iterations
    try:
        data = bytes(buffer)
        encrypted = await asyncio.to_thread(seal, password, data, iterations)
    except (TypeError, ValueError, OverflowError, struct.error) as exc:
        raise EncodeFault(f"Failed to encrypt attachment: {exc}") from exc
    logger.debug(f"Encrypted attachment: {len(data)} -> {len(encrypted)} bytes")
    return encrypted


async def decrypt_attachment(buffer: bytes, credentials: Credentials) -> bytes:
    """
    Decrypt an attachment buffer.

    Raises:
        DecodeFault on wrong password or corrupt data
        CredentialsError if the credentials carry no master password
    """
    password = get_master_password(credentials)
    try:
        return await asyncio.to_thread(unseal, password, buffer)
    except CryptoError as exc:
        raise DecodeFault(f"Failed to decrypt attachment: {exc}") from exc
