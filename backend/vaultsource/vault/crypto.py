"""
Vault encryption using PBKDF2 + AES-GCM.

Binary payloads (vault bodies and attachments) are sealed into a single
self-describing blob:

    MAGIC (4) | iterations (uint32 BE) | salt (16) | iv (12) | ciphertext + tag

so a blob written under one iteration setting stays readable under any other.
"""

import hashlib
import os
import struct

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

# PBKDF2 configuration
PBKDF2_HASH = 'sha256'
KEY_LENGTH_BYTES = 32  # 256 bits
SALT_LENGTH_BYTES = 16

# AES-GCM configuration
IV_LENGTH_BYTES = 12  # 96 bits, recommended for AES-GCM
TAG_LENGTH_BYTES = 16
MAX_ITERATIONS = 10_000_000

SEAL_MAGIC = b"BCS1"
_HEADER = struct.Struct(">4sI")
SEAL_OVERHEAD = _HEADER.size + SALT_LENGTH_BYTES + IV_LENGTH_BYTES + TAG_LENGTH_BYTES


class CryptoError(Exception):
    """A sealed blob is malformed or cannot be opened with the given password."""


def generate_salt() -> bytes:
    """Generate a random salt for key derivation."""
    return os.urandom(SALT_LENGTH_BYTES)


def derive_key(password: str, salt: bytes, iterations: int) -> bytes:
    """
    Derive a 256-bit AES key from password and salt using PBKDF2.

    Args:
        password: The master password
        salt: Raw salt bytes
        iterations: PBKDF2 round count

    Returns:
        32-byte key suitable for AES-256-GCM
    """
    return hashlib.pbkdf2_hmac(
        PBKDF2_HASH,
        password.encode('utf-8'),
        salt,
        iterations,
        dklen=KEY_LENGTH_BYTES
    )


def seal(password: str, data: bytes, iterations: int) -> bytes:
    """
    Encrypt raw bytes under a password into a self-describing blob.

    Args:
        password: The master password
        data: Bytes to encrypt
        iterations: PBKDF2 round count recorded in the blob header

    Returns:
        Sealed blob, always SEAL_OVERHEAD bytes longer than data

    Raises:
        ValueError if iterations is outside 1..MAX_ITERATIONS
    """
    if not 1 <= iterations <= MAX_ITERATIONS:
        raise ValueError(f"iterations must be between 1 and {MAX_ITERATIONS}, got {iterations}")
    salt = generate_salt()
    iv = os.urandom(IV_LENGTH_BYTES)
    key = derive_key(password, salt, iterations)
    ciphertext = AESGCM(key).encrypt(iv, bytes(data), None)
    return _HEADER.pack(SEAL_MAGIC, iterations) + salt + iv + ciphertext


def unseal(password: str, blob: bytes) -> bytes:
    """
    Decrypt a blob produced by seal().

    Raises:
        CryptoError if the blob is malformed, or the password is wrong
    """
    blob = bytes(blob)
    if len(blob) < SEAL_OVERHEAD:
        raise CryptoError(f"Sealed data too short ({len(blob)} bytes)")

    magic, iterations = _HEADER.unpack_from(blob)
    if magic != SEAL_MAGIC:
        raise CryptoError("Sealed data has an unrecognised signature")
    if not 1 <= iterations <= MAX_ITERATIONS:
        raise CryptoError("Sealed data has an invalid iteration count")

    offset = _HEADER.size
    salt = blob[offset:offset + SALT_LENGTH_BYTES]
    offset += SALT_LENGTH_BYTES
    iv = blob[offset:offset + IV_LENGTH_BYTES]
    offset += IV_LENGTH_BYTES

    key = derive_key(password, salt, iterations)
    try:
        return AESGCM(key).decrypt(iv, blob[offset:], None)
    except InvalidTag as exc:
        raise CryptoError("Authentication failed: wrong password or tampered data") from exc
