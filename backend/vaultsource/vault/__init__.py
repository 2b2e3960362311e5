"""Vault encryption primitives."""

from .crypto import CryptoError, derive_key, seal, unseal

__all__ = [
    'CryptoError',
    'derive_key',
    'seal',
    'unseal',
]
