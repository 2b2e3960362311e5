"""Vault content codecs."""

from .base import ContentCodec
from .text import SIGNATURE, TextCodec, has_valid_signature

__all__ = [
    "ContentCodec",
    "SIGNATURE",
    "TextCodec",
    "has_valid_signature",
]
