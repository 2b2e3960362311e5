"""Attachment directory layout.

    <base_dir>/
      <vault-file>
      .buttercup/
        <vault_id>/
          <attachment_id>.<ATTACHMENT_EXT>
"""

from pathlib import Path

from .errors import InvalidIdentifier
from .tools.attachments import ATTACHMENT_EXT

ATTACHMENTS_DIR_NAME = ".buttercup"

_FORBIDDEN_CHARS = ("/", "\\", "\x00")


def validate_identifier(value: str, kind: str = "identifier") -> str:
    """Ensure an ID can be used as exactly one path segment."""
    if not isinstance(value, str) or not value:
        raise InvalidIdentifier(f"Invalid {kind}: must be a non-empty string")
    if value in (".", ".."):
        raise InvalidIdentifier(f"Invalid {kind}: {value!r}")
    for char in _FORBIDDEN_CHARS:
        if char in value:
            raise InvalidIdentifier(f"Invalid {kind}: {value!r} contains {char!r}")
    return value


def attachments_dir(base_dir: Path | str, vault_id: str) -> Path:
    """Directory holding one vault's attachments."""
    return Path(base_dir) / ATTACHMENTS_DIR_NAME / vault_id


def attachment_filename(attachment_id: str) -> str:
    return f"{attachment_id}.{ATTACHMENT_EXT}"


def attachment_path(directory: Path | str, attachment_id: str) -> Path:
    """Full path of one attachment file inside an attachments directory."""
    return Path(directory) / attachment_filename(attachment_id)
