"""Tests for the attachment directory layout."""

from pathlib import Path

import pytest

from vaultsource.errors import InvalidIdentifier
from vaultsource.paths import (
    ATTACHMENTS_DIR_NAME,
    attachment_filename,
    attachment_path,
    attachments_dir,
    validate_identifier,
)
from vaultsource.tools.attachments import ATTACHMENT_EXT


def test_attachments_dir_layout():
    assert ATTACHMENTS_DIR_NAME == ".buttercup"
    assert attachments_dir("/data", "v1") == Path("/data/.buttercup/v1")


def test_attachment_path_uses_fixed_extension():
    directory = attachments_dir(Path("/data"), "v1")
    assert attachment_path(directory, "att1") == Path(f"/data/.buttercup/v1/att1.{ATTACHMENT_EXT}")
    assert attachment_filename("att1") == f"att1.{ATTACHMENT_EXT}"


def test_paths_are_deterministic():
    first = attachment_path(attachments_dir("/data", "v1"), "att1")
    second = attachment_path(attachments_dir("/data", "v1"), "att1")
    assert first == second


@pytest.mark.parametrize("value", ["v1", "0b8f-4c1e", "name with spaces", "..hidden", "a.b"])
def test_validate_identifier_accepts_single_segments(value):
    assert validate_identifier(value) == value


@pytest.mark.parametrize("value", ["", ".", "..", "a/b", "../etc", "a\\b", "nul\x00byte"])
def test_validate_identifier_rejects_unsafe_values(value):
    with pytest.raises(InvalidIdentifier):
        validate_identifier(value, "vault ID")


def test_invalid_identifier_is_a_value_error():
    with pytest.raises(ValueError):
        validate_identifier("..")
