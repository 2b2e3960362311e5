"""Encrypted vault persistence with per-vault attachments."""

from .credentials import Credentials
from .datasources import FileDatasource, TextDatasource, create_datasource
from .errors import (
    CredentialsError,
    DatasourceError,
    DecodeFault,
    EncodeFault,
    InvalidIdentifier,
    NotFound,
    StorageFault,
    UnsupportedOperation,
)
from .models import AttachmentDetails, ContentState
from .tools.attachments import ATTACHMENT_EXT

__all__ = [
    "ATTACHMENT_EXT",
    "AttachmentDetails",
    "ContentState",
    "Credentials",
    "CredentialsError",
    "DatasourceError",
    "DecodeFault",
    "EncodeFault",
    "FileDatasource",
    "InvalidIdentifier",
    "NotFound",
    "StorageFault",
    "TextDatasource",
    "UnsupportedOperation",
    "create_datasource",
]
