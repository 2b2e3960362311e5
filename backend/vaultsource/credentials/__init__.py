"""Credentials handles, their in-memory channel, and the resolver."""

from .channel import CredentialsChannel, credentials_channel
from .credentials import (
    Credentials,
    CredentialsData,
    DatasourceConfig,
    get_master_password,
    resolve_datasource_config,
)

__all__ = [
    "CredentialsChannel",
    "credentials_channel",
    "Credentials",
    "CredentialsData",
    "DatasourceConfig",
    "get_master_password",
    "resolve_datasource_config",
]
