"""Credentials handles and the resolver that turns them into configuration and keys."""

import uuid
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import CredentialsError
from ..logging import get_logger
from .channel import credentials_channel

logger = get_logger("credentials")


class DatasourceConfig(BaseModel):
    """Datasource section of a credentials record."""
    model_config = ConfigDict(extra="allow")

    type: str = Field(..., min_length=1, description="Datasource type name, e.g. 'file'")
    path: Optional[str] = Field(default=None, min_length=1, description="Persistence path")


class CredentialsData(BaseModel):
    """Decrypted data a credentials handle stands for."""
    datasource: Optional[DatasourceConfig] = None
    master_password: Optional[str] = None


class Credentials:
    """
    Opaque credentials handle.

    The handle itself only carries an ID. Configuration and the master
    password are kept in the credentials channel and looked up by ID.
    """

    def __init__(self, data: Optional[CredentialsData] = None):
        self.id = uuid.uuid4().hex
        credentials_channel.set(self.id, data or CredentialsData())

    def __repr__(self) -> str:
        return f"Credentials(id={self.id!r})"

    @classmethod
    def from_password(cls, password: str) -> "Credentials":
        """Create credentials that only carry a master password."""
        if not password:
            raise CredentialsError("Master password must not be empty")
        return cls(CredentialsData(master_password=password))

    @classmethod
    def from_datasource(cls, config: dict[str, Any], password: Optional[str] = None) -> "Credentials":
        """Create credentials for a datasource configuration, optionally with a master password."""
        try:
            datasource = DatasourceConfig.model_validate(config)
        except ValidationError as exc:
            raise CredentialsError(f"Invalid datasource configuration: {exc}") from exc
        credentials = cls(CredentialsData(datasource=datasource, master_password=password or None))
        logger.debug(f"Created credentials {credentials.id} for datasource type '{datasource.type}'")
        return credentials

    @property
    def data(self) -> CredentialsData:
        return credentials_channel.get(self.id)

    @property
    def is_disposed(self) -> bool:
        return not credentials_channel.has(self.id)

    def dispose(self) -> None:
        """Remove this handle's secrets from the channel."""
        credentials_channel.remove(self.id)
        logger.debug(f"Disposed credentials {self.id}")


def resolve_datasource_config(credentials: Credentials) -> DatasourceConfig:
    """Get the datasource configuration a handle was created with."""
    config = credentials.data.datasource
    if config is None:
        raise CredentialsError(f"Credentials {credentials.id} carry no datasource configuration")
    return config


def get_master_password(credentials: Credentials) -> str:
    """Get the master password a handle was created with."""
    password = credentials.data.master_password
    if not password:
        raise CredentialsError(f"Credentials {credentials.id} carry no master password")
    return password
