"""Static lookup of datasource implementations by type name."""

from typing import Any

from ..credentials import Credentials, resolve_datasource_config
from ..errors import CredentialsError
from .base import Datasource
from .file import FileDatasource
from .text import TextDatasource

DATASOURCES: dict[str, type[Datasource]] = {
    FileDatasource.type: FileDatasource,
    TextDatasource.type: TextDatasource,
}


def get_datasource_class(name: str) -> type[Datasource]:
    """Get the datasource class registered under a type name."""
    try:
        return DATASOURCES[name]
    except KeyError:
        raise CredentialsError(f"Unknown datasource type: {name}") from None


def create_datasource(credentials: Credentials, **kwargs: Any) -> Datasource:
    """Instantiate the datasource named by the credentials' configuration."""
    config = resolve_datasource_config(credentials)
    return get_datasource_class(config.type)(credentials, **kwargs)
