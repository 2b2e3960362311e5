"""Vault datasources."""

from .base import Datasource
from .file import FileDatasource
from .register import DATASOURCES, create_datasource, get_datasource_class
from .text import TextDatasource

__all__ = [
    "Datasource",
    "FileDatasource",
    "TextDatasource",
    "DATASOURCES",
    "create_datasource",
    "get_datasource_class",
]
