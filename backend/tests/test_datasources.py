"""Tests for TextDatasource and the datasource registry."""

import pytest

from vaultsource.credentials import Credentials
from vaultsource.datasources import (
    DATASOURCES,
    Datasource,
    FileDatasource,
    TextDatasource,
    create_datasource,
    get_datasource_class,
)
from vaultsource.errors import CredentialsError, NotFound, UnsupportedOperation
from vaultsource.models import ContentState


@pytest.fixture
def text_credentials():
    return Credentials.from_datasource({"type": "text"}, "pw")


@pytest.mark.asyncio
async def test_text_datasource_save_returns_content_for_bypass_load(text_credentials):
    writer = TextDatasource(text_credentials)
    content = await writer.save(["cgr 0 g1"], text_credentials)

    reader = TextDatasource(text_credentials).set_content(content)
    assert reader.content_state is ContentState.BYPASS
    assert await reader.load(text_credentials) == ["cgr 0 g1"]


@pytest.mark.asyncio
async def test_text_datasource_load_without_content(text_credentials):
    datasource = TextDatasource(text_credentials)
    with pytest.raises(NotFound, match="content is empty"):
        await datasource.load(text_credentials)
    assert datasource.content_state is ContentState.UNLOADED


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "operation, args",
    [
        ("get_attachment", ("v1", "a1")),
        ("get_attachment_details", ("v1", "a1")),
        ("put_attachment", ("v1", "a1", b"x")),
        ("remove_attachment", ("v1", "a1")),
    ],
)
async def test_text_datasource_has_no_attachments(text_credentials, operation, args):
    datasource = TextDatasource(text_credentials)
    assert datasource.supports_attachments() is False
    with pytest.raises(UnsupportedOperation):
        await getattr(datasource, operation)(*args)


def test_text_datasource_supports_bypass(text_credentials):
    assert TextDatasource(text_credentials).supports_remote_bypass() is True


def test_registry_lookup():
    assert DATASOURCES == {"file": FileDatasource, "text": TextDatasource}
    assert get_datasource_class("file") is FileDatasource
    with pytest.raises(CredentialsError, match="Unknown datasource type"):
        get_datasource_class("dropbox")


def test_create_datasource_from_credentials(credentials, storage, text_credentials):
    file_datasource = create_datasource(credentials, storage=storage)
    assert isinstance(file_datasource, FileDatasource)
    assert file_datasource.storage is storage

    assert isinstance(create_datasource(text_credentials), TextDatasource)


def test_create_datasource_unknown_type():
    credentials = Credentials.from_datasource({"type": "webdav", "path": "/remote.bcup"})
    with pytest.raises(CredentialsError):
        create_datasource(credentials)


def test_base_datasource_requires_storage_hooks(text_credentials):
    with pytest.raises(TypeError, match="abstract"):
        Datasource(text_credentials)


class _DictDatasource(Datasource):
    type = "dict"

    def __init__(self, credentials, store):
        super().__init__(credentials)
        self.store = store

    async def fetch_content(self):
        return self.store["vault"]

    async def store_content(self, content):
        self.store["vault"] = content


@pytest.mark.asyncio
async def test_subclass_with_storage_hooks_round_trips(text_credentials):
    store = {}
    await _DictDatasource(text_credentials, store).save(["cgr 0 group-1"], text_credentials)
    reader = _DictDatasource(text_credentials, store)
    assert await reader.load(text_credentials) == ["cgr 0 group-1"]
    assert reader.content_state is ContentState.READ
    assert reader.supports_attachments() is False
