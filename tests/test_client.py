# tests/test_client.py

import logging

import httpx
import pytest

from itemboard.client.http import ItemsClient
from itemboard.client.view import ItemsView
from itemboard.exceptions import NetworkError


def _unreachable(request):
    raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture
def offline_client():
    http = httpx.Client(base_url="http://itemboard.invalid", transport=httpx.MockTransport(_unreachable))
    return ItemsClient(http=http)


def test_client_lists_and_appends(api, store):
    store.create_item("existing")
    client = ItemsClient(http=api)

    created = client.append_item("new")

    assert [i.name for i in client.list_items()] == ["existing", "new"]
    assert created.name == "new"


def test_client_raises_network_error_on_500(broken_api):
    client = ItemsClient(http=broken_api)

    with pytest.raises(NetworkError):
        client.list_items()
    with pytest.raises(NetworkError):
        client.append_item("x")


def test_client_raises_network_error_when_unreachable(offline_client):
    with pytest.raises(NetworkError) as excinfo:
        offline_client.list_items()
    assert isinstance(excinfo.value.cause, httpx.ConnectError)


def test_view_load_replaces_items(api, store):
    store.create_item("one")
    store.create_item("two")
    view = ItemsView(ItemsClient(http=api))

    view.load()

    assert [i.name for i in view.items] == ["one", "two"]


def test_view_add_uses_service_id_and_clears_input(api, store):
    store.create_item("first")
    store.create_item("second")
    view = ItemsView(ItemsClient(http=api))
    view.load()

    view.set_pending("third")
    created = view.add()

    assert view.pending == ""
    assert view.items[-1] == created
    assert created.id == store.list_items()[-1].id
    assert created.id not in {i.id for i in view.items[:-1]}


def test_view_add_empty_pending(api):
    view = ItemsView(ItemsClient(http=api))
    view.load()

    created = view.add()

    assert created is not None
    assert created.name == ""
    assert list(view.items) == [created]


def test_view_failed_load_keeps_empty_list(offline_client, caplog):
    view = ItemsView(offline_client)

    with caplog.at_level(logging.ERROR, logger="itemboard.client.view"):
        view.load()

    assert view.items == ()
    assert "Error fetching items" in caplog.text


def test_view_failed_add_changes_nothing(broken_api, caplog):
    view = ItemsView(ItemsClient(http=broken_api))
    view.set_pending("keep me")

    with caplog.at_level(logging.ERROR, logger="itemboard.client.view"):
        assert view.add() is None

    assert view.pending == "keep me"
    assert view.items == ()
    assert "Error adding item" in caplog.text


def test_view_failed_reload_keeps_previous_list(api, store, monkeypatch):
    store.create_item("kept")
    client = ItemsClient(http=api)
    view = ItemsView(client)
    view.load()

    def fail():
        raise NetworkError("down")

    monkeypatch.setattr(client, "list_items", fail)
    view.load()

    assert [i.name for i in view.items] == ["kept"]
