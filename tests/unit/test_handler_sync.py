import httpx
import pytest

from tests.conftest import USERS_URL
from tuplefetch import ResponseNotOkError, fetch_handler_sync, fetch_result_sync
from tuplefetch.result import Err, Ok


@pytest.fixture
def client():
    with httpx.Client() as c:
        yield c


def test_sync_json_response(respx_mock, client):
    payload = {"id": 1, "username": "Leanne_Graham"}
    respx_mock.get(USERS_URL).mock(return_value=httpx.Response(200, json=payload))

    assert fetch_handler_sync(USERS_URL, client=client) == (payload, None)


def test_sync_post_with_options(respx_mock, client):
    route = respx_mock.post(USERS_URL).mock(return_value=httpx.Response(200, json={}))

    data, error = fetch_handler_sync(USERS_URL, {"method": "POST", "json": {"a": 1}}, client=client)

    assert route.calls.last.request.method == "POST"
    assert (data, error) == ({}, None)


def test_sync_network_error(respx_mock, client, warn):
    respx_mock.get(USERS_URL).mock(side_effect=httpx.ConnectError("Network Error"))

    data, error = fetch_handler_sync(USERS_URL, client=client, warn=warn)

    assert data is None
    assert isinstance(error, httpx.ConnectError)
    warn.assert_called_once_with(error)


def test_sync_non_ok_status(respx_mock, client):
    respx_mock.get(USERS_URL).mock(return_value=httpx.Response(503))

    result = fetch_result_sync(USERS_URL, client=client)

    assert isinstance(result, Err)
    assert isinstance(result.error, ResponseNotOkError)
    assert result.error.status_code == 503


def test_sync_default_client(respx_mock, config):
    respx_mock.get(USERS_URL).mock(return_value=httpx.Response(204))

    assert fetch_result_sync(USERS_URL, config=config) == Ok("")


class ResetRequester:
    """Requester whose connection is reset by the peer."""

    def request(self, method, url, **kwargs):
        raise ConnectionResetError("Connection reset by peer")


def test_sync_injected_transport_os_error(warn):
    data, error = fetch_handler_sync(USERS_URL, client=ResetRequester(), warn=warn)

    assert data is None
    assert isinstance(error, ConnectionResetError)
    warn.assert_called_once_with(error)
