"""Tests for PokeApi: HTTP gateway with decoding."""

import json
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import requests

from pokedex_browser.api import PokeApi
from pokedex_browser.config import API_BASE_URL, CATALOG_LIMIT, REQUEST_TIMEOUT
from pokedex_browser.core.errors import DecodeError, TransportError
from pokedex_browser.models.pokemon import CatalogEntry
from pokedex_browser.protocols import GatewayProtocol
from tests.unit.conftest import make_detail_body, make_list_body


@pytest.fixture
def api_with_mock_session() -> tuple[PokeApi, MagicMock]:
    """Create a PokeApi with a mocked requests.Session."""
    with patch("pokedex_browser.api.requests.Session") as mock_session_cls:
        mock_session = MagicMock()
        mock_session_cls.return_value = mock_session
        api = PokeApi()

    return api, mock_session


def _make_response(data: Any) -> MagicMock:
    """Create a mock HTTP response with given JSON data."""
    response = MagicMock()
    response.json.return_value = data
    response.text = json.dumps(data)
    return response


def test_pokeapi_satisfies_gateway_protocol() -> None:
    with patch("pokedex_browser.api.requests.Session"):
        assert isinstance(PokeApi(), GatewayProtocol)


def test_fetch_catalog_requests_fixed_limit(
    api_with_mock_session: tuple[PokeApi, MagicMock],
) -> None:
    """The list endpoint is called once with limit=151."""
    api, mock_session = api_with_mock_session
    mock_session.get.return_value = _make_response(make_list_body("bulbasaur"))

    api.fetch_catalog()

    mock_session.get.assert_called_once_with(
        f"{API_BASE_URL}/pokemon", params={"limit": CATALOG_LIMIT}, timeout=REQUEST_TIMEOUT
    )


def test_fetch_catalog_returns_decoded_entries(
    api_with_mock_session: tuple[PokeApi, MagicMock],
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.return_value = _make_response(make_list_body("bulbasaur", "ivysaur"))

    assert api.fetch_catalog() == (CatalogEntry(1, "bulbasaur"), CatalogEntry(2, "ivysaur"))


def test_fetch_detail_calls_detail_endpoint(
    api_with_mock_session: tuple[PokeApi, MagicMock],
) -> None:
    api, mock_session = api_with_mock_session
    body = make_detail_body(25, "pikachu", 112, ("electric",))
    mock_session.get.return_value = _make_response(body)

    detail = api.fetch_detail(25)

    assert mock_session.get.call_args[0][0] == f"{API_BASE_URL}/pokemon/25"
    assert (detail.id, detail.name, detail.base_experience, detail.types) == (
        25,
        "pikachu",
        112,
        ("electric",),
    )
    assert detail.raw == body


def test_http_error_becomes_transport_error(
    api_with_mock_session: tuple[PokeApi, MagicMock],
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.return_value.raise_for_status.side_effect = requests.HTTPError("404")

    with pytest.raises(TransportError) as excinfo:
        api.fetch_detail(9999)
    assert isinstance(excinfo.value.__cause__, requests.HTTPError)


def test_network_error_becomes_transport_error(
    api_with_mock_session: tuple[PokeApi, MagicMock],
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.side_effect = requests.ConnectionError("unreachable")

    with pytest.raises(TransportError):
        api.fetch_catalog()


def test_invalid_json_becomes_transport_error(
    api_with_mock_session: tuple[PokeApi, MagicMock],
) -> None:
    api, mock_session = api_with_mock_session
    mock_session.get.return_value.json.side_effect = ValueError("Expecting value")

    with pytest.raises(TransportError):
        api.fetch_catalog()


def test_decode_error_becomes_transport_error(
    api_with_mock_session: tuple[PokeApi, MagicMock],
) -> None:
    """Shape mismatches are folded into TransportError, cause kept for logs."""
    api, mock_session = api_with_mock_session
    body = make_detail_body()
    del body["types"]
    mock_session.get.return_value = _make_response(body)

    with pytest.raises(TransportError) as excinfo:
        api.fetch_detail(1)
    assert isinstance(excinfo.value.__cause__, DecodeError)


def test_bad_catalog_url_fails_whole_fetch(
    api_with_mock_session: tuple[PokeApi, MagicMock],
) -> None:
    api, mock_session = api_with_mock_session
    body = make_list_body("bulbasaur", "ivysaur")
    body["results"][1]["url"] = "https://pokeapi.co/api/v2/pokemon/2"
    mock_session.get.return_value = _make_response(body)

    with pytest.raises(TransportError):
        api.fetch_catalog()


def test_base_url_trailing_slash_is_normalized() -> None:
    with patch("pokedex_browser.api.requests.Session"):
        api = PokeApi(base_url="http://localhost:8000/api/v2/")
    assert api.base_url == "http://localhost:8000/api/v2"


def test_catalog_ids_are_read_against_configured_base_url() -> None:
    """Catalog entry urls are matched against the gateway's own base URL."""
    base_url = "http://localhost:8000/api/v2"
    body = {"results": [{"name": "bulbasaur", "url": f"{base_url}/pokemon/1/"}]}
    with patch("pokedex_browser.api.requests.Session") as mock_session_cls:
        mock_session_cls.return_value.get.return_value = _make_response(body)
        api = PokeApi(base_url=f"{base_url}/")

    assert api.fetch_catalog() == (CatalogEntry(1, "bulbasaur"),)
    mock_session_cls.return_value.get.assert_called_once_with(
        f"{base_url}/pokemon", params={"limit": CATALOG_LIMIT}, timeout=REQUEST_TIMEOUT
    )
