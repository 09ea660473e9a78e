"""
Tests del cliente OData de SAP con una sesion HTTP falsa.
"""
from typing import Any, Optional

import pytest
import requests

from app.domain.entities.sync import UpstreamCredentials
from app.infrastructure.external.sap_odata.odata_client import (
    ODataQuery,
    SapODataClient,
    normalize_odata_payload,
)
from app.shared.exceptions.sync import UpstreamRequestException

BASE_URL = "http://sap.local:8000/sap/opu/odata/sap"


class _FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str = "", reason: str = "OK"):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        self.reason = reason

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class _FakeSession:
    def __init__(self, response: Optional[_FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.requests = []
        self.closed = False

    def get(self, url, **kwargs):
        self.requests.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


@pytest.fixture
def creds() -> UpstreamCredentials:
    return UpstreamCredentials(username="sap_user", password="s3cret")


def _client(session: _FakeSession) -> SapODataClient:
    return SapODataClient(base_url=BASE_URL + "/", session=session)


def test_fetch_builds_url_with_basic_auth_and_json_accept(creds) -> None:
    session = _FakeSession(_FakeResponse(payload={"d": {"results": []}}))

    _client(session).fetch("ZGW_SALES_SRV", "SalesInvoicesSet", creds)

    url, kwargs = session.requests[0]
    assert url == f"{BASE_URL}/ZGW_SALES_SRV/SalesInvoicesSet?$format=json"
    assert kwargs["auth"] == ("sap_user", "s3cret")
    assert kwargs["headers"]["Accept"] == "application/json"


def test_fetch_appends_query_options(creds) -> None:
    session = _FakeSession(_FakeResponse(payload=[]))
    query = ODataQuery(top=10, skip=20, filter="Plant eq '1000'")

    _client(session).fetch("ZGW_INVENTORY_SRV", "StockSet", creds, query)

    url, _ = session.requests[0]
    assert url.startswith(f"{BASE_URL}/ZGW_INVENTORY_SRV/StockSet?$format=json&")
    assert "$top=10" in url
    assert "$skip=20" in url
    assert "$filter=Plant%20eq%20%271000%27" in url


def test_query_string_omits_unset_options() -> None:
    assert ODataQuery().to_query_string() == ""
    assert ODataQuery(top=3).to_query_string() == "$top=3"


@pytest.mark.parametrize(
    "payload",
    [
        {"d": {"results": [{"A": 1}, {"A": 2}]}},
        {"d": [{"A": 1}, {"A": 2}]},
        [{"A": 1}, {"A": 2}],
    ],
)
def test_fetch_normalizes_envelopes(creds, payload) -> None:
    session = _FakeSession(_FakeResponse(payload=payload))
    assert _client(session).fetch("S", "C", creds) == [{"A": 1}, {"A": 2}]


@pytest.mark.parametrize("payload", [None, {}, {"d": None}, {"d": {}}, {"d": {"results": None}}, "text"])
def test_empty_or_unexpected_envelopes_are_empty_collections(payload) -> None:
    assert normalize_odata_payload(payload) == []


def test_results_next_to_count_are_kept() -> None:
    payload = {"d": {"__count": "2", "results": [{"A": 1}, {"A": 2}]}}
    assert normalize_odata_payload(payload) == [{"A": 1}, {"A": 2}]


def test_non_2xx_keeps_status_and_body(creds) -> None:
    session = _FakeSession(_FakeResponse(status_code=503, text="maintenance", reason="Service Unavailable"))

    with pytest.raises(UpstreamRequestException) as exc_info:
        _client(session).fetch("S", "C", creds)

    error = exc_info.value
    assert error.status_code == 503
    assert error.body == "maintenance"
    assert error.message == "Fallo la consulta OData a SAP: 503 Service Unavailable"
    assert error.to_payload() == {"error": error.message, "details": "maintenance"}


def test_unauthorized_is_reported_with_upstream_status(creds) -> None:
    session = _FakeSession(_FakeResponse(status_code=401, text="", reason="Unauthorized"))

    with pytest.raises(UpstreamRequestException) as exc_info:
        _client(session).fetch("S", "C", creds)

    assert exc_info.value.status_code == 401
    assert "s3cret" not in exc_info.value.message


@pytest.mark.parametrize(
    "payload",
    [
        [{"InvoiceNumber": "INV1"}, "garbage"],
        {"d": {"results": [{"InvoiceNumber": "INV1"}, 42]}},
        {"d": [None]},
    ],
)
def test_records_that_are_not_objects_are_bad_gateway(creds, payload) -> None:
    session = _FakeSession(_FakeResponse(payload=payload, text="raw-body"))

    with pytest.raises(UpstreamRequestException) as exc_info:
        _client(session).fetch("S", "C", creds)

    assert exc_info.value.status_code == 502
    assert exc_info.value.body == "raw-body"
    assert "formato invalido" in exc_info.value.message


def test_non_json_success_body_is_bad_gateway(creds) -> None:
    session = _FakeSession(_FakeResponse(payload=ValueError("no json"), text="<html>login</html>"))

    with pytest.raises(UpstreamRequestException) as exc_info:
        _client(session).fetch("S", "C", creds)

    assert exc_info.value.status_code == 502
    assert exc_info.value.body == "<html>login</html>"


def test_connection_error_is_bad_gateway(creds) -> None:
    session = _FakeSession(error=requests.ConnectionError("connection refused"))

    with pytest.raises(UpstreamRequestException) as exc_info:
        _client(session).fetch("S", "C", creds)

    assert exc_info.value.status_code == 502
    assert "connection refused" in exc_info.value.body


def test_close_closes_session() -> None:
    session = _FakeSession()
    _client(session).close()
    assert session.closed is True


def test_credentials_repr_hides_password(creds) -> None:
    assert "s3cret" not in repr(creds)
