from unittest import mock

import httpx
import pytest

from core.exceptions import UpstreamError
from ea.client import EAClubClient

URL = "/api/ea/clubdetails"


def _response(status, **kwargs):
    return httpx.Response(status, request=httpx.Request("GET", "https://ea.test/api/clubdetails"), **kwargs)


@pytest.mark.parametrize("query", ["", "?platform=common-gen5", "?clubId=123"])
def test_missing_params_is_400(api_client, query):
    response = api_client.get(URL + query)
    assert response.status_code == 400
    assert response.json() == {"error": "Missing platform or clubId"}


def test_response_is_passed_through(api_client):
    upstream = {"123": {"name": "Red FC", "clubId": 123}}
    with mock.patch("ea.client.httpx.get", return_value=_response(200, json=upstream)) as get:
        response = api_client.get(URL, {"platform": "common-gen5", "clubId": "123"})

    assert response.status_code == 200
    assert response.json() == upstream
    args, kwargs = get.call_args
    assert args[0] == "https://ea.test/api/clubdetails"
    assert kwargs["params"] == {"platform": "common-gen5", "clubId": "123"}


def test_upstream_http_error_is_500_with_details(api_client):
    with mock.patch("ea.client.httpx.get", return_value=_response(503, text="down")):
        response = api_client.get(URL, {"platform": "common-gen5", "clubId": "123"})

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "EA API error"
    assert "503" in body["details"]


def test_upstream_connection_error_is_500(api_client):
    with mock.patch("ea.client.httpx.get", side_effect=httpx.ConnectError("connection refused")):
        response = api_client.get(URL, {"platform": "common-gen5", "clubId": "123"})

    assert response.status_code == 500
    assert response.json() == {"error": "EA API error", "details": "connection refused"}


def test_client_rejects_non_json():
    client = EAClubClient("https://ea.test/api")
    with mock.patch("ea.client.httpx.get", return_value=_response(200, text="<html>")):
        with pytest.raises(UpstreamError):
            client.club_details("common-gen5", "123")
