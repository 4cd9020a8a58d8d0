"""Unit tests for the ip-api.com geolocation provider."""

import httpx
import pytest

from convkit.errors import PreconditionError, UpstreamError
from convkit.web.geolocation import IP_API_FIELDS, IpApiGeoLocation

SUCCESS_PAYLOAD = {
    "status": "success",
    "country": "United States",
    "countryCode": "US",
    "region": "VA",
    "regionName": "Virginia",
    "city": "Ashburn",
    "zip": "20149",
    "lat": 39.03,
    "lon": -77.5,
    "timezone": "America/New_York",
    "isp": "Google LLC",
    "org": "Google Public DNS",
    "as": "AS15169 Google LLC",
    "query": "8.8.8.8",
}


def _provider(handler) -> IpApiGeoLocation:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return IpApiGeoLocation(base_url="http://geo.test/", client=client)


def test_lookup_maps_fields():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        return httpx.Response(200, json=SUCCESS_PAYLOAD)

    location = _provider(handler).lookup(" 8.8.8.8 ")

    assert seen["url"].path == "/json/8.8.8.8"
    assert seen["url"].params["fields"] == IP_API_FIELDS
    assert location.ip == "8.8.8.8"
    assert location.country_code == "US"
    assert location.region_name == "Virginia"
    assert location.latitude == 39.03
    assert location.longitude == -77.5
    assert location.as_name == "AS15169 Google LLC"


def test_invalid_ip_never_hits_network():
    def handler(request):
        raise AssertionError("should not be called")

    with pytest.raises(PreconditionError):
        _provider(handler).lookup("999.1.1.1")


def test_api_failure_message_is_surfaced():
    def handler(request):
        return httpx.Response(200, json={"status": "fail", "message": "private range", "query": "10.0.0.1"})

    with pytest.raises(UpstreamError, match="private range"):
        _provider(handler).lookup("10.0.0.1")


def test_http_error_becomes_upstream_error():
    def handler(request):
        return httpx.Response(503)

    with pytest.raises(UpstreamError):
        _provider(handler).lookup("1.1.1.1")


def test_transport_error_becomes_upstream_error():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(UpstreamError):
        _provider(handler).lookup("1.1.1.1")


def test_non_json_body_becomes_upstream_error():
    def handler(request):
        return httpx.Response(200, text="<html>rate limited</html>")

    with pytest.raises(UpstreamError):
        _provider(handler).lookup("1.1.1.1")
