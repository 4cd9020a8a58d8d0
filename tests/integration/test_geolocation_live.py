"""Integration test -- live ip-api.com lookup.

Requires outbound network access; skipped otherwise.
"""

import pytest

from convkit.errors import UpstreamError
from convkit.web.geolocation import IpApiGeoLocation


@pytest.mark.integration
def test_lookup_public_dns():
    try:
        location = IpApiGeoLocation(timeout=5.0).lookup("8.8.8.8")
    except UpstreamError:
        pytest.skip("ip-api.com not reachable")

    assert location.ip == "8.8.8.8"
    assert location.country_code == "US"
    assert location.latitude is not None
