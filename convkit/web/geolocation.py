"""IP geolocation -- abstract provider plus the ip-api.com implementation."""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

import httpx

from convkit.errors import PreconditionError, UpstreamError
from convkit.security.guardrails import is_valid_ip
from convkit.utils.config import settings
from convkit.utils.logger import get_logger

log = get_logger(__name__)

IP_API_FIELDS = (
    "status,message,country,countryCode,region,regionName,city,zip,"
    "lat,lon,timezone,isp,org,as,query"
)

INVALID_IP_MESSAGE = "Not a valid IP address."
LOOKUP_FAILED_MESSAGE = "IP address lookup failed."


@dataclass
class GeoLocation:
    """Location details for a single IP address."""

    ip: str
    country: str
    country_code: str
    region: str
    region_name: str
    city: str
    zip: str
    latitude: Optional[float]
    longitude: Optional[float]
    timezone: str
    isp: str
    org: str
    as_name: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class GeoLocationProvider(ABC):
    """Abstract interface -- swap implementations without touching callers."""

    @abstractmethod
    def lookup(self, ip: str) -> GeoLocation:
        """Return the location of *ip*."""
        ...


class IpApiGeoLocation(GeoLocationProvider):
    """Lookups via the free ip-api.com JSON endpoint.

    One GET per lookup: no retries, no caching, no rate-limit handling.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ):
        self.base_url = (base_url or settings.geolocation_api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.geolocation_timeout
        self._client = client

    def _get(self, url: str) -> Dict[str, Any]:
        params = {"fields": IP_API_FIELDS}
        if self._client is not None:
            resp = self._client.get(url, params=params)
        else:
            with httpx.Client(timeout=self.timeout, follow_redirects=True) as client:
                resp = client.get(url, params=params)
        resp.raise_for_status()
        return resp.json()

    def lookup(self, ip: str) -> GeoLocation:
        ip = (ip or "").strip()
        if not is_valid_ip(ip):
            raise PreconditionError(INVALID_IP_MESSAGE)

        try:
            data = self._get(f"{self.base_url}/json/{ip}")
        except (httpx.HTTPError, ValueError) as exc:
            log.warning("Geolocation request for %s failed: %s", ip, exc)
            raise UpstreamError(LOOKUP_FAILED_MESSAGE) from exc

        if data.get("status") == "fail":
            log.info("Geolocation lookup for %s rejected: %s", ip, data.get("message"))
            raise UpstreamError(data.get("message") or LOOKUP_FAILED_MESSAGE)

        return GeoLocation(
            ip=data.get("query", ip),
            country=data.get("country", ""),
            country_code=data.get("countryCode", ""),
            region=data.get("region", ""),
            region_name=data.get("regionName", ""),
            city=data.get("city", ""),
            zip=data.get("zip", ""),
            latitude=data.get("lat"),
            longitude=data.get("lon"),
            timezone=data.get("timezone", ""),
            isp=data.get("isp", ""),
            org=data.get("org", ""),
            as_name=data.get("as", ""),
        )
