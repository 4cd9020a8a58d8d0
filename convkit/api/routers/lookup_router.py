"""IP geolocation endpoint."""

from fastapi import APIRouter, Depends

from convkit.api.schemas import GeoLocationResponse
from convkit.web.geolocation import GeoLocationProvider, IpApiGeoLocation

router = APIRouter(prefix="/api/geolocation", tags=["geolocation"])


def get_geolocation_provider() -> GeoLocationProvider:
    return IpApiGeoLocation()


@router.get("/{ip}", response_model=GeoLocationResponse)
def geolocation_route(ip: str, provider: GeoLocationProvider = Depends(get_geolocation_provider)):
    return GeoLocationResponse(**provider.lookup(ip).to_dict())
