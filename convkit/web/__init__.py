"""Web module -- HTML to Markdown extraction and IP geolocation."""

from convkit.web.converter import convert_html_to_markdown, html_to_markdown
from convkit.web.geolocation import GeoLocation, GeoLocationProvider, IpApiGeoLocation

__all__ = [
    "convert_html_to_markdown",
    "html_to_markdown",
    "GeoLocation",
    "GeoLocationProvider",
    "IpApiGeoLocation",
]
