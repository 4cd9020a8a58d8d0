"""Request / response models for the HTTP API.

Request fields are optional so that a missing field reaches the converter
and is reported with its own message instead of a schema error.
"""

from typing import List, Optional, Union

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str


class HtmlToMarkdownRequest(BaseModel):
    html: Optional[str] = None


class HtmlToMarkdownResponse(BaseModel):
    markdown: str


class JsBeautifyRequest(BaseModel):
    code: Optional[str] = None


class JsBeautifyResponse(BaseModel):
    beautified: str


class TextRequest(BaseModel):
    text: Optional[str] = None


class TextResponse(BaseModel):
    result: str


class ImageResponse(BaseModel):
    data_url: str
    mime_type: str
    size: int
    size_label: str


class HashRequest(BaseModel):
    text: Optional[str] = None
    algorithms: Optional[List[str]] = None


class HashItem(BaseModel):
    algorithm: str
    hash: str


class HashResponse(BaseModel):
    results: List[HashItem]


class SqlFormatRequest(BaseModel):
    sql: Optional[str] = None


class SqlFormatResponse(BaseModel):
    formatted: str


class SvgToReactRequest(BaseModel):
    svg: Optional[str] = None
    component_name: Optional[str] = None


class SvgToReactResponse(BaseModel):
    component: str


class TimestampRequest(BaseModel):
    timestamp: Optional[Union[int, str]] = None


class DateResponse(BaseModel):
    date: str


class DateRequest(BaseModel):
    date: Optional[str] = None


class TimestampResponse(BaseModel):
    timestamp: int


class MarkdownRequest(BaseModel):
    markdown: Optional[str] = None


class HtmlResponse(BaseModel):
    html: str


class GeoLocationResponse(BaseModel):
    ip: str
    country: str
    country_code: str
    region: str
    region_name: str
    city: str
    zip: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: str
    isp: str
    org: str
    as_name: str


class ConverterInfoResponse(BaseModel):
    id: str
    title: str
    description: str
    path: str
