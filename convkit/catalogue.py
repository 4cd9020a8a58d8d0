"""Catalogue of the available converters, in display order."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ConverterInfo:
    id: str
    title: str
    description: str
    path: str


CONVERTERS: List[ConverterInfo] = [
    ConverterInfo("html-to-markdown", "HTML → Markdown", "Convert HTML to Markdown",
                  "/api/convert/html-to-markdown"),
    ConverterInfo("js-beautifier", "JavaScript Beautifier", "Format JavaScript code",
                  "/api/convert/js-beautify"),
    ConverterInfo("json-formatter", "JSON Formatter", "Validate, pretty-print and minify JSON",
                  "/api/convert/json/format"),
    ConverterInfo("sql-formatter", "SQL Formatter", "Tidy up SQL queries",
                  "/api/convert/sql-format"),
    ConverterInfo("svg-to-react", "SVG → React", "Turn SVG markup into a React component",
                  "/api/convert/svg-to-react"),
    ConverterInfo("timestamp-converter", "Unix Timestamp ↔ Date",
                  "Convert between Unix timestamps and dates", "/api/convert/timestamp-to-date"),
    ConverterInfo("base64-to-image", "Base64 → Image", "Decode a Base64 image",
                  "/api/convert/base64-to-image"),
    ConverterInfo("base64-converter", "Base64 Encoder/Decoder", "Convert text to and from Base64",
                  "/api/convert/base64/encode"),
    ConverterInfo("hash-generator", "Hash Generator", "MD5, SHA-1, SHA-256 and more",
                  "/api/convert/hash"),
    ConverterInfo("ip-geolocation", "IP → Location", "Country, city and coordinates of an IP",
                  "/api/geolocation/{ip}"),
    ConverterInfo("markdown-viewer", "Markdown Viewer", "Render Markdown as HTML",
                  "/api/convert/markdown-to-html"),
]
