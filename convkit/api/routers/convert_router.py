"""Conversion endpoints -- one POST route per converter."""

import time
from typing import Any, Callable, Optional

from fastapi import APIRouter

from convkit.api.schemas import (
    DateRequest,
    DateResponse,
    HashItem,
    HashRequest,
    HashResponse,
    HtmlResponse,
    HtmlToMarkdownRequest,
    HtmlToMarkdownResponse,
    ImageResponse,
    JsBeautifyRequest,
    JsBeautifyResponse,
    MarkdownRequest,
    SqlFormatRequest,
    SqlFormatResponse,
    SvgToReactRequest,
    SvgToReactResponse,
    TextRequest,
    TextResponse,
    TimestampRequest,
    TimestampResponse,
)
from convkit.codecs.base64_codec import decode_text, encode_text
from convkit.codecs.hashing import generate_hashes
from convkit.codecs.images import extract_image
from convkit.codecs.timestamps import date_to_timestamp, timestamp_to_date
from convkit.errors import ConverterError, PreconditionError
from convkit.formatters.js_format import beautify_js
from convkit.formatters.json_format import format_json, minify_json
from convkit.formatters.markdown_render import render_markdown
from convkit.formatters.sql_format import format_sql
from convkit.formatters.svg_react import svg_to_react
from convkit.security.guardrails import validate_input
from convkit.utils.logger import log_conversion
from convkit.web.converter import convert_html_to_markdown

router = APIRouter(prefix="/api/convert", tags=["convert"])


def _require(
    value: Optional[str], field: str, allow_blank: bool = False, check_length: bool = True
) -> str:
    ok, reason = validate_input(value, field, allow_blank=allow_blank, check_length=check_length)
    if not ok:
        raise PreconditionError(reason)
    return value


def _run(converter: str, source: str, convert: Callable[[], Any]) -> Any:
    """Run *convert* and record its size/timing in the conversion log."""
    start = time.time()
    try:
        result = convert()
    except ConverterError as exc:
        log_conversion(converter, len(source), 0, (time.time() - start) * 1000,
                       outcome=type(exc).__name__)
        raise
    output_chars = len(result) if isinstance(result, str) else 0
    log_conversion(converter, len(source), output_chars, (time.time() - start) * 1000)
    return result


@router.post("/html-to-markdown", response_model=HtmlToMarkdownResponse)
def html_to_markdown_route(request: HtmlToMarkdownRequest):
    html = _require(request.html, "HTML content", allow_blank=True, check_length=False)
    markdown = _run("html-to-markdown", html, lambda: convert_html_to_markdown(html))
    return HtmlToMarkdownResponse(markdown=markdown)


@router.post("/js-beautify", response_model=JsBeautifyResponse)
def js_beautify_route(request: JsBeautifyRequest):
    code = _require(request.code, "code", allow_blank=True)
    beautified = _run("js-beautifier", code, lambda: beautify_js(code))
    return JsBeautifyResponse(beautified=beautified)


@router.post("/base64/encode", response_model=TextResponse)
def base64_encode_route(request: TextRequest):
    text = _require(request.text, "text")
    return TextResponse(result=_run("base64-encode", text, lambda: encode_text(text)))


@router.post("/base64/decode", response_model=TextResponse)
def base64_decode_route(request: TextRequest):
    text = _require(request.text, "Base64 input")
    return TextResponse(result=_run("base64-decode", text, lambda: decode_text(text)))


@router.post("/base64-to-image", response_model=ImageResponse)
def base64_to_image_route(request: TextRequest):
    text = _require(request.text, "Base64 image")
    image = _run("base64-to-image", text, lambda: extract_image(text))
    return ImageResponse(
        data_url=image.data_url,
        mime_type=image.mime_type,
        size=image.size,
        size_label=image.size_label,
    )


@router.post("/hash", response_model=HashResponse)
def hash_route(request: HashRequest):
    text = _require(request.text, "text")
    results = _run("hash-generator", text, lambda: generate_hashes(text, request.algorithms))
    return HashResponse(results=[HashItem(algorithm=r.algorithm, hash=r.hash) for r in results])


@router.post("/json/format", response_model=TextResponse)
def json_format_route(request: TextRequest):
    text = _require(request.text, "JSON")
    return TextResponse(result=_run("json-format", text, lambda: format_json(text)))


@router.post("/json/minify", response_model=TextResponse)
def json_minify_route(request: TextRequest):
    text = _require(request.text, "JSON")
    return TextResponse(result=_run("json-minify", text, lambda: minify_json(text)))


@router.post("/sql-format", response_model=SqlFormatResponse)
def sql_format_route(request: SqlFormatRequest):
    sql = _require(request.sql, "SQL query")
    return SqlFormatResponse(formatted=_run("sql-formatter", sql, lambda: format_sql(sql)))


@router.post("/svg-to-react", response_model=SvgToReactResponse)
def svg_to_react_route(request: SvgToReactRequest):
    svg = _require(request.svg, "SVG code")
    component = _run(
        "svg-to-react",
        svg,
        lambda: svg_to_react(svg, request.component_name or "SvgIcon"),
    )
    return SvgToReactResponse(component=component)


@router.post("/timestamp-to-date", response_model=DateResponse)
def timestamp_to_date_route(request: TimestampRequest):
    raw = None if request.timestamp is None else str(request.timestamp)
    value = _require(raw, "timestamp")
    return DateResponse(date=_run("timestamp-to-date", value, lambda: timestamp_to_date(value)))


@router.post("/date-to-timestamp", response_model=TimestampResponse)
def date_to_timestamp_route(request: DateRequest):
    value = _require(request.date, "date")
    return TimestampResponse(
        timestamp=_run("date-to-timestamp", value, lambda: date_to_timestamp(value))
    )


@router.post("/markdown-to-html", response_model=HtmlResponse)
def markdown_to_html_route(request: MarkdownRequest):
    text = _require(request.markdown, "Markdown")
    return HtmlResponse(html=_run("markdown-viewer", text, lambda: render_markdown(text)))
