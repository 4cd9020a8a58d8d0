"""Formatters module -- JSON, SQL, JavaScript, SVG->React, Markdown preview."""

from convkit.formatters.js_format import beautify_js
from convkit.formatters.json_format import format_json, minify_json
from convkit.formatters.markdown_render import render_markdown
from convkit.formatters.sql_format import format_sql
from convkit.formatters.svg_react import svg_to_react

__all__ = [
    "beautify_js",
    "format_json",
    "minify_json",
    "render_markdown",
    "format_sql",
    "svg_to_react",
]
