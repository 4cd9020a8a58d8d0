"""Markdown -> HTML preview rendering."""

import markdown

EXTENSIONS = ["tables", "fenced_code", "sane_lists"]


def render_markdown(text: str) -> str:
    if not text or not text.strip():
        return ""
    return markdown.markdown(text, extensions=EXTENSIONS, output_format="html")
