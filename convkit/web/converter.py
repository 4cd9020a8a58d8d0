"""HTML to Markdown extraction.

A document is handled one of two ways, decided once after parsing:

* structured -- it contains ``markdown-section`` containers.  A container
  carrying the author's Markdown source in ``data-markdown-raw`` is trusted
  verbatim; otherwise its rendered text is used.  Nothing outside the
  containers is emitted.
* freeform -- anything else.  ``<pre>`` blocks become fenced code blocks,
  followed by the remaining body text, deduplicated.

Fragments are joined with a blank line.
"""

import re
from enum import Enum
from typing import Iterable, List, Optional, Set

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from convkit.errors import ConversionError, PreconditionError
from convkit.utils.logger import get_logger

log = get_logger(__name__)

SECTION_CLASS = "markdown-section"
RAW_MARKDOWN_ATTR = "data-markdown-raw"
LANGUAGE_PREFIX = "language-"
FENCE = "```"

NO_HTML_MESSAGE = "No HTML content provided"
CONVERSION_FAILED_MESSAGE = "Failed to convert HTML to Markdown"

# Non-greedy: the first closing fence ends the block.
_FENCED_BLOCK_RE = re.compile(r"(```.*?```)", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")

# Never contribute body text in the freeform path.
_SKIPPED_TAGS = frozenset({"pre", "script", "style", "template", "noscript", "head"})


class DocumentKind(Enum):
    STRUCTURED = "structured"
    FREEFORM = "freeform"


def clean_text(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def split_fenced(markdown: str) -> List[str]:
    """Split raw Markdown into prose and fenced-code fragments.

    Fenced runs are kept exactly as written, fences included.  Prose runs are
    trimmed and dropped when empty.  An opening fence without a partner is
    treated as prose.
    """
    text = markdown.strip()
    if FENCE not in text:
        return [text] if text else []

    fragments: List[str] = []
    # re.split with a capture group alternates prose / fenced / prose ...
    for index, run in enumerate(_FENCED_BLOCK_RE.split(text)):
        if index % 2:
            fragments.append(run)
        else:
            trimmed = run.strip()
            if trimmed:
                fragments.append(trimmed)
    return fragments


def code_language(element: Tag) -> str:
    """First ``language-<tag>`` class token of *element*, else of its ``<code>``."""
    candidates = [element]
    inner = element.find("code")
    if isinstance(inner, Tag):
        candidates.append(inner)
    for candidate in candidates:
        for token in candidate.get("class") or []:
            if token.startswith(LANGUAGE_PREFIX):
                return token[len(LANGUAGE_PREFIX):]
    return ""


def code_block(element: Tag) -> str:
    """Render a ``<pre>`` element as a fenced Markdown code block."""
    return f"{FENCE}{code_language(element)}\n{element.get_text().strip()}\n{FENCE}"


def classify(soup: BeautifulSoup) -> DocumentKind:
    if soup.find(class_=SECTION_CLASS) is not None:
        return DocumentKind.STRUCTURED
    return DocumentKind.FREEFORM


def _is_text(node) -> bool:
    # Comments, CDATA, doctypes etc. are PreformattedString subclasses.
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def _text_of(tag: Tag) -> str:
    """Descendant text of *tag* in document order, minus skipped subtrees."""
    parts: List[str] = []
    # Explicit stack: nesting depth is unbounded in real documents.
    stack = list(reversed(tag.contents))
    while stack:
        node = stack.pop()
        if isinstance(node, Tag):
            if node.name not in _SKIPPED_TAGS:
                stack.extend(reversed(node.contents))
        elif _is_text(node):
            parts.append(str(node))
    return "".join(parts)


def _structured_fragments(sections: Iterable[Tag]) -> List[str]:
    fragments: List[str] = []
    for section in sections:
        raw = section.get(RAW_MARKDOWN_ATTR)
        if raw:
            fragments.extend(split_fenced(raw))
            continue
        text = clean_text(section.get_text())
        if text:
            fragments.append(text)
    return fragments


def _freeform_fragments(soup: BeautifulSoup) -> List[str]:
    fragments: List[str] = []
    seen: Set[str] = set()

    for pre in soup.find_all("pre"):
        block = code_block(pre)
        fragments.append(block)
        seen.add(block)
        seen.add(clean_text(pre.get_text()))

    container = soup.body or soup
    for child in container.children:
        if isinstance(child, Tag):
            if child.name in _SKIPPED_TAGS:
                continue
            text = clean_text(_text_of(child))
        elif _is_text(child):
            text = clean_text(str(child))
        else:
            continue
        if text and text not in seen:
            fragments.append(text)
            seen.add(text)

    return fragments


def extract_fragments(html: str) -> List[str]:
    """Parse *html* and return the ordered Markdown fragments."""
    if not html or not html.strip():
        return []

    soup = BeautifulSoup(html, "html.parser")
    kind = classify(soup)
    log.debug("Extracting Markdown from %s document (%d chars)", kind.value, len(html))

    if kind is DocumentKind.STRUCTURED:
        return _structured_fragments(soup.find_all(class_=SECTION_CLASS))
    return _freeform_fragments(soup)


def html_to_markdown(html: str) -> str:
    """Convert an HTML string to Markdown ("" when nothing is extracted)."""
    return "\n\n".join(extract_fragments(html))


def convert_html_to_markdown(html: Optional[str]) -> str:
    """Checked entry point used by the API and CLI."""
    if not html:
        raise PreconditionError(NO_HTML_MESSAGE)
    try:
        return html_to_markdown(html)
    except Exception as exc:
        log.exception("Error converting HTML to Markdown")
        raise ConversionError(CONVERSION_FAILED_MESSAGE) from exc
