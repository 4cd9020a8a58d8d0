"""SVG markup -> typed React (TSX) component."""

import re

from convkit.errors import PreconditionError

DEFAULT_COMPONENT_NAME = "SvgIcon"

INVALID_SVG_MESSAGE = "Not valid SVG code."
INVALID_NAME_MESSAGE = "Component name must be a valid identifier."

# SVG attributes and their JSX spelling.
JSX_ATTRIBUTES = {
    "class": "className",
    "stroke-width": "strokeWidth",
    "stroke-linecap": "strokeLinecap",
    "stroke-linejoin": "strokeLinejoin",
    "fill-rule": "fillRule",
    "clip-rule": "clipRule",
    "stroke-dasharray": "strokeDasharray",
    "stroke-dashoffset": "strokeDashoffset",
    "font-family": "fontFamily",
    "font-size": "fontSize",
    "text-anchor": "textAnchor",
    "stop-color": "stopColor",
    "stop-opacity": "stopOpacity",
    "fill-opacity": "fillOpacity",
    "stroke-opacity": "strokeOpacity",
}

_SVG_OPEN_TAG_RE = re.compile(r"<svg([^>]*)>")
_WIDTH_RE = re.compile(r'width="[^"]*"')
_HEIGHT_RE = re.compile(r'height="[^"]*"')
_CLASS_NAME_RE = re.compile(r'className="[^"]*"')

COMPONENT_TEMPLATE = """import {{ forwardRef, SVGProps }} from 'react';

interface {name}Props {{
  className?: string;
  width?: number | string;
  height?: number | string;
}}

const {name} = forwardRef<SVGSVGElement, {name}Props>((props, ref) => {{
  const {{ className, width, height, ...rest }} = props;

  return (
    {jsx}
  );
}});

{name}.displayName = '{name}';

export default {name};"""


def _size_props(match: re.Match) -> str:
    attributes = _WIDTH_RE.sub("width={width}", match.group(1), count=1)
    attributes = _HEIGHT_RE.sub("height={height}", attributes, count=1)
    attributes = _CLASS_NAME_RE.sub("className={className}", attributes, count=1)
    return f"<svg{attributes}>"


def svg_to_jsx(svg: str) -> str:
    """Rename SVG attributes for JSX and expose className/width/height as props."""
    jsx = svg
    for attribute, prop in JSX_ATTRIBUTES.items():
        jsx = jsx.replace(f"{attribute}=", f"{prop}=")
    return _SVG_OPEN_TAG_RE.sub(_size_props, jsx, count=1)


def svg_to_react(svg: str, component_name: str = DEFAULT_COMPONENT_NAME) -> str:
    if not svg or "<svg" not in svg.strip().lower():
        raise PreconditionError(INVALID_SVG_MESSAGE)
    name = component_name or DEFAULT_COMPONENT_NAME
    if not name.isidentifier():
        raise PreconditionError(INVALID_NAME_MESSAGE)
    return COMPONENT_TEMPLATE.format(name=name, jsx=svg_to_jsx(svg))
