"""Unit tests for the JSON, SQL, JavaScript, SVG and Markdown formatters."""

import pytest

from convkit.errors import PreconditionError
from convkit.formatters.js_format import beautify_js, validate_js
from convkit.formatters.json_format import format_json, minify_json
from convkit.formatters.markdown_render import render_markdown
from convkit.formatters.sql_format import format_sql
from convkit.formatters.svg_react import svg_to_jsx, svg_to_react


class TestJson:
    def test_format_keeps_key_order(self):
        assert format_json('{"b":1,"a":[1,2]}') == '{\n  "b": 1,\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_minify(self):
        assert minify_json('{ "a" : [1, 2],\n "b": null }') == '{"a":[1,2],"b":null}'

    def test_non_ascii_kept(self):
        assert minify_json('{"k": "한글"}') == '{"k":"한글"}'

    def test_invalid(self):
        with pytest.raises(PreconditionError):
            format_json("{'single': 'quotes'}")


class TestSql:
    def test_keywords_upper_and_reindented(self):
        formatted = format_sql("select a, b from t where x = 1")
        assert formatted.startswith("SELECT a,")
        assert "\nFROM t" in formatted
        assert "\nWHERE x = 1" in formatted

    def test_blank_lines_between_queries(self):
        assert format_sql("select 1; select 2;") == "SELECT 1;\n\n\nSELECT 2;"

    def test_custom_gap(self):
        assert format_sql("select 1; select 2;", lines_between_queries=0) == "SELECT 1;\nSELECT 2;"

    def test_empty(self):
        with pytest.raises(PreconditionError, match="No SQL query provided"):
            format_sql("   ")


class TestJavaScript:
    def test_beautify(self):
        result = beautify_js("function f(a){return a+1}")
        assert result.startswith("function f(a) {\n")
        assert "    return a + 1" in result

    def test_custom_indent(self):
        result = beautify_js("function f(a){return a+1}", indent_size=2)
        assert "\n  return a + 1" in result

    def test_invalid_code(self):
        with pytest.raises(PreconditionError, match="Invalid JavaScript code"):
            beautify_js("function (")

    def test_empty(self):
        with pytest.raises(PreconditionError, match="No code provided"):
            beautify_js("")

    def test_jsx_is_valid(self):
        validate_js("const el = <div className='x'>hi</div>;")


SVG = (
    '<svg width="24" height="24" viewBox="0 0 24 24">'
    '<path stroke-width="2" stroke-linecap="round" fill-rule="evenodd" d="M0 0"/>'
    '<rect width="5" height="5"/>'
    "</svg>"
)


class TestSvgToReact:
    def test_attributes_renamed(self):
        jsx = svg_to_jsx(SVG)
        assert 'strokeWidth="2"' in jsx
        assert 'strokeLinecap="round"' in jsx
        assert 'fillRule="evenodd"' in jsx
        assert "stroke-width" not in jsx

    def test_only_root_size_becomes_props(self):
        jsx = svg_to_jsx(SVG)
        assert jsx.startswith('<svg width={width} height={height} viewBox="0 0 24 24">')
        assert '<rect width="5" height="5"/>' in jsx

    def test_class_renamed_everywhere(self):
        jsx = svg_to_jsx('<svg width="1"><path class="p" d="M0"/><g class="group"></g></svg>')
        assert '<path className="p" d="M0"/>' in jsx
        assert '<g className="group">' in jsx
        assert "class=" not in jsx

    def test_root_class_becomes_prop(self):
        jsx = svg_to_jsx('<svg class="icon" width="1"><path class="p" d="M0"/></svg>')
        assert jsx == '<svg className={className} width={width}><path className="p" d="M0"/></svg>'

    def test_component_template(self):
        component = svg_to_react(SVG)
        assert "import { forwardRef, SVGProps } from 'react';" in component
        assert "interface SvgIconProps {" in component
        assert "const SvgIcon = forwardRef<SVGSVGElement, SvgIconProps>((props, ref) => {" in component
        assert "SvgIcon.displayName = 'SvgIcon';" in component
        assert component.endswith("export default SvgIcon;")

    def test_custom_name(self):
        component = svg_to_react(SVG, "Logo")
        assert "Logo.displayName = 'Logo';" in component

    def test_rejects_non_svg(self):
        with pytest.raises(PreconditionError):
            svg_to_react("<div></div>")

    def test_rejects_bad_name(self):
        with pytest.raises(PreconditionError):
            svg_to_react(SVG, "my-icon")


class TestMarkdown:
    def test_heading_and_table(self):
        html = render_markdown("# Title\n\n| a | b |\n|---|---|\n| 1 | 2 |")
        assert "<h1>Title</h1>" in html
        assert "<table>" in html

    def test_fenced_code(self):
        html = render_markdown("```python\nprint(1)\n```")
        assert 'class="language-python"' in html

    def test_blank(self):
        assert render_markdown("  ") == ""
