"""Unit tests for the command-line entry point."""

import io

import pytest

import main


def _run(argv, capsys, stdin=None, monkeypatch=None):
    if stdin is not None:
        monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    args = main.build_parser().parse_args(argv)
    code = main.run_command(args)
    out, err = capsys.readouterr()
    return code, out, err


def test_html_to_markdown_from_file(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text("<body><pre class='language-js'>let a=1;</pre><p>hello</p></body>", encoding="utf-8")
    code, out, _ = _run(["html-to-markdown", str(page)], capsys)
    assert code == 0
    assert out == "```js\nlet a=1;\n```\n\nhello\n"


def test_html_to_markdown_from_stdin(capsys, monkeypatch):
    code, out, _ = _run(["html-to-markdown"], capsys, stdin="<p>from stdin</p>", monkeypatch=monkeypatch)
    assert code == 0
    assert out.strip() == "from stdin"


def test_empty_input_is_an_error(capsys, monkeypatch):
    code, out, err = _run(["html-to-markdown", "-"], capsys, stdin="", monkeypatch=monkeypatch)
    assert code == 1
    assert out == ""
    assert "No HTML content provided" in err


def test_missing_file_is_an_error(tmp_path, capsys):
    code, _, err = _run(["sql-format", str(tmp_path / "missing.sql")], capsys)
    assert code == 1
    assert err.startswith("Error:")


def test_hash_with_algorithms(capsys, monkeypatch):
    code, out, _ = _run(["hash", "-a", "md5", "-a", "sha1"], capsys, stdin="abc", monkeypatch=monkeypatch)
    assert code == 0
    assert out.splitlines() == [
        "MD5: 900150983cd24fb0d6963f7d28e17f72",
        "SHA-1: a9993e364706816aba3e25717850c26c9cd0d89d",
    ]


def test_json_minify(capsys, monkeypatch):
    code, out, _ = _run(["json-format", "--minify"], capsys, stdin='{ "a": [1, 2] }', monkeypatch=monkeypatch)
    assert code == 0
    assert out.strip() == '{"a":[1,2]}'


def test_timestamps(capsys):
    _, out, _ = _run(["timestamp-to-date", "1704067200"], capsys)
    assert out.strip() == "2024-01-01T00:00:00"
    _, out, _ = _run(["date-to-timestamp", "2024-01-01T00:00:00Z"], capsys)
    assert out.strip() == "1704067200"


def test_image_to_base64(tmp_path, capsys):
    image = tmp_path / "pixel.gif"
    image.write_bytes(b"GIF89a")
    code, out, _ = _run(["image-to-base64", str(image)], capsys)
    assert code == 0
    assert out.splitlines() == ["image/gif | 6 Bytes", "data:image/gif;base64,R0lGODlh"]


def test_list(capsys):
    code, out, _ = _run(["list"], capsys)
    assert code == 0
    assert out.startswith("html-to-markdown")


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main([])
    assert excinfo.value.code == 1
