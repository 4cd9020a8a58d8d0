"""Unit tests for logging helpers."""

import dataclasses
import json
import logging

from convkit.utils import config
from convkit.utils.logger import get_logger, log_conversion


def test_get_logger_configures_once():
    first = get_logger("convkit.tests.sample")
    second = get_logger("convkit.tests.sample")
    assert first is second
    handlers = list(first.handlers)
    get_logger("convkit.tests.sample")
    assert first.handlers == handlers
    assert any(isinstance(h, logging.StreamHandler) for h in handlers)


def test_log_conversion_appends_jsonl(tmp_path, monkeypatch):
    path = tmp_path / "audit" / "conversions.jsonl"
    monkeypatch.setattr(
        config, "settings", dataclasses.replace(config.settings, conversion_log_file=str(path))
    )

    log_conversion("html-to-markdown", 120, 40, 3.456)
    log_conversion("json-format", 5, 0, 1.0, outcome="PreconditionError")

    records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [r["converter"] for r in records] == ["html-to-markdown", "json-format"]
    assert records[0]["elapsed_ms"] == 3.5
    assert records[0]["outcome"] == "ok"
    assert records[1]["outcome"] == "PreconditionError"
    assert "content" not in records[0]


def test_log_conversion_disabled(tmp_path, monkeypatch):
    monkeypatch.setattr(
        config, "settings", dataclasses.replace(config.settings, conversion_log_file="")
    )
    monkeypatch.chdir(tmp_path)
    log_conversion("hash-generator", 1, 1, 1.0)
    assert list(tmp_path.iterdir()) == []
