# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Unit tests for Utilities Logging."""

from __future__ import annotations

import io
import json
import logging

import pytest

from webcord.logging import (
    CONSOLE_PREFIX,
    LOG_FORMATS,
    LOG_LEVELS,
    configure_logging,
    format_console_message,
    structured_extra,
    wlog,
)
from webcord.model_types import LogComponent, LogFormat

pytestmark = pytest.mark.unit


def test_configure_logging_json_emits_structured_logs(capsys: pytest.CaptureFixture[str]) -> None:
    config = configure_logging("json")
    assert config.format is LogFormat.JSON
    logger = logging.getLogger("webcord.manifest")
    logger.info(
        "hello",
        extra=structured_extra(
            LogComponent.MANIFEST,
            path="/srv/app/package.json",
            code="WC303",
            details={"errors": 2},
        ),
    )
    captured = capsys.readouterr()
    lines = [line for line in captured.err.strip().splitlines() if line]
    payload = json.loads(lines[-1])
    assert payload["message"] == "hello"
    assert payload["level"] == "info"
    assert payload["logger"] == "webcord.manifest"
    assert payload["component"] == "manifest"
    assert payload["path"] == "/srv/app/package.json"
    assert payload["code"] == "WC303"
    assert payload["details"] == {"errors": 2}


def test_configure_logging_respects_level(capsys: pytest.CaptureFixture[str]) -> None:
    assert LOG_LEVELS == ("debug", "info", "warning", "error")
    assert LOG_FORMATS == ("text", "json")
    config = configure_logging("text", log_level="warning")
    assert config.level == logging.WARNING
    logger = logging.getLogger("webcord.cli")
    logger.info("hidden")
    logger.warning("shown")
    captured = capsys.readouterr()
    assert "hidden" not in captured.err
    assert "[WARNING] shown" in captured.err


def test_configure_logging_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WEBCORD_LOG_FORMAT", "json")
    monkeypatch.setenv("WEBCORD_LOG_LEVEL", "debug")
    config = configure_logging()
    assert config.format is LogFormat.JSON
    assert config.level == logging.DEBUG
    assert config.level_name == "debug"


def test_configure_logging_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown log format"):
        _ = configure_logging("yaml")


def test_structured_extra_skips_empty_fields() -> None:
    assert structured_extra(LogComponent.CONSOLE) == {"component": LogComponent.CONSOLE}
    assert structured_extra(LogComponent.CLI, details={}) == {"component": LogComponent.CLI}


def test_wlog_writes_prefixed_line(capsys: pytest.CaptureFixture[str]) -> None:
    wlog("Hello world")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == f"{CONSOLE_PREFIX} Hello world\n"


def test_wlog_colours_prefix_on_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    class _Tty(io.StringIO):
        def isatty(self) -> bool:
            return True

    stream = _Tty()
    monkeypatch.setattr("sys.stderr", stream)
    wlog("ready")
    assert stream.getvalue() == "\x1b[38;2;105;169;193m[WebCord]\x1b[0m ready\n"

    monkeypatch.setenv("NO_COLOR", "1")
    stream.seek(0)
    _ = stream.truncate()
    wlog("ready")
    assert stream.getvalue() == "[WebCord] ready\n"


def test_format_console_message_without_colour() -> None:
    assert format_console_message("msg", color=False) == "[WebCord] msg"
