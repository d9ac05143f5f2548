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

"""Structured logging utilities and the developer-console helper for webcord."""

from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Final

from webcord.compat import UTC, TypedDict, Unpack, override
from webcord.model_types import LogComponent, LogFormat

if TYPE_CHECKING:
    from typing import TextIO

ROOT_LOGGER_NAME: Final[str] = "webcord"
LOG_FORMAT_ENV: Final[str] = "WEBCORD_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "WEBCORD_LOG_LEVEL"
NO_COLOR_ENV: Final[str] = "NO_COLOR"

CONSOLE_PREFIX: Final[str] = "[WebCord]"
CONSOLE_PREFIX_COLOR: Final[str] = "#69A9C1"
ANSI_RESET: Final[str] = "\x1b[0m"

_LEVELS_BY_NAME: Final[dict[str, int]] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

LOG_FORMATS: Final[tuple[str, ...]] = tuple(format_.value for format_ in LogFormat)
LOG_LEVELS: Final[tuple[str, ...]] = tuple(_LEVELS_BY_NAME)
STRUCTURED_FIELDS: Final[tuple[str, ...]] = ("component", "path", "code", "details")
CHILD_LOGGERS: Final[tuple[str, ...]] = ("webcord.cli", "webcord.console", "webcord.manifest")

console_logger: logging.Logger = logging.getLogger("webcord.console")


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Logging setup applied by ``configure_logging``."""

    format: LogFormat
    level: int
    level_name: str


class JSONLogFormatter(logging.Formatter):
    """One JSON object per record, carrying the webcord structured fields."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({field: getattr(record, field) for field in STRUCTURED_FIELDS if hasattr(record, field)})
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _resolve_format(log_format: LogFormat | str | None) -> LogFormat:
    raw = log_format if log_format is not None else os.getenv(LOG_FORMAT_ENV)
    if not raw:
        return LogFormat.TEXT
    return raw if isinstance(raw, LogFormat) else LogFormat.from_str(raw)


def _resolve_level(log_level: str | int | None, fallback: str) -> tuple[int, str]:
    raw = log_level if log_level is not None else (os.getenv(LOG_LEVEL_ENV) or fallback)
    if isinstance(raw, int):
        return raw, logging.getLevelName(raw).lower()
    name = raw.strip().lower()
    if name not in _LEVELS_BY_NAME:
        name = fallback
    return _LEVELS_BY_NAME[name], name


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: str | int | None = None,
    fallback_level: str = "info",
) -> LogConfig:
    """Install a single stderr handler on the ``webcord`` logger tree.

    Args:
        log_format: ``text`` or ``json``. ``None`` reads ``WEBCORD_LOG_FORMAT``
            and falls back to ``text``.
        log_level: Level name or number. ``None`` reads ``WEBCORD_LOG_LEVEL``
            and falls back to ``fallback_level``.
        fallback_level: Level used when neither an argument nor the
            environment names a known level.

    Returns:
        The applied ``LogConfig``.

    Raises:
        ValueError: If the log format is unknown.
    """
    selected_format = _resolve_format(log_format)
    level_value, level_name = _resolve_level(log_level, fallback_level)

    handler = logging.StreamHandler()
    if selected_format is LogFormat.JSON:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level_value)
    root_logger.propagate = False
    for child in CHILD_LOGGERS:
        logging.getLogger(child).setLevel(level_value)
    return LogConfig(format=selected_format, level=level_value, level_name=level_name)


class _StructuredLogBase(TypedDict):
    component: LogComponent


class StructuredLogExtra(_StructuredLogBase, total=False):
    """Structured logging extras accepted by webcord log records."""

    path: str
    code: str
    details: Mapping[str, object]


class _StructuredLogKwargs(TypedDict, total=False):
    path: str | os.PathLike[str]
    code: str
    details: Mapping[str, object]


def structured_extra(
    component: LogComponent,
    **kwargs: Unpack[_StructuredLogKwargs],
) -> StructuredLogExtra:
    """Return a consistently typed ``logging.extra`` payload.

    Args:
        component: Logical logging component for the record.
        **kwargs: Optional structured fields (path, error code, details).

    Returns:
        Mapping suitable for the ``extra`` parameter when emitting log records.
    """
    extra: StructuredLogExtra = {"component": component}
    path = kwargs.get("path")
    if path is not None:
        extra["path"] = os.fspath(path)
    code = kwargs.get("code")
    if code:
        extra["code"] = str(code)
    details = kwargs.get("details")
    if isinstance(details, Mapping) and details:
        extra["details"] = dict(details)
    return extra


def _hex_to_ansi(color: str) -> str:
    value = color.lstrip("#")
    red, green, blue = (int(value[index : index + 2], 16) for index in (0, 2, 4))
    return f"\x1b[38;2;{red};{green};{blue}m"


def _supports_color(stream: TextIO) -> bool:
    if os.getenv(NO_COLOR_ENV):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty is not None and isatty())


def format_console_message(msg: str, *, color: bool) -> str:
    """Return ``msg`` with the WebCord console prefix.

    Args:
        msg: Message to decorate.
        color: Whether to wrap the prefix in a 24-bit ANSI colour sequence.

    Returns:
        Single line ready to be written to the console.
    """
    prefix = f"{_hex_to_ansi(CONSOLE_PREFIX_COLOR)}{CONSOLE_PREFIX}{ANSI_RESET}" if color else CONSOLE_PREFIX
    return f"{prefix} {msg}"


def wlog(msg: str) -> None:
    """Output a fancy log message in the diagnostic console (stderr)."""
    stream = sys.stderr
    _ = stream.write(format_console_message(msg, color=_supports_color(stream)) + "\n")
    console_logger.debug(msg, extra=structured_extra(LogComponent.CONSOLE))


__all__ = [
    "CONSOLE_PREFIX",
    "CONSOLE_PREFIX_COLOR",
    "LOG_FORMATS",
    "LOG_LEVELS",
    "LogConfig",
    "StructuredLogExtra",
    "configure_logging",
    "format_console_message",
    "structured_extra",
    "wlog",
]
