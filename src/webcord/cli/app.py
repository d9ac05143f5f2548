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

"""CLI entry point for inspecting the application's ``package.json``."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Final

from webcord import __version__
from webcord.error_codes import error_code_for
from webcord.logging import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra, wlog
from webcord.manifest import (
    PackageJsonError,
    PackageJsonProperties,
    default_package_json_path,
    format_person,
    get_package_json_properties,
    package_json_json_schema,
)
from webcord.model_types import LogComponent, LogFormat
from webcord.services import validate_package_json_file

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    CommandHandler = Callable[[argparse.Namespace], int]

logger: logging.Logger = logging.getLogger("webcord.cli")

WEBCORD_VERSION: Final[str] = __version__
EXIT_INVALID: Final[int] = 2


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code from the executed command handler.
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        print(f"webcord-manifest {WEBCORD_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    _initialize_logging(args.log_format, args.log_level)
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    try:
        return handler(args)
    except PackageJsonError as exc:
        code = error_code_for(exc)
        logger.debug("Command %s failed", args.command, extra=structured_extra(LogComponent.CLI, code=code))
        wlog(f"({code}) {exc}")
        return EXIT_INVALID


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webcord-manifest",
        description="Inspect the allow-listed properties of the WebCord package.json.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _register_logging_options(parser, default=None)
    _ = parser.add_argument("--version", action="store_true", help="Print the version and exit.")
    subparsers = parser.add_subparsers(dest="command")

    show = subparsers.add_parser(
        "show",
        help="Print the trusted package properties",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _register_logging_options(show, default=argparse.SUPPRESS)
    _register_path_argument(show)
    _ = show.add_argument("--out", choices=("json", "text"), default="json", help="Output format.")
    _ = show.add_argument("--indent", type=int, default=2, help="Indentation level for JSON output")

    validate = subparsers.add_parser(
        "validate",
        help="Report every validation problem in a package.json",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _register_logging_options(validate, default=argparse.SUPPRESS)
    _register_path_argument(validate)

    schema = subparsers.add_parser(
        "schema",
        help="Emit the JSON schema of the accepted package.json subset",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _register_logging_options(schema, default=argparse.SUPPRESS)
    _ = schema.add_argument("--output", type=Path, default=None, help="Write the schema to a path instead of stdout")
    _ = schema.add_argument("--indent", type=int, default=2, help="Indentation level for JSON output")
    return parser


def _register_logging_options(parser: argparse.ArgumentParser, *, default: str | None) -> None:
    # Subcommands use SUPPRESS so an unset flag keeps the value parsed before the command.
    _ = parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=default,
        help="Logging output format (default: $WEBCORD_LOG_FORMAT or text).",
    )
    _ = parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=default,
        help="Verbosity of logged events (default: $WEBCORD_LOG_LEVEL or warning).",
    )


def _register_path_argument(parser: argparse.ArgumentParser) -> None:
    _ = parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="package.json to read (default: $WEBCORD_PACKAGE_JSON or the project root)",
    )


def _initialize_logging(log_format: str | None, log_level: str | None) -> None:
    try:
        _ = configure_logging(log_format, log_level=log_level, fallback_level="warning")
    except ValueError as exc:
        _ = configure_logging(LogFormat.TEXT, log_level=log_level, fallback_level="warning")
        logger.warning("%s; falling back to text logs", exc)


def _command_handlers() -> dict[str, CommandHandler]:
    return {
        "schema": _execute_schema,
        "show": _execute_show,
        "validate": _execute_validate,
    }


def _render_text(properties: PackageJsonProperties) -> list[str]:
    lines = [
        f"name: {properties.name}",
        f"author: {format_person(properties.author)}",
        f"homepage: {properties.homepage}",
    ]
    repository = properties.repository
    lines.append(f"repository: {repository if isinstance(repository, str) else f'{repository.url} ({repository.type})'}")
    if properties.contributors:
        lines.append("contributors:")
        lines.extend(f"  - {format_person(person)}" for person in properties.contributors)
    return lines


def _execute_show(args: argparse.Namespace) -> int:
    properties = get_package_json_properties(args.path)
    if args.out == "text":
        for line in _render_text(properties):
            print(line)
    else:
        print(json.dumps(properties.to_dict(), indent=args.indent, ensure_ascii=False))
    return 0


def _execute_validate(args: argparse.Namespace) -> int:
    path = args.path if args.path is not None else default_package_json_path()
    result = validate_package_json_file(path)
    for err in result.payload_errors:
        wlog(f"({err.code}) validation error at {err.location}: {err.message}")
    if result.is_valid:
        wlog(f"{path} is valid")
        return 0
    return EXIT_INVALID


def _execute_schema(args: argparse.Namespace) -> int:
    schema_text = json.dumps(package_json_json_schema(), indent=args.indent)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        _ = args.output.write_text(schema_text + "\n", encoding="utf-8")
    else:
        print(schema_text)
    return 0


__all__ = ["main"]
