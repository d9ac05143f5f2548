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

"""Load the trusted ``package.json`` projection from disk.

The manifest is read synchronously, parsed as JSON, validated and projected
onto the allow-list. Any failure raises a ``PackageJsonError``; nothing is
returned unless the whole pipeline succeeds.
"""

from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Final

from webcord.logging import structured_extra
from webcord.model_types import LogComponent

from .errors import PACKAGE_JSON_FILENAME, PackageJsonDecodeError, PackageJsonReadError, PackageJsonValidationError
from .models import validate_package_json_payload
from .properties import PackageJsonProperties

if TYPE_CHECKING:
    from pydantic import JsonValue

PACKAGE_JSON_ENV: Final[str] = "WEBCORD_PACKAGE_JSON"
PACKAGE_ROOT: Final[Path] = Path(__file__).resolve().parents[1]

logger: logging.Logger = logging.getLogger("webcord.manifest")


def default_package_json_path() -> Path:
    """Return the manifest location used when no explicit path is given.

    ``WEBCORD_PACKAGE_JSON`` wins when set; otherwise the file sits two
    directories above the ``webcord`` package (the project root in a src
    layout).
    """
    override = os.getenv(PACKAGE_JSON_ENV)
    if override:
        return Path(override).expanduser()
    return PACKAGE_ROOT.parents[1] / PACKAGE_JSON_FILENAME


def parse_package_json(raw: bytes | str, *, path: str | os.PathLike[str] | None = None) -> dict[str, JsonValue]:
    """Parse raw manifest content into a JSON object.

    Args:
        raw: File content; bytes are decoded as UTF-8 (UTF-16/32 with a BOM are detected).
        path: Source file, used only in error messages.

    Returns:
        The top-level JSON object.

    Raises:
        PackageJsonDecodeError: If the content is not JSON or not an object.
    """
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise PackageJsonDecodeError(path, str(exc)) from exc
    if not isinstance(payload, dict):
        raise PackageJsonDecodeError(path, f"top-level value must be an object, got {type(payload).__name__}")
    return payload


def read_package_json(path: str | os.PathLike[str]) -> dict[str, JsonValue]:
    """Read and parse a manifest file.

    Args:
        path: Manifest file to read.

    Returns:
        The parsed top-level JSON object.

    Raises:
        PackageJsonReadError: If the file cannot be read.
        PackageJsonDecodeError: If the file is not a JSON object.
    """
    manifest_path = Path(path)
    try:
        raw = manifest_path.read_bytes()
    except OSError as exc:
        raise PackageJsonReadError(manifest_path, exc.strerror or str(exc)) from exc
    logger.debug(
        "Read %s bytes from %s",
        len(raw),
        manifest_path,
        extra=structured_extra(LogComponent.MANIFEST, path=manifest_path),
    )
    return parse_package_json(raw, path=manifest_path)


def get_package_json_properties(path: str | os.PathLike[str] | None = None) -> PackageJsonProperties:
    """Acquire the allow-listed properties of ``package.json``.

    To avoid leaking other properties (like ``scripts``) to less-trusted code,
    the result has a fixed set of fields that cannot be exceeded.

    Args:
        path: Manifest to read; defaults to ``default_package_json_path()``.

    Returns:
        Immutable ``PackageJsonProperties``.

    Raises:
        PackageJsonReadError: If the file cannot be read.
        PackageJsonDecodeError: If the file is not a JSON object.
        PackageJsonValidationError: If a required property is missing or mistyped.
    """
    manifest_path = default_package_json_path() if path is None else Path(path)
    payload = read_package_json(manifest_path)
    try:
        data = validate_package_json_payload(payload, path=os.fspath(manifest_path))
    except PackageJsonValidationError as exc:
        logger.warning(
            "Rejected %s (%s errors)",
            manifest_path,
            exc.validation_error.error_count(),
            extra=structured_extra(
                LogComponent.MANIFEST,
                path=manifest_path,
                details={"errors": exc.validation_error.error_count()},
            ),
        )
        raise
    properties = PackageJsonProperties.from_data(data)
    logger.info(
        "Loaded package properties for %s",
        properties.name,
        extra=structured_extra(LogComponent.MANIFEST, path=manifest_path),
    )
    return properties


@lru_cache(maxsize=1)
def package_json_properties() -> PackageJsonProperties:
    """Return the process-wide properties, loading them on first use."""
    return get_package_json_properties()


__all__ = [
    "PACKAGE_JSON_ENV",
    "default_package_json_path",
    "get_package_json_properties",
    "package_json_properties",
    "parse_package_json",
    "read_package_json",
]
