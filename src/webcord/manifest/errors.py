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

"""Errors raised while reading and validating ``package.json``.

Every failure along the read -> parse -> validate path is a
``PackageJsonError``; the subclasses only record which stage failed.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

from webcord.exceptions import WebCordValidationError

if TYPE_CHECKING:
    from pydantic import ValidationError
    from pydantic_core import ErrorDetails

PACKAGE_JSON_FILENAME: Final[str] = "package.json"


def _label(path: str | os.PathLike[str] | None) -> str:
    return PACKAGE_JSON_FILENAME if path is None else os.fspath(path)


class PackageJsonError(WebCordValidationError):
    """Base configuration error for an unusable ``package.json``.

    Attributes:
        path: Location of the offending file, when known.
    """

    def __init__(self, message: str, *, path: str | os.PathLike[str] | None = None) -> None:
        super().__init__(message)
        self.path = path


class PackageJsonReadError(PackageJsonError):
    """Raised when ``package.json`` cannot be read from disk."""

    def __init__(self, path: str | os.PathLike[str], reason: str) -> None:
        """Initialize with the unreadable path and the OS-level reason.

        Args:
            path: File that could not be read.
            reason: Human-readable cause (e.g. ``No such file or directory``).
        """
        self.reason = reason
        super().__init__(f"Unable to read '{_label(path)}': {reason}", path=path)


class PackageJsonDecodeError(PackageJsonError):
    """Raised when ``package.json`` is not a JSON object."""

    def __init__(self, path: str | os.PathLike[str] | None, reason: str) -> None:
        """Initialize with the offending path and the parser message.

        Args:
            path: File that failed to parse, or ``None`` for in-memory payloads.
            reason: Parser or shape message.
        """
        self.reason = reason
        super().__init__(f"File '{_label(path)}' is not a valid JSON document: {reason}", path=path)


class PackageJsonValidationError(PackageJsonError):
    """Validation error for ``package.json`` payloads.

    Wraps the Pydantic ``ValidationError`` so callers keep field locations
    while still catching a ``ValueError``.

    Attributes:
        validation_error: The underlying Pydantic ValidationError.
    """

    def __init__(
        self,
        validation_error: ValidationError,
        *,
        path: str | os.PathLike[str] | None = None,
    ) -> None:
        """Initialize with a Pydantic ValidationError.

        Args:
            validation_error: The Pydantic validation error to wrap.
            path: File the payload was read from, when known.
        """
        message = (
            f"File '{_label(path)}' does not contain all required properties "
            f"or some of them are of invalid type!\n{validation_error}"
        )
        super().__init__(message, path=path)
        self.validation_error = validation_error

    def errors(self) -> list[ErrorDetails]:
        """Return the individual Pydantic error entries."""
        return self.validation_error.errors()


__all__ = [
    "PACKAGE_JSON_FILENAME",
    "PackageJsonDecodeError",
    "PackageJsonError",
    "PackageJsonReadError",
    "PackageJsonValidationError",
]
