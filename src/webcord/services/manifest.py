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

"""Report-style validation of ``package.json`` files.

Unlike ``get_package_json_properties``, which stops at the first failure,
these helpers collect every validation problem so a packaging defect can be
fixed in one pass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from webcord.error_codes import error_code_for
from webcord.logging import structured_extra
from webcord.manifest import PackageJsonValidationError, read_package_json, validate_package_json_payload
from webcord.model_types import LogComponent

if TYPE_CHECKING:
    import os

    from pydantic import JsonValue

logger: logging.Logger = logging.getLogger("webcord.manifest")


@dataclass(slots=True)
class PackageJsonPayloadError:
    """Structured representation of a payload validation error.

    Attributes:
        code: Error code identifying the validation failure type.
        location: Dotted path to the field that failed validation.
        message: Human-readable error description.
    """

    code: str
    location: str
    message: str


@dataclass(slots=True)
class PackageJsonValidationResult:
    """Complete validation result for a manifest file.

    Attributes:
        payload: Raw dictionary loaded from the manifest.
        payload_errors: Validation errors, empty when the manifest is usable.
    """

    payload: dict[str, JsonValue]
    payload_errors: list[PackageJsonPayloadError]

    @property
    def is_valid(self) -> bool:
        return not self.payload_errors


def _validate_payload(payload: dict[str, JsonValue]) -> list[PackageJsonPayloadError]:
    try:
        _ = validate_package_json_payload(payload)
    except PackageJsonValidationError as exc:
        code = error_code_for(exc)
        errors: list[PackageJsonPayloadError] = []
        for err in exc.errors():
            location = ".".join(str(part) for part in err.get("loc", ())) or "<root>"
            message = err.get("msg", "invalid value")
            errors.append(PackageJsonPayloadError(code=code, location=location, message=message))
        return errors
    return []


def validate_package_json_file(path: str | os.PathLike[str]) -> PackageJsonValidationResult:
    """Validate a manifest file and collect every payload error.

    Args:
        path: Manifest file to validate.

    Returns:
        Validation result holding the raw payload and any errors.

    Raises:
        PackageJsonReadError: If the file cannot be read.
        PackageJsonDecodeError: If the file is not a JSON object.
    """
    payload = read_package_json(path)
    result = PackageJsonValidationResult(payload=payload, payload_errors=_validate_payload(payload))
    logger.info(
        "Validated %s (payload_errors=%s)",
        path,
        len(result.payload_errors),
        extra=structured_extra(
            LogComponent.MANIFEST,
            path=path,
            details={"payload_errors": len(result.payload_errors)},
        ),
    )
    return result


__all__ = ["PackageJsonPayloadError", "PackageJsonValidationResult", "validate_package_json_file"]
