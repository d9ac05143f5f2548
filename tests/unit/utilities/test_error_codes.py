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

"""Unit tests for Utilities Error Codes."""

from __future__ import annotations

import pytest
from pydantic import ValidationError
from pydantic_core import PydanticCustomError

from webcord.error_codes import error_code_catalog, error_code_for
from webcord.exceptions import WebCordError, WebCordTypeError, WebCordValidationError
from webcord.manifest.errors import (
    PackageJsonDecodeError,
    PackageJsonError,
    PackageJsonReadError,
    PackageJsonValidationError,
)

pytestmark = pytest.mark.unit


def test_error_code_for_known_hierarchy() -> None:
    assert error_code_for(WebCordError("x")) == "WC000"
    assert error_code_for(WebCordValidationError("x")) == "WC100"
    assert error_code_for(WebCordTypeError("x")) == "WC101"
    assert error_code_for(PackageJsonError("x")) == "WC300"
    assert error_code_for(PackageJsonReadError("package.json", "missing")) == "WC301"
    assert error_code_for(PackageJsonDecodeError(None, "bad")) == "WC302"
    custom = PydanticCustomError("package_json.null", "Field may be omitted but must not be null", {})
    ve = ValidationError.from_exception_data(
        "PackageJsonModel",
        [
            {
                "type": custom,
                "loc": ("contributors",),
                "input": None,
            },
        ],
    )
    assert error_code_for(PackageJsonValidationError(ve)) == "WC303"


def test_error_code_for_unknown_defaults_to_base() -> None:
    class CustomError(RuntimeError):
        pass

    assert error_code_for(CustomError("x")) == "WC000"


def test_error_code_catalog_uniqueness() -> None:
    catalog = error_code_catalog()
    codes = list(catalog.values())
    assert len(set(codes)) == len(codes)
    assert catalog["webcord.exceptions.WebCordError"] == "WC000"
    assert catalog["webcord.manifest.errors.PackageJsonValidationError"] == "WC303"


def test_package_json_errors_are_value_errors() -> None:
    error = PackageJsonReadError("/srv/app/package.json", "No such file or directory")
    assert isinstance(error, ValueError)
    assert error.path == "/srv/app/package.json"
    assert str(error) == "Unable to read '/srv/app/package.json': No such file or directory"
