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

"""Guarded access to the application's ``package.json``.

Only five properties (``name``, ``author``, ``contributors``, ``homepage`` and
``repository``) are ever exposed; everything else in the manifest stays
behind this package.

Key components:
    - PackageJsonModel: Pydantic model validating the allow-listed subset
    - PackageJsonProperties: Immutable trusted projection
    - get_package_json_properties: Read, validate and project a manifest file
"""

from __future__ import annotations

from .errors import (
    PACKAGE_JSON_FILENAME,
    PackageJsonDecodeError,
    PackageJsonError,
    PackageJsonReadError,
    PackageJsonValidationError,
)
from .loader import (
    PACKAGE_JSON_ENV,
    default_package_json_path,
    get_package_json_properties,
    package_json_properties,
    parse_package_json,
    read_package_json,
)
from .models import (
    ALLOWED_PROPERTIES,
    PackageJsonModel,
    PersonModel,
    RepositoryModel,
    is_package_json_complete,
    is_person,
    package_json_json_schema,
    validate_package_json_payload,
)
from .properties import PackageJsonProperties, Person, Repository, format_person
from .typed import PackageJsonData, PersonRecord, RepositoryRecord

__all__ = [
    "ALLOWED_PROPERTIES",
    "PACKAGE_JSON_ENV",
    "PACKAGE_JSON_FILENAME",
    "PackageJsonData",
    "PackageJsonDecodeError",
    "PackageJsonError",
    "PackageJsonModel",
    "PackageJsonProperties",
    "PackageJsonReadError",
    "PackageJsonValidationError",
    "Person",
    "PersonModel",
    "PersonRecord",
    "Repository",
    "RepositoryModel",
    "RepositoryRecord",
    "default_package_json_path",
    "format_person",
    "get_package_json_properties",
    "is_package_json_complete",
    "is_person",
    "package_json_json_schema",
    "package_json_properties",
    "parse_package_json",
    "read_package_json",
    "validate_package_json_payload",
]
