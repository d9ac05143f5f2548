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

"""webcord - globally-used helpers for the WebCord desktop client.

Provides the ``[WebCord]`` developer-console logger and guarded access to the
allow-listed properties of the application's ``package.json``.
"""

from __future__ import annotations

from .error_codes import error_code_for
from .exceptions import WebCordError, WebCordTypeError, WebCordValidationError
from .logging import configure_logging, wlog
from .manifest import (
    PackageJsonDecodeError,
    PackageJsonError,
    PackageJsonProperties,
    PackageJsonReadError,
    PackageJsonValidationError,
    Person,
    Repository,
    get_package_json_properties,
    is_package_json_complete,
    is_person,
    package_json_properties,
)

__version__ = "0.1.0"

__all__ = [
    "PackageJsonDecodeError",
    "PackageJsonError",
    "PackageJsonProperties",
    "PackageJsonReadError",
    "PackageJsonValidationError",
    "Person",
    "Repository",
    "WebCordError",
    "WebCordTypeError",
    "WebCordValidationError",
    "__version__",
    "configure_logging",
    "error_code_for",
    "get_package_json_properties",
    "is_package_json_complete",
    "is_person",
    "package_json_properties",
    "wlog",
]
