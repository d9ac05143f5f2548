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

"""TypedDict definitions for the allow-listed ``package.json`` subset.

These typed dictionaries describe the plain-data form of the trusted
projection. Runtime validation lives in ``models.py``; the immutable value
handed to the rest of the application lives in ``properties.py``.
"""

from __future__ import annotations

from typing import TypeAlias

from webcord.compat import NotRequired, TypedDict


class PersonRecordRequired(TypedDict):
    """Required fields of a structured person entry.

    Attributes:
        name: Display name of the person.
    """

    name: str


class PersonRecord(PersonRecordRequired, total=False):
    """Structured author/contributor entry.

    Attributes:
        email: Optional contact address.
        url: Optional personal homepage.
    """

    email: str
    url: str


class RepositoryRecord(TypedDict):
    """Structured source-control reference.

    Attributes:
        type: Repository kind (e.g. ``git``).
        url: Repository location (e.g. ``git+https://example.com``).
    """

    type: str
    url: str


PersonData: TypeAlias = "str | PersonRecord"
RepositoryData: TypeAlias = "str | RepositoryRecord"


class PackageJsonData(TypedDict):
    """Plain-data view of the allow-listed ``package.json`` properties.

    Attributes:
        name: NodeJS-friendly application name.
        author: Application author.
        contributors: Optional list of code contributors.
        homepage: Application homepage.
        repository: Application repository.
    """

    name: str
    author: PersonData
    contributors: NotRequired[list[PersonData]]
    homepage: str
    repository: RepositoryData


__all__ = [
    "PackageJsonData",
    "PersonData",
    "PersonRecord",
    "RepositoryData",
    "RepositoryRecord",
]
