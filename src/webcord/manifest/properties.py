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

"""Immutable trusted projection of ``package.json``.

``PackageJsonProperties`` is the only manifest shape handed to the rest of
the application. It is built from validated data, copies every value (lists
become tuples, records become frozen dataclasses) and has no slot for any
field outside the allow-list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from .typed import PackageJsonData, PersonData, PersonRecord, RepositoryData, RepositoryRecord


@dataclass(slots=True, frozen=True)
class Person:
    """Structured author or contributor.

    Attributes:
        name: Display name.
        email: Optional contact address.
        url: Optional personal homepage.
    """

    name: str
    email: str | None = None
    url: str | None = None

    @property
    def display_name(self) -> str:
        """Return the npm-style ``Name <email> (url)`` form."""
        parts = [self.name]
        if self.email is not None:
            parts.append(f"<{self.email}>")
        if self.url is not None:
            parts.append(f"({self.url})")
        return " ".join(parts)

    def to_dict(self) -> PersonRecord:
        record: PersonRecord = {"name": self.name}
        if self.email is not None:
            record["email"] = self.email
        if self.url is not None:
            record["url"] = self.url
        return record


@dataclass(slots=True, frozen=True)
class Repository:
    """Structured source-control reference.

    Attributes:
        type: Repository kind (e.g. ``git``).
        url: Repository location.
    """

    type: str
    url: str

    def to_dict(self) -> RepositoryRecord:
        return {"type": self.type, "url": self.url}


PersonValue: TypeAlias = "str | Person"
RepositoryValue: TypeAlias = "str | Repository"


def format_person(person: PersonValue) -> str:
    """Render a person entry as a single line of text."""
    return person if isinstance(person, str) else person.display_name


def _person_from_data(value: PersonData) -> PersonValue:
    if isinstance(value, str):
        return value
    return Person(name=value["name"], email=value.get("email"), url=value.get("url"))


def _repository_from_data(value: RepositoryData) -> RepositoryValue:
    if isinstance(value, str):
        return value
    return Repository(type=value["type"], url=value["url"])


def _person_to_data(value: PersonValue) -> PersonData:
    return value if isinstance(value, str) else value.to_dict()


@dataclass(slots=True, frozen=True)
class PackageJsonProperties:
    """Allow-listed ``package.json`` properties safe to expose to less-trusted code.

    Attributes:
        name: NodeJS-friendly application name.
        author: Application author.
        homepage: Application homepage.
        repository: Application repository.
        contributors: Code contributors, or ``None`` when the manifest has none.
    """

    name: str
    author: PersonValue
    homepage: str
    repository: RepositoryValue
    contributors: tuple[PersonValue, ...] | None = None

    @classmethod
    def from_data(cls, data: PackageJsonData) -> PackageJsonProperties:
        """Build the projection from validated plain data.

        Args:
            data: Output of ``validate_package_json_payload``.

        Returns:
            A new immutable ``PackageJsonProperties``.
        """
        contributors = data.get("contributors")
        return cls(
            name=data["name"],
            author=_person_from_data(data["author"]),
            homepage=data["homepage"],
            repository=_repository_from_data(data["repository"]),
            contributors=None if contributors is None else tuple(_person_from_data(item) for item in contributors),
        )

    def to_dict(self) -> PackageJsonData:
        """Return the projection as plain JSON-compatible data.

        ``contributors`` is omitted when unset.
        """
        data: PackageJsonData = {
            "name": self.name,
            "author": _person_to_data(self.author),
            "homepage": self.homepage,
            "repository": self.repository if isinstance(self.repository, str) else self.repository.to_dict(),
        }
        if self.contributors is not None:
            data["contributors"] = [_person_to_data(item) for item in self.contributors]
        return data


__all__ = [
    "PackageJsonProperties",
    "Person",
    "PersonValue",
    "Repository",
    "RepositoryValue",
    "format_person",
]
