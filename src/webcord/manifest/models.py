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

"""Pydantic models for the allow-listed ``package.json`` properties.

The models accept any well-formed manifest and ignore fields outside the
allow-list, so dumping a validated model can never leak keys such as
``scripts``. String fields are strict, so numbers, booleans and ``null`` are
never coerced into text.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Final, TypeAlias, cast

from pydantic import BaseModel, ConfigDict, StrictStr, TypeAdapter, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .errors import PackageJsonValidationError

if TYPE_CHECKING:
    from .typed import PackageJsonData

ALLOWED_PROPERTIES: Final[tuple[str, ...]] = ("name", "author", "contributors", "homepage", "repository")

ALLOW_LIST_MODEL_CONFIG: ConfigDict = ConfigDict(extra="ignore", frozen=True)


def _reject_null(value: object) -> object:
    if value is None:
        raise PydanticCustomError(
            "package_json.null",
            "Field may be omitted but must not be null",
        )
    return value


class PersonModel(BaseModel):
    """Structured author/contributor entry.

    Attributes:
        name: Display name of the person.
        email: Optional contact address.
        url: Optional personal homepage.
    """

    model_config: ClassVar[ConfigDict] = ALLOW_LIST_MODEL_CONFIG

    name: StrictStr
    email: StrictStr | None = None
    url: StrictStr | None = None

    @field_validator("email", "url", mode="before")
    @classmethod
    def _present_fields_are_text(cls, value: object) -> object:
        return _reject_null(value)


class RepositoryModel(BaseModel):
    """Structured source-control reference.

    Attributes:
        type: Repository kind (e.g. ``git``).
        url: Repository location.
    """

    model_config: ClassVar[ConfigDict] = ALLOW_LIST_MODEL_CONFIG

    type: StrictStr
    url: StrictStr


PersonField: TypeAlias = StrictStr | PersonModel
RepositoryField: TypeAlias = StrictStr | RepositoryModel


class PackageJsonModel(BaseModel):
    """Allow-listed subset of ``package.json``.

    Attributes:
        name: NodeJS-friendly application name.
        author: Application author.
        contributors: Optional ordered list of code contributors.
        homepage: Application homepage.
        repository: Application repository.
    """

    model_config: ClassVar[ConfigDict] = ALLOW_LIST_MODEL_CONFIG

    name: StrictStr
    author: PersonField
    contributors: list[PersonField] | None = None
    homepage: StrictStr
    repository: RepositoryField

    @field_validator("contributors", mode="before")
    @classmethod
    def _contributors_not_null(cls, value: object) -> object:
        return _reject_null(value)


_PERSON_ADAPTER: Final[TypeAdapter[Any]] = TypeAdapter(PersonField)


def is_person(value: object) -> bool:
    """Return whether ``value`` is a valid author/contributor entry.

    A bare string is always a person. A mapping must carry a string ``name``
    and, when present, string ``email`` and ``url`` fields.

    Args:
        value: Arbitrary value taken from a parsed manifest.

    Returns:
        True when the value validates as a person.
    """
    if isinstance(value, Mapping) and not isinstance(value, dict):
        value = dict(cast("Mapping[str, object]", value))
    try:
        _ = _PERSON_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True


def is_package_json_complete(value: object) -> bool:
    """Return whether ``value`` carries every allow-listed property with a valid type.

    Args:
        value: Parsed manifest payload.

    Returns:
        True when ``value`` is a mapping that validates against ``PackageJsonModel``.
    """
    if not isinstance(value, Mapping):
        return False
    try:
        _ = PackageJsonModel.model_validate(dict(cast("Mapping[str, object]", value)))
    except ValidationError:
        return False
    return True


def package_json_from_model(model: PackageJsonModel) -> PackageJsonData:
    """Convert a validated model into the plain-data projection.

    Args:
        model: Validated ``PackageJsonModel``.

    Returns:
        Allow-listed data with unset optional fields omitted.
    """
    data = model.model_dump(mode="python", exclude_none=True)
    return cast("PackageJsonData", data)


def validate_package_json_payload(
    payload: object,
    *,
    path: str | None = None,
) -> PackageJsonData:
    """Validate a parsed manifest and project it onto the allow-list.

    Args:
        payload: Arbitrary parsed JSON data.
        path: Source file, used only in error messages.

    Returns:
        Validated ``PackageJsonData`` holding only the allow-listed keys.

    Raises:
        PackageJsonValidationError: If a required property is missing or mistyped.
    """
    if isinstance(payload, Mapping) and not isinstance(payload, dict):
        payload = dict(cast("Mapping[str, object]", payload))
    try:
        model = PackageJsonModel.model_validate(payload)
    except ValidationError as exc:
        raise PackageJsonValidationError(exc, path=path) from exc
    return package_json_from_model(model)


def package_json_json_schema() -> dict[str, Any]:
    """Return the JSON Schema describing the accepted ``package.json`` subset.

    Returns:
        Dictionary containing the JSON Schema definition.
    """
    schema = PackageJsonModel.model_json_schema()
    schema["$schema"] = "https://json-schema.org/draft-07/schema#"
    schema.setdefault("title", "PackageJsonProperties")
    return schema


__all__ = [
    "ALLOWED_PROPERTIES",
    "PackageJsonModel",
    "PersonModel",
    "RepositoryModel",
    "is_package_json_complete",
    "is_person",
    "package_json_from_model",
    "package_json_json_schema",
    "validate_package_json_payload",
]
