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

"""Property-based tests for package.json validation."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from webcord.manifest.models import ALLOWED_PROPERTIES, is_package_json_complete, is_person, validate_package_json_payload

pytestmark = pytest.mark.property

_NON_TEXT = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    st.lists(st.text(max_size=5), max_size=3),
    st.dictionaries(st.text(max_size=5), st.integers(), max_size=3),
)


def person_records() -> st.SearchStrategy[dict[str, Any]]:
    """Strategy emitting structured people with optional text contact fields."""
    return st.fixed_dictionaries(
        {"name": st.text(max_size=20)},
        optional={"email": st.text(max_size=20), "url": st.text(max_size=20)},
    )


def people() -> st.SearchStrategy[Any]:
    return st.one_of(st.text(max_size=20), person_records())


def manifests() -> st.SearchStrategy[dict[str, Any]]:
    """Strategy emitting valid manifests padded with fields outside the allow-list."""
    repository = st.one_of(
        st.text(max_size=30),
        st.fixed_dictionaries({"type": st.text(max_size=5), "url": st.text(max_size=30)}),
    )
    extras = st.dictionaries(
        st.text(min_size=1, max_size=10).filter(lambda key: key not in ALLOWED_PROPERTIES),
        st.one_of(st.text(max_size=10), st.integers(), st.none()),
        max_size=5,
    )
    base = st.fixed_dictionaries(
        {
            "name": st.text(max_size=20),
            "author": people(),
            "homepage": st.text(max_size=30),
            "repository": repository,
        },
        optional={"contributors": st.lists(people(), max_size=4)},
    )
    return st.tuples(base, extras).map(lambda pair: {**pair[1], **pair[0]})


@given(st.text())
def test_any_text_is_a_person(value: str) -> None:
    assert is_person(value)


@given(person_records())
def test_records_with_text_fields_are_people(value: dict[str, Any]) -> None:
    assert is_person(value)


@given(st.text(max_size=20), st.sampled_from(["email", "url"]), _NON_TEXT)
def test_non_text_contact_fields_are_rejected(name: str, field: str, value: object) -> None:
    assert not is_person({"name": name, field: value})


@given(manifests())
def test_projection_never_exceeds_allow_list(payload: dict[str, Any]) -> None:
    assert is_package_json_complete(payload)
    data = validate_package_json_payload(payload)
    assert set(data) <= set(ALLOWED_PROPERTIES)
    assert ("contributors" in data) == ("contributors" in payload)
    assert data["name"] == payload["name"]
