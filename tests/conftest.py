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

"""Pytest entry point that wires shared fixtures and markers."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from webcord.logging import CHILD_LOGGERS, LOG_FORMAT_ENV, LOG_LEVEL_ENV  # noqa: E402
from webcord.manifest import PACKAGE_JSON_ENV, package_json_properties  # noqa: E402

WritePackageJson = Callable[[Any], Path]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")


@pytest.fixture(autouse=True)
def _isolate_webcord_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    monkeypatch.delenv(PACKAGE_JSON_ENV, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    package_json_properties.cache_clear()
    yield
    package_json_properties.cache_clear()
    root_logger = logging.getLogger("webcord")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    for child in CHILD_LOGGERS:
        logging.getLogger(child).setLevel(logging.NOTSET)


@pytest.fixture
def sample_package_json() -> dict[str, Any]:
    """Return a complete manifest carrying fields outside the allow-list."""
    return {
        "name": "App",
        "author": "Jane Doe",
        "homepage": "https://app.example",
        "repository": {"type": "git", "url": "https://example.com/app.git"},
        "scripts": {"build": "..."},
    }


@pytest.fixture
def write_package_json(tmp_path: Path) -> WritePackageJson:
    """Return a helper writing JSON-serialisable payloads (or raw text) to ``package.json``."""

    def _write(payload: Any) -> Path:  # noqa: ANN401
        path = tmp_path / "package.json"
        text = payload if isinstance(payload, str) else json.dumps(payload)
        _ = path.write_text(text, encoding="utf-8")
        return path

    return _write
