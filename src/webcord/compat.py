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

"""Compatibility shims for Python 3.10+.

Modules that need version-tolerant behaviour import these names from here
instead of branching on the interpreter version themselves:

- UTC: a unified timezone instance for UTC
- StrEnum: a consistent base class for string-valued enums
- Typing helpers: NotRequired, TypedDict, Unpack, override

Deps:
- typing_extensions (for py<3.12)
"""

from __future__ import annotations

import datetime as _dt
import enum as _enum
from datetime import timezone as _timezone
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from typing_extensions import NotRequired, TypedDict, Unpack, override
else:
    try:
        from typing import TypedDict, override  # py>=3.12
    except ImportError:
        from typing_extensions import TypedDict, override

    try:
        from typing import NotRequired, Unpack  # py>=3.11
    except ImportError:  # py<3.11
        from typing_extensions import NotRequired, Unpack


# Avoid "from datetime import UTC" (pyright flags it on a py310 target)
UTC = getattr(_dt, "UTC", _timezone.utc)


class _StrEnumBase(str, _enum.Enum):
    """Type base for StrEnum-like enums."""

    @override
    def __str__(self) -> str:
        return str(self.value)


_StrEnum = getattr(_enum, "StrEnum", None)

if _StrEnum is None:

    class _CompatStrEnum(_StrEnumBase):
        """Backport of enum.StrEnum for Python 3.10."""

    StrEnum: type[_StrEnumBase] = _CompatStrEnum
else:
    StrEnum: type[_StrEnumBase] = cast("type[_StrEnumBase]", _StrEnum)


__all__ = [
    "UTC",
    "NotRequired",
    "StrEnum",
    "TypedDict",
    "Unpack",
    "override",
]
