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

"""Cross-version compatibility shims for flexset.

Modules that need version-tolerant behavior import these names from here
rather than branching on ``sys.version_info`` themselves.

Re-exported symbols:

- StrEnum: stdlib ``enum.StrEnum`` on 3.11+, a ``str``/``Enum`` backport on 3.10
- UTC: ``datetime.UTC`` or ``datetime.timezone.utc``
- tomllib: stdlib TOML parser with a fallback to ``tomli``
- TypedDict, Unpack, override: from ``typing_extensions``
"""

from __future__ import annotations

import datetime as _dt
import enum as _enum
import sys
from datetime import timezone as _timezone
from typing import TYPE_CHECKING, cast

from typing_extensions import TypedDict, Unpack, override

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover - exercised on 3.10 only
    import tomli as tomllib

UTC = getattr(_dt, "UTC", _timezone.utc)


class _StrEnumBase(str, _enum.Enum):
    """Type base for StrEnum-like enums."""


if TYPE_CHECKING:

    class StrEnum(_StrEnumBase):
        """Type-checker view of StrEnum."""

        @override
        def __str__(self) -> str: ...

else:
    _STR_ENUM = getattr(_enum, "StrEnum", None)

    if _STR_ENUM is None:  # pragma: no cover - Python 3.10

        class _CompatStrEnum(_StrEnumBase):
            """Backport of enum.StrEnum for Python 3.10."""

            @override
            def __str__(self) -> str:
                return str(self.value)

        StrEnum: type[_StrEnumBase] = _CompatStrEnum
    else:
        StrEnum = cast("type[_StrEnumBase]", _STR_ENUM)


__all__ = ["UTC", "StrEnum", "TypedDict", "Unpack", "override", "tomllib"]
