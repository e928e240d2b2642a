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

"""String enumerations shared across flexset.

- Collection states for the three-valued optional collection
- Decode policies for collection expansion
- Log formats and components for structured logging
"""

from __future__ import annotations

from flexset.compat import StrEnum


class CollectionState(StrEnum):
    """States an optional collection can be in.

    Attributes:
        ABSENT: The attribute was never set (framework "null").
        UNKNOWN: The value is not resolved yet, e.g. computed at apply time.
        PRESENT: A concrete set of elements is available.
    """

    ABSENT = "absent"
    UNKNOWN = "unknown"
    PRESENT = "present"


class DecodePolicy(StrEnum):
    """How collection expansion reacts to an element that fails to decode.

    Attributes:
        LENIENT: Collapse the whole expansion to ``None``.
        STRICT: Raise ``ElementDecodeError`` naming the failing element.
    """

    LENIENT = "lenient"
    STRICT = "strict"

    @classmethod
    def from_str(cls, raw: str) -> DecodePolicy:
        """Create a DecodePolicy enum from a string value.

        Args:
            raw: String representation of the policy.

        Returns:
            DecodePolicy enum value.

        Raises:
            ValueError: If the string does not match any DecodePolicy value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown decode policy '{raw}'"
            raise ValueError(msg) from exc


class LogFormat(StrEnum):
    """Supported log output formats."""

    TEXT = "text"
    JSON = "json"


class LogComponent(StrEnum):
    """Logical components used to tag structured log records."""

    EXPAND = "expand"
    CONFIG = "config"


__all__ = ["CollectionState", "DecodePolicy", "LogComponent", "LogFormat"]
