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

"""Common exception hierarchy for flexset."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from pydantic import ValidationError

__all__ = [
    "ElementDecodeError",
    "FlexsetError",
    "FlexsetTypeError",
    "FlexsetValidationError",
    "InvalidSettingsError",
    "SettingsReadError",
]


class FlexsetError(Exception):
    """Base error for all flexset exceptions."""


class FlexsetValidationError(FlexsetError, ValueError):
    """Raised when input data fails validation checks."""


class FlexsetTypeError(FlexsetError, TypeError):
    """Raised when input data has an unexpected type."""


class ElementDecodeError(FlexsetValidationError):
    """Raised when a collection element cannot be decoded into a string."""

    def __init__(self, index: int, value: object, reason: str) -> None:
        """Initialize the exception with the failing element.

        Args:
            index: Position of the element in the collection's stored order.
            value: The raw element that failed to decode.
            reason: Human-readable decoder message.
        """
        self.index = index
        self.value = value
        self.reason = reason
        super().__init__(f"Element {index} ({value!r}) is not a string: {reason}")


class InvalidSettingsError(FlexsetValidationError):
    """Raised when flexset settings fail validation."""

    def __init__(self, error: ValidationError, *, source: str | None = None) -> None:
        """Initialize the exception with the underlying validation error.

        Args:
            error: The pydantic validation error.
            source: Where the settings came from, if known.
        """
        self.error = error
        self.source = source
        location = f" from {source}" if source else ""
        super().__init__(f"Invalid flexset settings{location}: {error}")


class SettingsReadError(FlexsetValidationError):
    """Raised when a settings file cannot be read or parsed."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The settings file that could not be read.
            error: The underlying exception that caused the failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")
