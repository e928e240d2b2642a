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

"""Rendering of string sequences for error messages and schema descriptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

QUOTE: Final[str] = "`"
SEPARATOR: Final[str] = ", "
EMPTY_PLACEHOLDER: Final[str] = "(none)"


def quote_and_join(items: Iterable[str]) -> str:
    """Quote each item with backticks and join them with ``", "``.

    The output is meant for humans only, so backticks inside an item are not
    escaped.

    Args:
        items: Strings to render, in display order.

    Returns:
        The rendered fragment, or ``""`` when ``items`` is empty.
    """
    return SEPARATOR.join(f"{QUOTE}{item}{QUOTE}" for item in items)


def describe_elements(label: str, items: Iterable[str]) -> str:
    """Render ``items`` behind a label, e.g. ``"missing scopes: `a`, `b`"``."""
    rendered = quote_and_join(items)
    return f"{label}: {rendered or EMPTY_PLACEHOLDER}"


__all__ = ["EMPTY_PLACEHOLDER", "QUOTE", "SEPARATOR", "describe_elements", "quote_and_join"]
