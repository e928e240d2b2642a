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

"""Subset checks between identifier collections.

Used to decide whether the scopes (or other identifiers) a configuration asks
for are already present in what the remote API reports. Comparison is exact
and case-sensitive; nothing is trimmed or normalised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flexset.collection_utils import select_preserve

if TYPE_CHECKING:
    from collections.abc import Iterable


def contains_all(required: Iterable[str], available: Iterable[str]) -> bool:
    """Return whether every required element appears in ``available``.

    ``available`` is indexed once, so the check is linear in the size of both
    inputs.

    Args:
        required: Identifiers that must be present.
        available: Identifiers that are present.

    Returns:
        ``True`` if ``required`` is a subset of ``available``. An empty
        ``required`` is always contained.
    """
    index = frozenset(available)
    return all(item in index for item in required)


def missing_elements(required: Iterable[str], available: Iterable[str]) -> list[str]:
    """Return the required elements that ``available`` lacks.

    Args:
        required: Identifiers that must be present.
        available: Identifiers that are present.

    Returns:
        Unique missing identifiers in the order they appear in ``required``.
    """
    index = frozenset(available)
    return select_preserve(required, lambda item: item not in index)


def disallowed_elements(candidates: Iterable[str], disallowed: Iterable[str]) -> list[str]:
    """Return the candidates that appear in ``disallowed``.

    Args:
        candidates: Identifiers supplied by the configuration.
        disallowed: Identifiers that may not be set explicitly, e.g. scopes
            the API assigns automatically.

    Returns:
        Unique offending identifiers in candidate order.
    """
    index = frozenset(disallowed)
    return select_preserve(candidates, lambda item: item in index)


__all__ = ["contains_all", "disallowed_elements", "missing_elements"]
