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

"""Three-state optional collection as handed over by the provider framework.

A set-valued attribute is either never set (``ABSENT``), not yet known
(``UNKNOWN``, e.g. computed during apply) or ``PRESENT`` with concrete
elements. A present-but-empty collection is a different value from an absent
one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from flexset.collection_utils import dedupe_preserve
from flexset.exceptions import FlexsetTypeError, FlexsetValidationError
from flexset.model_types import CollectionState

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable, Iterator


@dataclass(slots=True, frozen=True)
class OptionalCollection:
    """Tagged optional collection of raw (not yet decoded) elements.

    Attributes:
        state: Which of the three states the value is in.
        elements: Unique raw elements in stored order; always empty unless
            ``state`` is ``PRESENT``.
    """

    state: CollectionState
    elements: tuple[Hashable, ...] = field(default=())

    def __post_init__(self) -> None:
        if self.state is not CollectionState.PRESENT and self.elements:
            message = f"{self.state} collection cannot carry elements"
            raise FlexsetValidationError(message)

    @classmethod
    def absent(cls) -> OptionalCollection:
        """Return a collection that was never set."""
        return cls(CollectionState.ABSENT)

    @classmethod
    def unknown(cls) -> OptionalCollection:
        """Return a collection whose value is not resolved yet."""
        return cls(CollectionState.UNKNOWN)

    @classmethod
    def present(cls, elements: Iterable[Hashable]) -> OptionalCollection:
        """Return a concrete collection holding ``elements``.

        Duplicates are dropped keeping the first occurrence, matching set
        semantics while keeping the stored order stable. Elements must be
        hashable; nested lists or mappings from a decoded payload are rejected
        here rather than reaching expansion.

        Args:
            elements: Raw elements of the set.

        Returns:
            A ``PRESENT`` collection.

        Raises:
            FlexsetTypeError: If ``elements`` is a single ``str`` or ``bytes``,
                or if any element is unhashable.
        """
        if isinstance(elements, (str, bytes)):
            message = f"elements must be an iterable of values, not {type(elements).__name__}"
            raise FlexsetTypeError(message)
        items = tuple(elements)
        for index, item in enumerate(items):
            try:
                _ = hash(item)
            except TypeError as exc:
                message = f"element {index} ({item!r}) is unhashable: {exc}"
                raise FlexsetTypeError(message) from exc
        return cls(CollectionState.PRESENT, tuple(dedupe_preserve(items)))

    def is_null(self) -> bool:
        return self.state is CollectionState.ABSENT

    def is_unknown(self) -> bool:
        return self.state is CollectionState.UNKNOWN

    def is_known(self) -> bool:
        return self.state is CollectionState.PRESENT

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.elements)


__all__ = ["OptionalCollection"]
