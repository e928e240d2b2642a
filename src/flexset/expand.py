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

"""Conversion between optional framework collections and plain string lists."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from pydantic import TypeAdapter, ValidationError

from flexset.exceptions import ElementDecodeError
from flexset.logging_utils import structured_extra
from flexset.model_types import DecodePolicy, LogComponent
from flexset.optional import OptionalCollection

if TYPE_CHECKING:
    from collections.abc import Hashable, Iterable

    from flexset.config import FlexsetSettings

logger: logging.Logger = logging.getLogger("flexset.expand")

_STRING_ADAPTER: Final[TypeAdapter[str]] = TypeAdapter(str)


@dataclass(slots=True, frozen=True)
class DecodeContext:
    """Element decoder used while expanding a collection.

    Attributes:
        policy: What to do when an element is not a string.
    """

    policy: DecodePolicy = DecodePolicy.LENIENT

    @classmethod
    def from_settings(cls, settings: FlexsetSettings) -> DecodeContext:
        return cls(policy=settings.decode_policy)

    def decode_element(self, raw: Hashable, index: int) -> str:
        """Decode one raw element into a string.

        Args:
            raw: Element as stored in the collection.
            index: Position of the element, used for error reporting.

        Returns:
            The decoded string.

        Raises:
            ElementDecodeError: If ``raw`` is not a string.
        """
        try:
            return _STRING_ADAPTER.validate_python(raw, strict=True)
        except ValidationError as exc:
            reason = exc.errors()[0]["msg"]
            raise ElementDecodeError(index, raw, reason) from exc


DEFAULT_CONTEXT: Final[DecodeContext] = DecodeContext()


def expand_framework_string_set(
    collection: OptionalCollection,
    context: DecodeContext | None = None,
) -> list[str] | None:
    """Expand an optional collection into a list of strings.

    Args:
        collection: Collection taken from the plan, config or state.
        context: Decoder to use; defaults to a lenient ``DecodeContext``.

    Returns:
        ``None`` when the collection is absent or unknown, or when an element
        fails to decode under the lenient policy. Otherwise the decoded
        elements in stored order; an empty present collection yields ``[]``.

    Raises:
        ElementDecodeError: If an element fails to decode under the strict
            policy.
    """
    if collection.is_null() or collection.is_unknown():
        return None
    decoder = context or DEFAULT_CONTEXT
    values: list[str] = []
    for index, raw in enumerate(collection.elements):
        try:
            values.append(decoder.decode_element(raw, index))
        except ElementDecodeError as exc:
            if decoder.policy is DecodePolicy.STRICT:
                raise
            logger.debug(
                "Dropping collection with undecodable element at index %d: %s",
                index,
                exc.reason,
                extra=structured_extra(
                    component=LogComponent.EXPAND,
                    operation="expand_framework_string_set",
                    state=collection.state,
                    policy=decoder.policy,
                    count=len(collection),
                    index=index,
                ),
            )
            return None
    return values


def flatten_framework_string_set(values: Iterable[str] | None) -> OptionalCollection:
    """Wrap API-returned strings back into an optional collection.

    Args:
        values: Strings reported by the remote API, or ``None`` when the API
            omitted the field.

    Returns:
        ``absent()`` for ``None``; otherwise a present collection of the
        unique values in their original order.
    """
    if values is None:
        return OptionalCollection.absent()
    return OptionalCollection.present(values)


__all__ = [
    "DEFAULT_CONTEXT",
    "DecodeContext",
    "expand_framework_string_set",
    "flatten_framework_string_set",
]
