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

"""Common Hypothesis strategies for property-based tests."""

from __future__ import annotations

import hypothesis.strategies as st

from flexset.optional import OptionalCollection

__all__ = [
    "identifier_lists",
    "identifiers",
    "non_string_elements",
    "optional_collections",
    "unresolved_collections",
]


def identifiers() -> st.SearchStrategy[str]:
    """Return a strategy that yields scope-like identifiers."""
    return st.from_regex(r"[a-zA-Z0-9_.\-]{1,24}", fullmatch=True)


def identifier_lists(min_size: int = 0, max_size: int = 12) -> st.SearchStrategy[list[str]]:
    """Return a strategy that yields lists drawn from a small identifier pool.

    A small pool makes overlaps between independently drawn lists likely.
    """
    pool = st.sampled_from(["admin", "viewer", "Admin", "mail.send", "stats.read", "", " viewer"])
    return st.lists(st.one_of(pool, identifiers()), min_size=min_size, max_size=max_size)


def unresolved_collections() -> st.SearchStrategy[OptionalCollection]:
    """Collections that carry no concrete value."""
    return st.sampled_from([OptionalCollection.absent(), OptionalCollection.unknown()])


def optional_collections() -> st.SearchStrategy[OptionalCollection]:
    """Collections in any of the three states, present ones holding strings."""
    present = st.lists(st.text(max_size=16), max_size=10).map(OptionalCollection.present)
    return st.one_of(unresolved_collections(), present)


def non_string_elements() -> st.SearchStrategy[object]:
    """Hashable values that must never decode as strings.

    Returns:
        Hypothesis strategy emitting ints, bools, floats, bytes and ``None``.
    """
    return st.one_of(
        st.integers(),
        st.booleans(),
        st.floats(allow_nan=False),
        st.binary(max_size=8),
        st.none(),
    )
