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

"""Unit tests for collection helpers."""

from __future__ import annotations

import pytest

from flexset.collection_utils import dedupe_preserve, select_preserve

pytestmark = pytest.mark.unit


def test_dedupe_preserve_keeps_first_occurrence() -> None:
    assert dedupe_preserve(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
    assert dedupe_preserve([]) == []


def test_select_preserve_filters_and_dedupes() -> None:
    values = ["keep", "drop", "keep", "also"]

    assert select_preserve(values, lambda value: value != "drop") == ["keep", "also"]


def test_select_preserve_evaluates_predicate_once_per_value() -> None:
    calls: list[str] = []

    def _keep(value: str) -> bool:
        calls.append(value)
        return True

    _ = select_preserve(["x", "x", "y"], _keep)

    assert calls == ["x", "y"]
