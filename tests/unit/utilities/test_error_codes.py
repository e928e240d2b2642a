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

"""Unit tests for Utilities Error Codes."""

from __future__ import annotations

import re
from pathlib import Path

import pytest
from pydantic import ValidationError

from flexset.config import FlexsetSettings
from flexset.error_codes import error_code_catalog, error_code_for
from flexset.exceptions import (
    ElementDecodeError,
    FlexsetError,
    FlexsetTypeError,
    FlexsetValidationError,
    InvalidSettingsError,
    SettingsReadError,
)

pytestmark = pytest.mark.unit

REPO_ROOT = Path(__file__).resolve().parents[3]


def _settings_validation_error() -> ValidationError:
    try:
        _ = FlexsetSettings.model_validate({"decode_policy": "sloppy"})
    except ValidationError as exc:
        return exc
    message = "expected validation failure"
    raise AssertionError(message)


def test_error_code_for_known_hierarchy() -> None:
    assert error_code_for(FlexsetError("x")) == "FX000"
    assert error_code_for(FlexsetValidationError("x")) == "FX100"
    assert error_code_for(FlexsetTypeError("x")) == "FX101"
    assert error_code_for(ElementDecodeError(0, None, "bad")) == "FX110"
    assert error_code_for(InvalidSettingsError(_settings_validation_error())) == "FX120"
    assert error_code_for(SettingsReadError(Path("flexset.toml"), OSError("nope"))) == "FX121"


def test_error_code_for_unknown_defaults_to_base() -> None:
    class CustomError(RuntimeError):
        pass

    assert error_code_for(CustomError("x")) == "FX000"


def test_validation_errors_remain_value_errors() -> None:
    assert isinstance(ElementDecodeError(0, 1, "bad"), ValueError)
    assert isinstance(FlexsetTypeError("x"), TypeError)


def test_error_code_catalog_uniqueness() -> None:
    catalog = error_code_catalog()
    codes = list(catalog.values())
    assert len(set(codes)) == len(codes)
    assert catalog["flexset.exceptions.FlexsetError"] == "FX000"


def test_error_code_documentation_is_in_sync() -> None:
    catalog = error_code_catalog()
    doc_path = REPO_ROOT / "docs" / "EXCEPTIONS.md"
    content = doc_path.read_text(encoding="utf-8")
    documented_codes = set(re.findall(r"FX\d{3}", content))
    registry_codes = set(catalog.values())
    assert registry_codes == documented_codes
