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

"""flexset - set helpers for infrastructure-as-code resource providers.

Expands the framework's three-state optional collections into plain string
lists, renders lists for diagnostics and checks identifier containment.
"""

from __future__ import annotations

from .config import FlexsetSettings, load_settings
from .containment import contains_all, disallowed_elements, missing_elements
from .diagnostics import describe_elements, quote_and_join
from .error_codes import ErrorCode, error_code_catalog, error_code_for
from .exceptions import (
    ElementDecodeError,
    FlexsetError,
    FlexsetTypeError,
    FlexsetValidationError,
    InvalidSettingsError,
    SettingsReadError,
)
from .expand import DecodeContext, expand_framework_string_set, flatten_framework_string_set
from .logging_utils import LogConfig, configure_logging
from .model_types import CollectionState, DecodePolicy, LogFormat
from .optional import OptionalCollection

__all__ = [
    "CollectionState",
    "DecodeContext",
    "DecodePolicy",
    "ElementDecodeError",
    "ErrorCode",
    "FlexsetError",
    "FlexsetSettings",
    "FlexsetTypeError",
    "FlexsetValidationError",
    "InvalidSettingsError",
    "LogConfig",
    "LogFormat",
    "OptionalCollection",
    "SettingsReadError",
    "__version__",
    "configure_logging",
    "contains_all",
    "describe_elements",
    "disallowed_elements",
    "error_code_catalog",
    "error_code_for",
    "expand_framework_string_set",
    "flatten_framework_string_set",
    "load_settings",
    "missing_elements",
    "quote_and_join",
]

__version__ = "0.1.0"
