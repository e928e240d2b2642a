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

"""Settings loading for flexset.

Settings are resolved in three layers, later layers winning:

1. Model defaults.
2. A TOML file: its ``[tool.flexset]`` table when present, otherwise the
   top-level table (ignored for ``pyproject.toml``).
3. ``FLEXSET_*`` environment variables.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Final, Literal, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from flexset.compat import tomllib
from flexset.exceptions import InvalidSettingsError, SettingsReadError
from flexset.logging_utils import structured_extra
from flexset.model_types import DecodePolicy, LogComponent, LogFormat

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger("flexset.config")

ENV_PREFIX: Final[str] = "FLEXSET_"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
_ENV_FIELDS: Final[tuple[str, ...]] = ("decode_policy", "log_format", "log_level")


class FlexsetSettings(BaseModel):
    """Validated runtime settings.

    Attributes:
        decode_policy: Behavior of collection expansion on undecodable elements.
        log_format: Output format used by ``configure_logging``.
        log_level: Verbosity used by ``configure_logging``.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", frozen=True)

    decode_policy: DecodePolicy = DecodePolicy.LENIENT
    log_format: LogFormat = LogFormat.TEXT
    log_level: Literal["debug", "info", "warning", "error"] = "info"

    @field_validator("decode_policy", "log_format", "log_level", mode="before")
    @classmethod
    def _normalise_case(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


def _read_table(path: Path) -> dict[str, object]:
    try:
        raw = cast("dict[str, object]", tomllib.loads(path.read_text(encoding="utf-8")))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise SettingsReadError(path, exc) from exc
    tool = raw.get("tool")
    table = cast("dict[str, object]", tool).get("flexset") if isinstance(tool, dict) else None
    if isinstance(table, dict):
        return cast("dict[str, object]", table)
    # Without a [tool.flexset] table only dedicated settings files use the top level.
    return {} if path.name == PYPROJECT_FILENAME else raw


def _env_overrides(environ: Mapping[str, str]) -> dict[str, object]:
    overrides: dict[str, object] = {}
    for field in _ENV_FIELDS:
        value = environ.get(f"{ENV_PREFIX}{field.upper()}")
        if value:
            overrides[field] = value
    return overrides


def load_settings(
    path: Path | str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> FlexsetSettings:
    """Load flexset settings from an optional file and the environment.

    Args:
        path: TOML file to read, e.g. ``pyproject.toml`` or ``flexset.toml``. ``None`` skips the
            file layer.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        The validated settings.

    Raises:
        SettingsReadError: If the file cannot be read or is not valid TOML.
        InvalidSettingsError: If the combined values fail validation.
    """
    data: dict[str, object] = {}
    source: str | None = None
    if path is not None:
        settings_path = Path(path)
        data.update(_read_table(settings_path))
        source = str(settings_path)
    overrides = _env_overrides(os.environ if environ is None else environ)
    data.update(overrides)
    try:
        settings = FlexsetSettings.model_validate(data)
    except ValidationError as exc:
        raise InvalidSettingsError(exc, source=source) from exc
    logger.debug(
        "Loaded settings: decode_policy=%s",
        settings.decode_policy,
        extra=structured_extra(
            component=LogComponent.CONFIG,
            operation="load_settings",
            policy=settings.decode_policy,
            details={"source": source or "defaults", "env_overrides": sorted(overrides)},
        ),
    )
    return settings


__all__ = ["FlexsetSettings", "load_settings"]
