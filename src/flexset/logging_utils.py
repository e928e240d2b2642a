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

"""Logging setup driven by ``FlexsetSettings``.

flexset modules log through ``flexset.<module>`` loggers and attach structured
fields (component, operation, collection state, decode policy, ...) with
``structured_extra``. The embedding provider calls ``configure_logging`` once,
usually with ``load_settings()``, to route those records to stderr as either
one-line text or JSON objects.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Final

from flexset.compat import UTC, TypedDict, Unpack, override
from flexset.model_types import CollectionState, DecodePolicy, LogComponent, LogFormat

if TYPE_CHECKING:
    from flexset.config import FlexsetSettings

ROOT_LOGGER_NAME: Final[str] = "flexset"
MODULE_LOGGERS: Final[tuple[str, ...]] = ("flexset.expand", "flexset.config")
# Order in which structured fields are rendered by both formatters.
STRUCTURED_FIELDS: Final[tuple[str, ...]] = (
    "component",
    "operation",
    "state",
    "policy",
    "count",
    "index",
    "details",
)
_LEVELS: Final[Mapping[str, int]] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _structured_fields(record: logging.LogRecord) -> dict[str, object]:
    return {name: getattr(record, name) for name in STRUCTURED_FIELDS if hasattr(record, name)}


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Logging setup derived from settings.

    Attributes:
        format: Text or JSON output.
        level: Numeric threshold applied to every flexset logger.
    """

    format: LogFormat
    level: int

    @classmethod
    def from_settings(cls, settings: FlexsetSettings) -> LogConfig:
        return cls(format=settings.log_format, level=_LEVELS[settings.log_level])

    def build_handler(self) -> logging.Handler:
        """Return a stderr handler carrying the formatter for ``format``."""
        handler = logging.StreamHandler()
        formatter: logging.Formatter = JSONLogFormatter() if self.format is LogFormat.JSON else TextLogFormatter()
        handler.setFormatter(formatter)
        handler.setLevel(self.level)
        return handler


class JSONLogFormatter(logging.Formatter):
    """One JSON object per record, structured fields at the top level."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "logger": record.name,
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            **_structured_fields(record),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        # StrEnum values are str subclasses and serialise as their value.
        return json.dumps(payload, ensure_ascii=False, default=repr)


class TextLogFormatter(logging.Formatter):
    """``[LEVEL] message`` followed by ``key=value`` pairs for structured fields."""

    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")

    @override
    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _structured_fields(record)
        if not fields:
            return line
        rendered = " ".join(f"{name}={value}" for name, value in fields.items())
        first, sep, rest = line.partition("\n")
        return f"{first} ({rendered}){sep}{rest}"


def configure_logging(settings: FlexsetSettings) -> LogConfig:
    """Route flexset log records according to ``settings``.

    Replaces any handler previously installed on the ``flexset`` logger and
    stops propagation to the root logger, so calling it again reconfigures
    rather than duplicates output.

    Args:
        settings: Settings whose ``log_format`` and ``log_level`` apply.

    Returns:
        The ``LogConfig`` that was applied.
    """
    config = LogConfig.from_settings(settings)
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(config.build_handler())
    root_logger.setLevel(config.level)
    root_logger.propagate = False
    for name in MODULE_LOGGERS:
        logging.getLogger(name).setLevel(config.level)
    return config


class _StructuredLogBase(TypedDict):
    component: LogComponent


class StructuredLogExtra(_StructuredLogBase, total=False):
    """Structured logging extras accepted by flexset log records."""

    operation: str
    state: CollectionState
    policy: DecodePolicy
    count: int
    index: int
    details: Mapping[str, object]


class _StructuredLogKwargs(TypedDict, total=False):
    operation: str
    state: CollectionState | str
    policy: DecodePolicy | str
    count: int
    index: int
    details: Mapping[str, object]


def structured_extra(
    component: LogComponent,
    **kwargs: Unpack[_StructuredLogKwargs],
) -> StructuredLogExtra:
    """Return a consistently typed ``logging.extra`` payload.

    Args:
        component: Logical logging component for the record.
        **kwargs: Optional structured fields (operation, state, policy, etc.).

    Returns:
        Mapping suitable for the ``extra`` parameter when emitting log records.
    """
    extra: StructuredLogExtra = {"component": component}
    operation = kwargs.get("operation")
    if operation:
        extra["operation"] = str(operation)
    state = kwargs.get("state")
    if state is not None:
        extra["state"] = state if isinstance(state, CollectionState) else CollectionState(str(state).strip().lower())
    policy = kwargs.get("policy")
    if policy is not None:
        extra["policy"] = policy if isinstance(policy, DecodePolicy) else DecodePolicy.from_str(str(policy))
    count = kwargs.get("count")
    if count is not None:
        extra["count"] = int(count)
    index = kwargs.get("index")
    if index is not None:
        extra["index"] = int(index)
    details = kwargs.get("details")
    if isinstance(details, Mapping) and details:
        extra["details"] = dict(details)
    return extra


__all__ = [
    "JSONLogFormatter",
    "LogConfig",
    "StructuredLogExtra",
    "TextLogFormatter",
    "configure_logging",
    "structured_extra",
]
