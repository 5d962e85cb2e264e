"""
Logging — stdlib logging tagged with the export in progress.

Records emitted inside a ConversionContext carry the model name, the
kind of document being produced and the path it is written to. The
JSON formatter emits them as fields; the readable formatter shows
model and kind in brackets.
"""

import logging
import json
import sys
from contextvars import ContextVar
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from lmbridge.vocabulary import ConversionKind


PACKAGE_LOGGER = "lmbridge"

# Record attributes set by ConversionFilter
CONTEXT_FIELDS = ("model", "conversion", "target")


@dataclass(frozen=True)
class ConversionScope:
    """The export a log record belongs to."""
    model: str
    kind: ConversionKind
    target: Path | None = None

    @property
    def tag(self) -> str:
        """'glm4:9b preset'"""
        return f"{self.model} {self.kind.value}"


_active_conversion: ContextVar[ConversionScope | None] = ContextVar(
    "active_conversion", default=None
)


def current_conversion() -> ConversionScope | None:
    """Scope of the innermost active ConversionContext, if any."""
    return _active_conversion.get()


class ConversionFilter(logging.Filter):
    """Stamps model / conversion / target onto records (None outside an export)."""

    def filter(self, record: logging.LogRecord) -> bool:
        scope = current_conversion()
        record.model = scope.model if scope else None
        record.conversion = scope.kind.value if scope else None
        record.target = str(scope.target) if scope and scope.target else None
        return True


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Context fields are only present while an export is running.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_data[name] = value

        # Diagnostic payloads (see diagnostics.logging_sink)
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


class ReadableFormatter(logging.Formatter):
    """
    Terminal format:

        INFO    [glm4:9b preset] lmbridge.exporter: Exported preset ...
    """

    def format(self, record: logging.LogRecord) -> str:
        parts = [getattr(record, "model", None), getattr(record, "conversion", None)]
        tag = " ".join(p for p in parts if p) or "-"

        line = f"{record.levelname:<7} [{tag}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def configure_logging(
    level: int | str = logging.INFO,
    json_format: bool = False,
    stream: Any = None,
) -> logging.Logger:
    """
    Install a single handler on the lmbridge logger.

    Calling again replaces the previous handler. Records do not propagate
    to the root logger.

    Args:
        level: Logging level (int or name such as "DEBUG")
        json_format: Use JSONFormatter instead of ReadableFormatter
        stream: Output stream (default: stderr)
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.addFilter(ConversionFilter())
    handler.setFormatter(JSONFormatter() if json_format else ReadableFormatter())

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level.upper() if isinstance(level, str) else level)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for an lmbridge component."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


class ConversionContext:
    """
    Context manager marking one export.

    Usage:
        with ConversionContext("glm4:9b", ConversionKind.PRESET, path) as scope:
            logger.info("Writing...")  # tagged "glm4:9b preset", target=path
    """

    def __init__(
        self,
        model_name: str,
        kind: ConversionKind | str,
        target: str | Path | None = None,
    ):
        self.scope = ConversionScope(
            model=model_name,
            kind=ConversionKind(kind),
            target=Path(target) if target is not None else None,
        )
        self._token = None

    def __enter__(self) -> ConversionScope:
        self._token = _active_conversion.set(self.scope)
        return self.scope

    def __exit__(self, *args):
        if self._token is not None:
            _active_conversion.reset(self._token)
            self._token = None
