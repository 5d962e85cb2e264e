"""
Diagnostics — Injectable sink for non-fatal conversion findings.

The parser and mappers never log directly. They hand Diagnostic
records to an optional callback supplied by the caller; the exporter
wires that callback to the package logger.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from lmbridge.vocabulary import DiagnosticCode


@dataclass(frozen=True)
class Diagnostic:
    """Single non-fatal finding."""
    code: DiagnosticCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            **self.details,
        }


DiagnosticSink = Callable[[Diagnostic], None]


def emit(
    sink: DiagnosticSink | None,
    code: DiagnosticCode,
    message: str,
    **details: Any,
) -> None:
    """Send a diagnostic to sink, if there is one."""
    if sink is not None:
        sink(Diagnostic(code=code, message=message, details=details))


class DiagnosticCollector:
    """
    List-backed diagnostic sink.

    Usage:
        collector = DiagnosticCollector()
        convert_to_lmstudio_format(parsed, on_diagnostic=collector)
        collector.by_code(DiagnosticCode.UNSUPPORTED_PARAMETER)
    """

    def __init__(self):
        self.diagnostics: list[Diagnostic] = []

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def by_code(self, code: DiagnosticCode) -> list[Diagnostic]:
        """Diagnostics with the given code, in emission order."""
        return [d for d in self.diagnostics if d.code == code]

    def clear(self) -> None:
        self.diagnostics.clear()


def logging_sink(
    logger: logging.Logger,
    level: int = logging.DEBUG,
) -> DiagnosticSink:
    """Build a sink that forwards diagnostics to logger."""

    def _sink(diagnostic: Diagnostic) -> None:
        logger.log(
            level,
            diagnostic.message,
            extra={"extra_data": diagnostic.to_dict()},
        )

    return _sink


def chain_sinks(*sinks: DiagnosticSink | None) -> DiagnosticSink:
    """Fan a diagnostic out to several sinks, skipping None."""
    active = [s for s in sinks if s is not None]

    def _sink(diagnostic: Diagnostic) -> None:
        for sink in active:
            sink(diagnostic)

    return _sink
