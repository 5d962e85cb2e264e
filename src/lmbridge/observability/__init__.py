"""
Observability — Logging and diagnostics for lmbridge.

Provides:
- Structured logging tagged with the export in progress
- An injectable diagnostics sink for non-fatal conversion findings
"""

from lmbridge.observability.logging import (
    ConversionScope,
    current_conversion,
    configure_logging,
    get_logger,
    ConversionContext,
    JSONFormatter,
    ReadableFormatter,
)
from lmbridge.observability.diagnostics import (
    Diagnostic,
    DiagnosticSink,
    DiagnosticCollector,
    emit,
    logging_sink,
    chain_sinks,
)

__all__ = [
    # Logging
    "ConversionScope",
    "current_conversion",
    "configure_logging",
    "get_logger",
    "ConversionContext",
    "JSONFormatter",
    "ReadableFormatter",
    # Diagnostics
    "Diagnostic",
    "DiagnosticSink",
    "DiagnosticCollector",
    "emit",
    "logging_sink",
    "chain_sinks",
]
