"""
Vocabulary — Enumerated names shared by the parser, mappers and exporter.
"""

from lmbridge.vocabulary.enums import (
    # Modelfile
    Directive,
    CaptureState,
    # Export
    ConversionKind,
    # LM Studio
    FieldKey,
    FieldGroupName,
    # Diagnostics
    DiagnosticCode,
)

__all__ = [
    # Modelfile
    "Directive",
    "CaptureState",
    # Export
    "ConversionKind",
    # LM Studio
    "FieldKey",
    "FieldGroupName",
    # Diagnostics
    "DiagnosticCode",
]
