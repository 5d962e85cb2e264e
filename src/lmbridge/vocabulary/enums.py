"""
Vocabulary enums — the shared names of the Modelfile and LM Studio dialects.

Directive keywords, parser capture states, LM Studio field keys and
diagnostic codes referenced across the parser, mappers and exporter.
"""

from enum import Enum


# =============================================================================
# MODELFILE DIALECT
# =============================================================================

class Directive(str, Enum):
    """Line-oriented Modelfile directives understood by the parser."""
    TEMPLATE = "TEMPLATE"
    SYSTEM = "SYSTEM"
    PARAMETER = "PARAMETER"


class CaptureState(str, Enum):
    """
    State of one directive capture sub-machine.

    A TEMPLATE or SYSTEM value is either not being captured, or is being
    captured across lines until a closing triple or double quote.
    """
    IDLE = "idle"
    TRIPLE_QUOTED = "triple_quoted"    # Opened with """, closed by a line ending in """
    DOUBLE_QUOTED = "double_quoted"    # Opened with " and no closing quote on the same line


# =============================================================================
# EXPORT
# =============================================================================

class ConversionKind(str, Enum):
    """Document an export run produces."""
    CONFIG = "config"      # Flat per-model config
    PRESET = "preset"      # ~/.lmstudio/config-presets entry


# =============================================================================
# LM STUDIO DIALECT
# =============================================================================

class FieldKey(str, Enum):
    """Namespaced keys of LM Studio configuration fields."""
    PROMPT_TEMPLATE = "llm.prediction.promptTemplate"
    STOP_STRINGS = "llm.prediction.stopStrings"
    SYSTEM_PROMPT = "llm.prediction.systemPrompt"
    TEMPERATURE = "llm.prediction.temperature"
    TOP_P = "llm.prediction.topP"
    TOP_K = "llm.prediction.topK"
    REPEAT_PENALTY = "llm.prediction.repeatPenalty"
    MIN_P = "llm.prediction.minP"
    CONTEXT_LENGTH = "llm.load.contextLength"


class FieldGroupName(str, Enum):
    """Which field group of the config document a parameter lands in."""
    PREDICTION = "prediction"
    LOAD = "load"


# =============================================================================
# DIAGNOSTICS
# =============================================================================

class DiagnosticCode(str, Enum):
    """Non-fatal conditions reported while converting."""
    UNSUPPORTED_PARAMETER = "unsupported_parameter"
    INVALID_PARAMETER_VALUE = "invalid_parameter_value"
    UNTERMINATED_DIRECTIVE = "unterminated_directive"
    TEMPLATE_CONVERTED = "template_converted"
    SYSTEM_PROMPT_SKIPPED = "system_prompt_skipped"
