"""
Format Mappers — Build LM Studio documents from a parsed Modelfile.

Two targets:
- convert_to_lmstudio_format: flat config with a Jinja prompt template
  and numeric prediction/load parameters.
- convert_to_lmstudio_preset: preset with a manual prompt template,
  stop strings and (usually) the system prompt.

Neither mapper raises on bad input. Unknown or non-numeric parameters
are left out and reported through on_diagnostic.
"""

import math
import re
from dataclasses import dataclass
from typing import Callable

from lmbridge.modelfile import ParsedModelfile
from lmbridge.observability.diagnostics import DiagnosticSink, emit
from lmbridge.schemas import (
    JinjaPromptTemplate,
    JinjaTemplateDetails,
    LMStudioConfig,
    LMStudioPreset,
    ManualPromptTemplate,
    ManualPromptTemplateValue,
)
from lmbridge.templates import (
    ASSISTANT_MARKER,
    EMPTY_THINK_MARKER,
    SYSTEM_MARKER,
    USER_MARKER,
    convert_go_template_to_jinja,
    extract_bos_token,
    extract_eos_token,
)
from lmbridge.vocabulary import DiagnosticCode, FieldGroupName, FieldKey


STOP_PARAMETER = "stop"

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


# =============================================================================
# PARAMETER COERCION
# =============================================================================

def parse_float(value: str) -> float:
    """
    Plain ASCII decimal or exponent notation, finite only.

    Underscores, surrounding whitespace, non-ASCII digits and nan/inf
    are rejected.
    """
    if not FLOAT_PATTERN.fullmatch(value):
        raise ValueError(f"not a decimal number: {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"non-finite value: {value!r}")
    return result


def parse_int(value: str) -> int:
    """ASCII base-10 integer text only ("4.0", "1_000" and " 40" are rejected)."""
    if not INT_PATTERN.fullmatch(value):
        raise ValueError(f"not a base-10 integer: {value!r}")
    return int(value)


@dataclass(frozen=True)
class ParameterMapping:
    """How one Modelfile parameter lands in the config document."""
    key: FieldKey
    group: FieldGroupName
    coerce: Callable[[str], float | int]


PARAMETER_MAPPINGS: dict[str, ParameterMapping] = {
    "temperature": ParameterMapping(FieldKey.TEMPERATURE, FieldGroupName.PREDICTION, parse_float),
    "top_p": ParameterMapping(FieldKey.TOP_P, FieldGroupName.PREDICTION, parse_float),
    "top_k": ParameterMapping(FieldKey.TOP_K, FieldGroupName.PREDICTION, parse_int),
    "repeat_penalty": ParameterMapping(FieldKey.REPEAT_PENALTY, FieldGroupName.PREDICTION, parse_float),
    "min_p": ParameterMapping(FieldKey.MIN_P, FieldGroupName.PREDICTION, parse_float),
    "num_ctx": ParameterMapping(FieldKey.CONTEXT_LENGTH, FieldGroupName.LOAD, parse_int),
}


# =============================================================================
# FLAT CONFIG
# =============================================================================

def build_jinja_prompt_template(parsed: ParsedModelfile) -> JinjaPromptTemplate:
    """Jinja prompt template value for parsed.template."""
    template = parsed.template
    return JinjaPromptTemplate(
        jinja_prompt_template=JinjaTemplateDetails(
            template=convert_go_template_to_jinja(template),
            bos_token=extract_bos_token(template),
            eos_token=extract_eos_token(template),
        ),
        stop_strings=parsed.values(STOP_PARAMETER),
    )


def convert_to_lmstudio_format(
    parsed: ParsedModelfile,
    on_diagnostic: DiagnosticSink | None = None,
) -> LMStudioConfig:
    """
    Map a parsed Modelfile onto LM Studio's flat config document.

    The system prompt is not folded into the template; LM Studio supplies
    it through system_message at prediction time.
    """
    config = LMStudioConfig()

    if parsed.has_template:
        prompt_template = build_jinja_prompt_template(parsed)
        emit(
            on_diagnostic,
            DiagnosticCode.TEMPLATE_CONVERTED,
            "Converted Go template to Jinja",
            original_length=len(parsed.template),
            converted_length=len(prompt_template.jinja_prompt_template.template),
        )
        config.prediction_config.add(FieldKey.PROMPT_TEMPLATE, prompt_template)

    groups = {
        FieldGroupName.PREDICTION: config.prediction_config,
        FieldGroupName.LOAD: config.load_model_config,
    }

    for name, values in parsed.parameters.items():
        if name == STOP_PARAMETER or not values:
            continue

        value = values[0]
        mapping = PARAMETER_MAPPINGS.get(name)
        if mapping is None:
            emit(
                on_diagnostic,
                DiagnosticCode.UNSUPPORTED_PARAMETER,
                f"Unsupported parameter '{name}' (value: {value}) - skipping",
                parameter=name,
                value=value,
            )
            continue

        try:
            coerced = mapping.coerce(value)
        except ValueError:
            emit(
                on_diagnostic,
                DiagnosticCode.INVALID_PARAMETER_VALUE,
                f"Parameter '{name}' has non-numeric value {value!r} - skipping",
                parameter=name,
                value=value,
            )
            continue

        groups[mapping.group].add(mapping.key, coerced)

    return config


# =============================================================================
# PRESET
# =============================================================================

def build_manual_prompt_template(template: str) -> ManualPromptTemplate:
    """
    Split a role-marker template into per-role boundary strings.

    Handles the common [BOS]<|system|>...<|user|>...<|assistant|> layout.
    A pre-filled <think></think> is appended after the assistant marker.
    """
    bos_token = extract_bos_token(template)
    boundaries = ManualPromptTemplate()

    if SYSTEM_MARKER in template:
        boundaries.before_system = f"{bos_token}{SYSTEM_MARKER}\n"

    if USER_MARKER in template:
        boundaries.before_user = f"{USER_MARKER}\n"

    if ASSISTANT_MARKER in template:
        boundaries.after_user = f"{ASSISTANT_MARKER}\n"

    if EMPTY_THINK_MARKER in template:
        boundaries.after_user += f"{EMPTY_THINK_MARKER}\n"

    return boundaries


def convert_to_lmstudio_preset(
    parsed: ParsedModelfile,
    model_name: str,
    on_diagnostic: DiagnosticSink | None = None,
) -> LMStudioPreset:
    """
    Map a parsed Modelfile onto an LM Studio preset named model_name.

    Without a template the preset carries no fields at all.
    """
    preset = LMStudioPreset.for_model(model_name)

    if not parsed.has_template:
        return preset

    template = parsed.template
    has_think_tags = EMPTY_THINK_MARKER in template

    preset.operation.add(
        FieldKey.PROMPT_TEMPLATE,
        ManualPromptTemplateValue(
            manual_prompt_template=build_manual_prompt_template(template),
        ),
    )
    preset.operation.add(FieldKey.STOP_STRINGS, parsed.values(STOP_PARAMETER))

    # nothink variants: pre-filled think tags replace the system prompt
    if parsed.has_system and has_think_tags:
        emit(
            on_diagnostic,
            DiagnosticCode.SYSTEM_PROMPT_SKIPPED,
            "Template pre-fills empty think tags - omitting system prompt",
            system_length=len(parsed.system),
        )
    elif parsed.has_system:
        preset.operation.add(FieldKey.SYSTEM_PROMPT, parsed.system)

    return preset
