"""
Schemas — Pydantic models of the LM Studio JSON documents.
"""

from lmbridge.schemas.base import LMStudioModel
from lmbridge.schemas.prompt_template import (
    ContentConfig,
    MessagesConfig,
    InputConfig,
    JinjaTemplateDetails,
    JinjaPromptTemplate,
    ManualPromptTemplate,
    ManualPromptTemplateValue,
)
from lmbridge.schemas.config import (
    FieldValue,
    ConfigField,
    FieldGroup,
    LMStudioConfig,
)
from lmbridge.schemas.preset import (
    PRESET_IDENTIFIER_PREFIX,
    preset_identifier,
    LMStudioPreset,
)

__all__ = [
    "LMStudioModel",
    # Prompt templates
    "ContentConfig",
    "MessagesConfig",
    "InputConfig",
    "JinjaTemplateDetails",
    "JinjaPromptTemplate",
    "ManualPromptTemplate",
    "ManualPromptTemplateValue",
    # Config document
    "FieldValue",
    "ConfigField",
    "FieldGroup",
    "LMStudioConfig",
    # Preset document
    "PRESET_IDENTIFIER_PREFIX",
    "preset_identifier",
    "LMStudioPreset",
]
