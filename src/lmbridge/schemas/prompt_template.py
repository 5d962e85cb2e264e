"""
Prompt Template Schemas — Values of the llm.prediction.promptTemplate field.

Two shapes exist: a Jinja template (used by the flat config document)
and a manual template split into per-role boundary strings (used by
presets).
"""

from typing import Literal

from pydantic import Field

from lmbridge.schemas.base import LMStudioModel


class ContentConfig(LMStudioModel):
    """Message content type."""
    type: str = "string"


class MessagesConfig(LMStudioModel):
    content_config: ContentConfig = Field(default_factory=ContentConfig)


class InputConfig(LMStudioModel):
    """Input format configuration of a Jinja template."""
    messages_config: MessagesConfig = Field(default_factory=MessagesConfig)
    use_tools: bool = False


class JinjaTemplateDetails(LMStudioModel):
    """The Jinja template itself plus its BOS/EOS tokens."""
    template: str = Field(..., description="Template in Jinja syntax")
    bos_token: str = Field(default="", description="Beginning-of-sequence token")
    eos_token: str = Field(default="", description="End-of-sequence token")
    input_config: InputConfig = Field(default_factory=InputConfig)


class JinjaPromptTemplate(LMStudioModel):
    """
    Jinja prompt template value.

    Serializes as:
        {"type": "jinja", "jinjaPromptTemplate": {...}, "stopStrings": [...]}
    """
    type: Literal["jinja"] = "jinja"
    jinja_prompt_template: JinjaTemplateDetails
    stop_strings: list[str] = Field(default_factory=list)


class ManualPromptTemplate(LMStudioModel):
    """Literal text placed around each conversational role."""
    before_system: str = ""
    after_system: str = ""
    before_user: str = ""
    after_user: str = ""
    before_assistant: str = ""
    after_assistant: str = ""


class ManualPromptTemplateValue(LMStudioModel):
    """
    Manual prompt template value.

    stop_strings stays empty here; presets carry stop sequences in their
    own llm.prediction.stopStrings field.
    """
    type: Literal["manual"] = "manual"
    stop_strings: list[str] = Field(default_factory=list)
    manual_prompt_template: ManualPromptTemplate = Field(
        default_factory=ManualPromptTemplate
    )
