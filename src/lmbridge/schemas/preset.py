"""
Preset Schema — LM Studio config preset document.

Presets live in ~/.lmstudio/config-presets and are loaded manually from
the LM Studio UI.
"""

from pydantic import Field

from lmbridge.schemas.base import LMStudioModel
from lmbridge.schemas.config import FieldGroup


PRESET_IDENTIFIER_PREFIX = "@local:"


def preset_identifier(model_name: str) -> str:
    """'My Model' -> '@local:my-model'."""
    return PRESET_IDENTIFIER_PREFIX + model_name.replace(" ", "-").lower()


class LMStudioPreset(LMStudioModel):
    """
    Preset document.

    operation holds prediction fields, load holds model-load fields.
    """
    identifier: str = Field(..., description="Unique preset id, '@local:<slug>'")
    name: str = Field(..., description="Display name")
    changed: bool = True
    operation: FieldGroup = Field(default_factory=FieldGroup)
    load: FieldGroup = Field(default_factory=FieldGroup)

    @classmethod
    def for_model(cls, model_name: str) -> "LMStudioPreset":
        return cls(identifier=preset_identifier(model_name), name=model_name)
