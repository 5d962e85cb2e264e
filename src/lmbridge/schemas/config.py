"""
Config Schemas — Key/value fields and the flat LM Studio config document.

Document shape:
    {
      "predictionConfig": {"fields": [{"key": ..., "value": ...}]},
      "loadModelConfig":  {"fields": [...]}
    }
"""

from pydantic import Field

from lmbridge.schemas.base import LMStudioModel
from lmbridge.schemas.prompt_template import (
    JinjaPromptTemplate,
    ManualPromptTemplateValue,
)
from lmbridge.vocabulary import FieldKey


# bool before int so True/False are not read back as 1/0
FieldValue = (
    JinjaPromptTemplate
    | ManualPromptTemplateValue
    | bool
    | int
    | float
    | str
    | list[str]
)


class ConfigField(LMStudioModel):
    """Single key/value configuration entry."""
    key: FieldKey
    value: FieldValue


class FieldGroup(LMStudioModel):
    """Ordered list of configuration fields."""
    fields: list[ConfigField] = Field(default_factory=list)

    def add(self, key: FieldKey, value: FieldValue) -> None:
        self.fields.append(ConfigField(key=key, value=value))

    def get(self, key: FieldKey) -> ConfigField | None:
        """First field with the given key."""
        for config_field in self.fields:
            if config_field.key == key:
                return config_field
        return None

    def keys(self) -> list[FieldKey]:
        return [f.key for f in self.fields]

    def __len__(self) -> int:
        return len(self.fields)


class LMStudioConfig(LMStudioModel):
    """Complete per-model configuration (prediction and load settings)."""
    prediction_config: FieldGroup = Field(default_factory=FieldGroup)
    load_model_config: FieldGroup = Field(default_factory=FieldGroup)
