"""Tests for LM Studio document models."""

import pytest
from pydantic import ValidationError

from lmbridge.schemas import (
    ConfigField,
    FieldGroup,
    JinjaPromptTemplate,
    JinjaTemplateDetails,
    LMStudioConfig,
    LMStudioPreset,
    preset_identifier,
)
from lmbridge.vocabulary import FieldKey


class TestConfigField:

    def test_key_serialized_as_string(self):
        field = ConfigField(key=FieldKey.TOP_K, value=40)
        assert field.to_dict() == {"key": "llm.prediction.topK", "value": 40}

    def test_key_from_string(self):
        field = ConfigField(key="llm.load.contextLength", value=4096)
        assert field.key is FieldKey.CONTEXT_LENGTH

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            ConfigField(key="llm.prediction.unknown", value=1)

    @pytest.mark.parametrize("value", [True, 3, 0.5, "text", ["a", "b"], []])
    def test_value_types_preserved(self, value):
        field = ConfigField(key=FieldKey.SYSTEM_PROMPT, value=value)
        assert field.value == value
        assert type(field.value) is type(value)


class TestFieldGroup:

    def test_add_and_get(self):
        group = FieldGroup()
        group.add(FieldKey.TEMPERATURE, 0.2)
        group.add(FieldKey.TOP_P, 0.9)

        assert len(group) == 2
        assert group.keys() == [FieldKey.TEMPERATURE, FieldKey.TOP_P]
        assert group.get(FieldKey.TOP_P).value == 0.9
        assert group.get(FieldKey.MIN_P) is None


class TestDocuments:

    def test_empty_config(self):
        assert LMStudioConfig().to_dict() == {
            "predictionConfig": {"fields": []},
            "loadModelConfig": {"fields": []},
        }

    def test_jinja_defaults(self):
        template = JinjaPromptTemplate(
            jinja_prompt_template=JinjaTemplateDetails(template="{{ user_message }}")
        )
        data = template.to_dict()
        assert data["type"] == "jinja"
        assert data["stopStrings"] == []
        assert data["jinjaPromptTemplate"]["inputConfig"]["useTools"] is False

    def test_preset_for_model(self):
        preset = LMStudioPreset.for_model("Llama 3 Instruct")
        assert preset.identifier == "@local:llama-3-instruct"
        assert preset.name == "Llama 3 Instruct"

    def test_preset_identifier(self):
        assert preset_identifier("ABC def") == "@local:abc-def"

    def test_to_json_indent(self):
        text = LMStudioConfig().to_json()
        assert text.startswith('{\n  "predictionConfig"')
