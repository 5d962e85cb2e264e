"""Tests for the LM Studio preset mapper."""

import pytest

from lmbridge.export import build_manual_prompt_template, convert_to_lmstudio_preset
from lmbridge.modelfile import ParsedModelfile, parse_modelfile
from lmbridge.observability import DiagnosticCollector
from lmbridge.schemas import ManualPromptTemplateValue
from lmbridge.vocabulary import DiagnosticCode, FieldKey


GLM_TEMPLATE = "[gMASK]<sop><|system|>\n{{ .System }}<|user|>\n{{ .Prompt }}<|assistant|>\n"


class TestIdentity:
    """Name and identifier fields."""

    @pytest.mark.parametrize("name, identifier", [
        ("GLM 4 Chat", "@local:glm-4-chat"),
        ("qwen3", "@local:qwen3"),
        ("My  Model", "@local:my--model"),
    ])
    def test_identifier(self, name, identifier):
        preset = convert_to_lmstudio_preset(ParsedModelfile(), name)
        assert preset.identifier == identifier
        assert preset.name == name
        assert preset.changed is True

    def test_no_template_empty_groups(self):
        """Without a template the preset has no fields."""
        parsed = ParsedModelfile(system="Hi", parameters={"stop": ["x"]})
        preset = convert_to_lmstudio_preset(parsed, "Bare Model")

        assert preset.to_dict() == {
            "identifier": "@local:bare-model",
            "name": "Bare Model",
            "changed": True,
            "operation": {"fields": []},
            "load": {"fields": []},
        }


class TestManualTemplate:
    """Boundary strings derived from role markers."""

    def test_glm_layout(self):
        boundaries = build_manual_prompt_template(GLM_TEMPLATE)
        assert boundaries.before_system == "[gMASK]<|system|>\n"
        assert boundaries.after_system == ""
        assert boundaries.before_user == "<|user|>\n"
        assert boundaries.after_user == "<|assistant|>\n"
        assert boundaries.before_assistant == ""
        assert boundaries.after_assistant == ""

    def test_think_tags_appended(self):
        boundaries = build_manual_prompt_template(
            "<|user|>{{ .Prompt }}<|assistant|><think></think>"
        )
        assert boundaries.before_system == ""
        assert boundaries.after_user == "<|assistant|>\n<think></think>\n"

    def test_no_markers(self):
        """Templates without role markers give empty boundaries."""
        boundaries = build_manual_prompt_template("{{ .Prompt }}")
        assert boundaries.model_dump() == {
            "before_system": "",
            "after_system": "",
            "before_user": "",
            "after_user": "",
            "before_assistant": "",
            "after_assistant": "",
        }


class TestPresetFields:
    """Operation fields of a preset with a template."""

    def test_field_order_and_values(self):
        parsed = ParsedModelfile(
            template=GLM_TEMPLATE,
            system="Be helpful.",
            parameters={"stop": ["<|user|>", "<|observation|>"]},
        )
        preset = convert_to_lmstudio_preset(parsed, "GLM")

        assert preset.operation.keys() == [
            FieldKey.PROMPT_TEMPLATE,
            FieldKey.STOP_STRINGS,
            FieldKey.SYSTEM_PROMPT,
        ]
        assert preset.operation.get(FieldKey.STOP_STRINGS).value == ["<|user|>", "<|observation|>"]
        assert preset.operation.get(FieldKey.SYSTEM_PROMPT).value == "Be helpful."
        assert len(preset.load) == 0

    def test_template_stop_strings_left_empty(self):
        """Stop strings live in their own field, not inside the template."""
        parsed = ParsedModelfile(template=GLM_TEMPLATE, parameters={"stop": ["X"]})
        preset = convert_to_lmstudio_preset(parsed, "GLM")

        value = preset.operation.get(FieldKey.PROMPT_TEMPLATE).value
        assert isinstance(value, ManualPromptTemplateValue)
        assert value.stop_strings == []

    def test_missing_stop_gives_empty_list(self):
        parsed = ParsedModelfile(template="{{ .Prompt }}")
        preset = convert_to_lmstudio_preset(parsed, "m")
        assert preset.operation.get(FieldKey.STOP_STRINGS).value == []

    def test_no_system_no_field(self):
        parsed = ParsedModelfile(template=GLM_TEMPLATE)
        preset = convert_to_lmstudio_preset(parsed, "m")
        assert preset.operation.get(FieldKey.SYSTEM_PROMPT) is None

    def test_serialized_shape(self):
        parsed = ParsedModelfile(template=GLM_TEMPLATE, system="S")
        data = convert_to_lmstudio_preset(parsed, "GLM").to_dict()

        fields = {f["key"]: f["value"] for f in data["operation"]["fields"]}
        assert fields["llm.prediction.promptTemplate"] == {
            "type": "manual",
            "stopStrings": [],
            "manualPromptTemplate": {
                "beforeSystem": "[gMASK]<|system|>\n",
                "afterSystem": "",
                "beforeUser": "<|user|>\n",
                "afterUser": "<|assistant|>\n",
                "beforeAssistant": "",
                "afterAssistant": "",
            },
        }
        assert fields["llm.prediction.stopStrings"] == []
        assert fields["llm.prediction.systemPrompt"] == "S"


class TestReasoningSuppression:
    """Empty think tags suppress the system prompt."""

    def test_system_prompt_omitted(self, nothink_modelfile):
        collector = DiagnosticCollector()
        parsed = parse_modelfile(nothink_modelfile)
        assert parsed.system == "Answer briefly."

        preset = convert_to_lmstudio_preset(parsed, "Qwen3 NoThink", on_diagnostic=collector)

        assert preset.operation.get(FieldKey.SYSTEM_PROMPT) is None
        assert preset.operation.get(FieldKey.STOP_STRINGS).value == ["<|user|>"]
        assert len(collector.by_code(DiagnosticCode.SYSTEM_PROMPT_SKIPPED)) == 1

    def test_split_think_tags_do_not_count(self):
        """Only the literal <think></think> pair is the marker."""
        parsed = ParsedModelfile(
            template="<|user|>{{ .Prompt }}<|assistant|><think>\n</think>",
            system="Think carefully.",
        )
        preset = convert_to_lmstudio_preset(parsed, "m")
        assert preset.operation.get(FieldKey.SYSTEM_PROMPT).value == "Think carefully."
