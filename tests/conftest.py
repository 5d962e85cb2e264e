"""
Shared fixtures: sample Modelfiles and an in-memory Modelfile source.
"""

import logging

import pytest

from lmbridge.errors import ModelNotFoundError


GLM_MODELFILE = '''FROM glm4:9b
TEMPLATE """[gMASK]<sop>{{ if .System }}<|system|>
{{ .System }}{{ end }}<|user|>
{{ .Prompt }}<|assistant|>
"""
SYSTEM "You are a helpful assistant."
PARAMETER temperature 0.7
PARAMETER top_p 0.9
PARAMETER stop "<|user|>"
PARAMETER stop "<|observation|>"
PARAMETER num_ctx 8192
PARAMETER mirostat 1
'''


NOTHINK_MODELFILE = '''FROM qwen3:8b
TEMPLATE """<|user|>{{ .Prompt }}<|assistant|><think></think>"""
SYSTEM "Answer briefly."
PARAMETER stop "<|user|>"
'''


class FakeModelfileSource:
    """ModelfileSource serving Modelfiles from a dict."""

    def __init__(self, modelfiles: dict[str, str]):
        self.modelfiles = modelfiles
        self.requested: list[str] = []

    def get_modelfile(self, model_name: str) -> str:
        self.requested.append(model_name)
        if model_name not in self.modelfiles:
            raise ModelNotFoundError(model_name)
        return self.modelfiles[model_name]


@pytest.fixture
def glm_modelfile() -> str:
    return GLM_MODELFILE


@pytest.fixture
def nothink_modelfile() -> str:
    return NOTHINK_MODELFILE


@pytest.fixture
def fake_source() -> FakeModelfileSource:
    return FakeModelfileSource({
        "glm4:9b": GLM_MODELFILE,
        "qwen3:nothink": NOTHINK_MODELFILE,
        "bare": "FROM llama3\n",
    })


@pytest.fixture(autouse=True)
def reset_lmbridge_logging():
    """Drop handlers installed by configure_logging during a test."""
    yield
    logger = logging.getLogger("lmbridge")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
