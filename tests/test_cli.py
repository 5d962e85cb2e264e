"""
Tests for the lmbridge CLI.

Runs against local Modelfiles (--modelfile) so no Ollama server is needed.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest
import requests

import lmbridge.cli as cli_module
from lmbridge.cli import build_parser, main, resolve_config
from lmbridge.clients import OllamaClient, OllamaConfig


SRC_DIR = Path(__file__).resolve().parents[1] / "src"


@pytest.fixture
def modelfile_path(tmp_path, glm_modelfile) -> Path:
    path = tmp_path / "Modelfile"
    path.write_text(glm_modelfile, encoding="utf-8")
    return path


def test_cli_help():
    """--help works as a module entry point."""
    env = {**os.environ, "PYTHONPATH": str(SRC_DIR)}
    result = subprocess.run(
        [sys.executable, "-m", "lmbridge", "--help"],
        capture_output=True,
        text=True,
        env=env,
    )
    assert result.returncode == 0
    assert "Export Ollama Modelfile configuration to LM Studio" in result.stdout


def test_cli_config(tmp_path, modelfile_path, capsys):
    """config writes a flat document."""
    output = tmp_path / "out" / "glm.json"

    code = main(["config", "glm4:9b", str(output), "--modelfile", str(modelfile_path)])

    assert code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert "predictionConfig" in data
    out = capsys.readouterr().out
    assert "[OK]" in out
    assert "Skipped 1 parameter(s)" in out


def test_cli_preset(tmp_path, modelfile_path):
    """preset writes <name>.preset.json into the preset directory."""
    code = main([
        "preset", "glm4:9b",
        "--name", "GLM 4",
        "--preset-dir", str(tmp_path),
        "--modelfile", str(modelfile_path),
    ])

    assert code == 0
    data = json.loads((tmp_path / "GLM 4.preset.json").read_text(encoding="utf-8"))
    assert data["identifier"] == "@local:glm-4"


def test_cli_preset_name_defaults_to_model(tmp_path, modelfile_path):
    code = main([
        "preset", "glm4",
        "--preset-dir", str(tmp_path),
        "--modelfile", str(modelfile_path),
    ])
    assert code == 0
    assert (tmp_path / "glm4.preset.json").exists()


def test_cli_missing_modelfile(tmp_path, capsys):
    """Fetch errors exit with status 1 and a message on stderr."""
    code = main([
        "config", "m", str(tmp_path / "m.json"),
        "--modelfile", str(tmp_path / "nonexistent"),
    ])

    assert code == 1
    assert "not found" in capsys.readouterr().err.lower()
    assert not (tmp_path / "m.json").exists()


def test_cli_requires_command():
    with pytest.raises(SystemExit):
        main([])


def test_resolve_config_flags(monkeypatch, tmp_path):
    """Command-line flags override environment settings."""
    monkeypatch.setenv("OLLAMA_HOST", "env-host:1")
    args = build_parser().parse_args([
        "preset", "m",
        "--host", "flag-host:2",
        "--timeout", "3",
        "--preset-dir", str(tmp_path),
        "-v",
        "--json-logs",
    ])

    config = resolve_config(args)

    assert config.ollama_host == "http://flag-host:2"
    assert config.timeout == 3.0
    assert config.preset_dir == tmp_path
    assert config.log_level == "DEBUG"
    assert config.json_logs is True


class RecordingSession:
    """requests.Session stand-in answering /api/show with a fixed response."""

    def __init__(self, status_code: int, payload: dict):
        self.status_code = status_code
        self.payload = payload
        self.closed = False

    def post(self, url, **kwargs):
        response = requests.Response()
        response.status_code = self.status_code
        response.url = url
        response.encoding = "utf-8"
        response._content = json.dumps(self.payload).encode("utf-8")
        return response

    def close(self):
        self.closed = True


@pytest.mark.parametrize("status_code, payload, expected_code", [
    (200, {"modelfile": 'TEMPLATE "{{ .Prompt }}"\n'}, 0),
    (404, {"error": "model not found"}, 1),
])
def test_cli_closes_ollama_client(monkeypatch, tmp_path, status_code, payload, expected_code):
    """The HTTP session is closed whether the export succeeds or fails."""
    session = RecordingSession(status_code, payload)

    def fake_factory(host=None, timeout=None):
        return OllamaClient(OllamaConfig(host=host, timeout=timeout), session=session)

    monkeypatch.setattr(cli_module, "create_ollama_client", fake_factory)

    code = main(["config", "m", str(tmp_path / "m.json"), "--host", "ollama:11434"])

    assert code == expected_code
    assert session.closed
