"""
Exporter — Fetch, parse, convert and write in one call.

Fetch and write failures propagate. Parsing is not expected to fail,
but if it does the conversion continues from an empty Modelfile.
"""

from pathlib import Path

from lmbridge.clients import ModelfileSource
from lmbridge.config import default_preset_dir
from lmbridge.export.mapper import convert_to_lmstudio_format, convert_to_lmstudio_preset
from lmbridge.export.writer import write_lmstudio_config, write_lmstudio_preset
from lmbridge.modelfile import ParsedModelfile, parse_modelfile
from lmbridge.observability.diagnostics import DiagnosticSink, chain_sinks, logging_sink
from lmbridge.observability.logging import ConversionContext, get_logger
from lmbridge.vocabulary import ConversionKind

logger = get_logger("exporter")


PRESET_SUFFIX = ".preset.json"


def preset_path(preset_dir: str | Path, lmstudio_model_name: str) -> Path:
    """<preset_dir>/<name>.preset.json"""
    return Path(preset_dir) / f"{lmstudio_model_name}{PRESET_SUFFIX}"


def load_parsed_modelfile(
    model_name: str,
    source: ModelfileSource,
    on_diagnostic: DiagnosticSink | None = None,
) -> ParsedModelfile:
    """Fetch and parse the Modelfile for model_name."""
    modelfile = source.get_modelfile(model_name)

    try:
        return parse_modelfile(modelfile, on_diagnostic=on_diagnostic)
    except Exception as e:
        logger.warning(f"Failed to parse Modelfile for {model_name}: {e}")
        return ParsedModelfile.empty()


def export_model_config(
    model_name: str,
    output_path: str | Path,
    source: ModelfileSource,
    on_diagnostic: DiagnosticSink | None = None,
) -> Path:
    """
    Export a model's Modelfile as an LM Studio config document.

    Returns the written path.
    """
    with ConversionContext(model_name, ConversionKind.CONFIG, output_path):
        sink = chain_sinks(logging_sink(logger), on_diagnostic)
        parsed = load_parsed_modelfile(model_name, source, on_diagnostic=sink)
        config = convert_to_lmstudio_format(parsed, on_diagnostic=sink)
        path = write_lmstudio_config(config, output_path)
        logger.info(f"Exported config to {path}")
        return path


def export_model_preset(
    model_name: str,
    lmstudio_model_name: str,
    source: ModelfileSource,
    preset_dir: str | Path | None = None,
    on_diagnostic: DiagnosticSink | None = None,
) -> Path:
    """
    Export a model's Modelfile as an LM Studio preset.

    Writes <preset_dir>/<lmstudio_model_name>.preset.json, defaulting to
    ~/.lmstudio/config-presets. Returns the written path.
    """
    target = preset_path(preset_dir or default_preset_dir(), lmstudio_model_name)

    with ConversionContext(model_name, ConversionKind.PRESET, target):
        sink = chain_sinks(logging_sink(logger), on_diagnostic)
        parsed = load_parsed_modelfile(model_name, source, on_diagnostic=sink)
        preset = convert_to_lmstudio_preset(parsed, lmstudio_model_name, on_diagnostic=sink)
        path = write_lmstudio_preset(preset, target)
        logger.info(f"Exported preset '{preset.identifier}' to {path}")
        return path
