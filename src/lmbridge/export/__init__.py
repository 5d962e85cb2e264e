"""
Export — Map parsed Modelfiles onto LM Studio documents and write them.
"""

from lmbridge.export.mapper import (
    STOP_PARAMETER,
    PARAMETER_MAPPINGS,
    ParameterMapping,
    parse_float,
    parse_int,
    build_jinja_prompt_template,
    build_manual_prompt_template,
    convert_to_lmstudio_format,
    convert_to_lmstudio_preset,
)
from lmbridge.export.writer import (
    write_document,
    write_lmstudio_config,
    write_lmstudio_preset,
)
from lmbridge.export.exporter import (
    PRESET_SUFFIX,
    preset_path,
    load_parsed_modelfile,
    export_model_config,
    export_model_preset,
)

__all__ = [
    # Mappers
    "STOP_PARAMETER",
    "PARAMETER_MAPPINGS",
    "ParameterMapping",
    "parse_float",
    "parse_int",
    "build_jinja_prompt_template",
    "build_manual_prompt_template",
    "convert_to_lmstudio_format",
    "convert_to_lmstudio_preset",
    # Writer
    "write_document",
    "write_lmstudio_config",
    "write_lmstudio_preset",
    # Exporter
    "PRESET_SUFFIX",
    "preset_path",
    "load_parsed_modelfile",
    "export_model_config",
    "export_model_preset",
]
