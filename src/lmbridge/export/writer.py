"""
Writer — Persists LM Studio documents as indented JSON.

Parent directories are created as needed. No atomic-write or retry
semantics; failures surface as ExportWriteError.
"""

from pathlib import Path

from lmbridge.errors import ExportWriteError
from lmbridge.observability.logging import get_logger
from lmbridge.schemas import LMStudioConfig, LMStudioModel, LMStudioPreset

logger = get_logger("writer")


def write_document(document: LMStudioModel, path: str | Path) -> Path:
    """Serialize document to path with 2-space indentation."""
    path = Path(path)

    try:
        data = document.to_json(indent=2)
    except (TypeError, ValueError) as e:
        raise ExportWriteError(str(path), f"failed to marshal JSON: {e}") from e

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(data, encoding="utf-8")
    except OSError as e:
        raise ExportWriteError(str(path), f"failed to write file: {e}") from e

    logger.debug(f"Wrote {len(data)} bytes to {path}")
    return path


def write_lmstudio_config(config: LMStudioConfig, path: str | Path) -> Path:
    """Write a flat config document."""
    return write_document(config, path)


def write_lmstudio_preset(preset: LMStudioPreset, path: str | Path) -> Path:
    """Write a preset document."""
    return write_document(preset, path)
