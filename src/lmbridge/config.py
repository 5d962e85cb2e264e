"""
Configuration — Runtime settings with environment fallbacks.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path


DEFAULT_OLLAMA_HOST = "http://localhost:11434"
DEFAULT_TIMEOUT = 30.0


def default_preset_dir() -> Path:
    """LM Studio's config-presets directory for the current user."""
    return Path.home() / ".lmstudio" / "config-presets"


def normalize_host(host: str) -> str:
    """Add a scheme to bare host[:port] values and drop trailing slashes."""
    host = host.strip().rstrip("/")
    if "://" not in host:
        host = f"http://{host}"
    return host


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ExportConfig:
    """Configuration for fetching Modelfiles and writing LM Studio files."""
    ollama_host: str = DEFAULT_OLLAMA_HOST  # Falls back to OLLAMA_HOST env var
    timeout: float = DEFAULT_TIMEOUT
    preset_dir: Path = field(default_factory=default_preset_dir)
    log_level: str = "INFO"
    json_logs: bool = False

    def __post_init__(self):
        self.ollama_host = normalize_host(self.ollama_host)
        self.preset_dir = Path(self.preset_dir).expanduser()

    @property
    def log_level_value(self) -> int:
        """log_level as a logging module constant (INFO if unknown)."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def from_env(cls) -> "ExportConfig":
        """
        Build configuration from environment variables.

        OLLAMA_HOST, LMBRIDGE_TIMEOUT, LMBRIDGE_PRESET_DIR,
        LMBRIDGE_LOG_LEVEL, LMBRIDGE_JSON_LOGS
        """
        preset_dir = os.environ.get("LMBRIDGE_PRESET_DIR")
        return cls(
            ollama_host=os.environ.get("OLLAMA_HOST") or DEFAULT_OLLAMA_HOST,
            timeout=_env_float("LMBRIDGE_TIMEOUT", DEFAULT_TIMEOUT),
            preset_dir=Path(preset_dir) if preset_dir else default_preset_dir(),
            log_level=os.environ.get("LMBRIDGE_LOG_LEVEL", "INFO"),
            json_logs=_env_bool("LMBRIDGE_JSON_LOGS", False),
        )
