"""
Clients — Sources of Modelfile text.

Provides the Ollama HTTP client and a local-file source.
"""

from lmbridge.clients.base import ModelfileSource
from lmbridge.clients.ollama_client import (
    OllamaConfig,
    OllamaClient,
    create_ollama_client,
)
from lmbridge.clients.file_source import FileModelfileSource

__all__ = [
    "ModelfileSource",
    "OllamaConfig",
    "OllamaClient",
    "create_ollama_client",
    "FileModelfileSource",
]
