"""
Ollama Client — Fetches Modelfiles from a running Ollama server.

Implements ModelfileSource using Ollama's /api/show endpoint.
"""

from dataclasses import dataclass
from typing import Any

import requests

from lmbridge.config import DEFAULT_OLLAMA_HOST, DEFAULT_TIMEOUT, normalize_host
from lmbridge.errors import ModelfileFetchError, ModelNotFoundError
from lmbridge.observability.logging import get_logger

logger = get_logger("clients.ollama")


@dataclass
class OllamaConfig:
    """Configuration for Ollama client."""
    host: str = DEFAULT_OLLAMA_HOST
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        self.host = normalize_host(self.host)


class OllamaClient:
    """
    Ollama API client implementing ModelfileSource.

    Usage:
        client = OllamaClient()  # http://localhost:11434
        modelfile = client.get_modelfile("llama3:8b")
    """

    def __init__(
        self,
        config: OllamaConfig | None = None,
        session: requests.Session | None = None,
    ):
        """
        Initialize Ollama client.

        Args:
            config: Client configuration
            session: Optional requests session (shared pools, test doubles)
        """
        self.config = config or OllamaConfig()
        self._session = session or requests.Session()

    @property
    def show_url(self) -> str:
        return f"{self.config.host}/api/show"

    def show(self, model_name: str) -> dict[str, Any]:
        """
        Call /api/show for model_name and return the decoded payload.

        Raises ModelNotFoundError on 404, ModelfileFetchError otherwise.
        """
        logger.debug(f"POST {self.show_url} model={model_name}")

        try:
            response = self._session.post(
                self.show_url,
                json={"model": model_name},
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise ModelfileFetchError(model_name, f"request failed: {e}") from e

        if response.status_code == 404:
            raise ModelNotFoundError(model_name)

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise ModelfileFetchError(
                model_name, f"HTTP {response.status_code}: {response.text[:200]}"
            ) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise ModelfileFetchError(model_name, "response is not valid JSON") from e

        if not isinstance(payload, dict):
            raise ModelfileFetchError(model_name, "unexpected response payload")

        return payload

    def get_modelfile(self, model_name: str) -> str:
        """Return the Modelfile text Ollama reports for model_name."""
        modelfile = self.show(model_name).get("modelfile", "")
        if not isinstance(modelfile, str):
            raise ModelfileFetchError(model_name, "modelfile field is not a string")
        return modelfile

    def close(self) -> None:
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


def create_ollama_client(
    host: str | None = None,
    timeout: float | None = None,
    **kwargs: Any
) -> OllamaClient:
    """Factory for Ollama client."""
    config = OllamaConfig(
        host=host or DEFAULT_OLLAMA_HOST,
        timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
    )
    return OllamaClient(config, **kwargs)
