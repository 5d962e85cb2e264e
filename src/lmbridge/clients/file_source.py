"""
File Source — Reads a Modelfile from disk instead of a server.
"""

from pathlib import Path

from lmbridge.errors import ModelfileFetchError


class FileModelfileSource:
    """
    ModelfileSource backed by a local Modelfile.

    The model name is only used for error messages; every lookup
    returns the same file.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def get_modelfile(self, model_name: str) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ModelfileFetchError(model_name, f"Modelfile not found: {self.path}") from e
        except OSError as e:
            raise ModelfileFetchError(model_name, f"cannot read {self.path}: {e}") from e
