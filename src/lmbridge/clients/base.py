"""
Modelfile Sources — Protocol for retrieving a model's Modelfile text.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ModelfileSource(Protocol):
    """
    Anything that can return the Modelfile text for a model name.

    Implementations raise ModelfileFetchError (or ModelNotFoundError)
    when the Modelfile cannot be retrieved.
    """

    def get_modelfile(self, model_name: str) -> str:
        """Return the raw Modelfile for model_name."""
        ...
