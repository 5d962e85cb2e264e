"""
Errors — Exception hierarchy for lmbridge.

Fetch and write failures propagate to the caller. Parameter-level
problems never raise; they are reported as diagnostics instead.
"""


class LMBridgeError(Exception):
    """Base class for all lmbridge errors."""
    pass


class ModelfileFetchError(LMBridgeError):
    """Raised when the source Modelfile cannot be retrieved."""
    
    def __init__(self, model_name: str, reason: str):
        self.model_name = model_name
        self.reason = reason
        super().__init__(f"Failed to get model info for '{model_name}': {reason}")


class ModelNotFoundError(ModelfileFetchError):
    """Raised when the model does not exist on the source server."""
    
    def __init__(self, model_name: str):
        super().__init__(model_name, "model not found")


class ExportWriteError(LMBridgeError):
    """Raised when an exported document cannot be serialized or written."""
    
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")
