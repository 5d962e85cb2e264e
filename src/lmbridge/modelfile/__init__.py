"""
Modelfile — Parsing of Ollama Modelfile directives.
"""

from lmbridge.modelfile.models import ParsedModelfile
from lmbridge.modelfile.parser import (
    DirectiveCapture,
    parse_modelfile,
)

__all__ = [
    "ParsedModelfile",
    "DirectiveCapture",
    "parse_modelfile",
]
