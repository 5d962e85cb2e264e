"""
lmbridge — Export Ollama Modelfile configuration to LM Studio.

Parses TEMPLATE / SYSTEM / PARAMETER directives, translates the Go
template to Jinja and maps everything onto LM Studio's config and
preset JSON documents.
"""

__version__ = "0.1.0"
