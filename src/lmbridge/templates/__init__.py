"""
Templates — Go template to Jinja translation and token heuristics.
"""

from lmbridge.templates.translator import (
    TRANSLATION_RULES,
    convert_go_template_to_jinja,
)
from lmbridge.templates.tokens import (
    BOS_TOKENS,
    EOS_TOKENS,
    SYSTEM_MARKER,
    USER_MARKER,
    ASSISTANT_MARKER,
    EMPTY_THINK_MARKER,
    extract_bos_token,
    extract_eos_token,
)

__all__ = [
    # Translation
    "TRANSLATION_RULES",
    "convert_go_template_to_jinja",
    # Tokens
    "BOS_TOKENS",
    "EOS_TOKENS",
    "SYSTEM_MARKER",
    "USER_MARKER",
    "ASSISTANT_MARKER",
    "EMPTY_THINK_MARKER",
    "extract_bos_token",
    "extract_eos_token",
]
