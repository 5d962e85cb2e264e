"""
Template Tokens — Heuristic BOS/EOS token and role-marker detection.
"""

# Checked with startswith, first match wins
BOS_TOKENS: tuple[str, ...] = (
    "[gMASK]",
    "<s>",
    "<|begin_of_text|>",
    "<|im_start|>",
)

# Checked with containment, first match wins.
# NOTE: <|user|> is a role marker rather than an end token; GLM-style
# templates rely on it being picked up here.
EOS_TOKENS: tuple[str, ...] = (
    "<|endoftext|>",
    "</s>",
    "<|end_of_text|>",
    "<|im_end|>",
    "<|user|>",
)

SYSTEM_MARKER = "<|system|>"
USER_MARKER = "<|user|>"
ASSISTANT_MARKER = "<|assistant|>"
EMPTY_THINK_MARKER = "<think></think>"


def extract_bos_token(template: str) -> str:
    """Return the BOS token the template starts with, or ""."""
    for token in BOS_TOKENS:
        if template.startswith(token):
            return token
    return ""


def extract_eos_token(template: str) -> str:
    """Return the first known EOS token found in the template, or ""."""
    for token in EOS_TOKENS:
        if token in template:
            return token
    return ""
