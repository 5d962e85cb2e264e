"""
Template Translator — Rewrites Ollama Go templates as LM Studio Jinja.

Only the System / Prompt / Response variables and the `if` / `end`
conditional form are recognised. Anything else passes through
unchanged.
"""

import re


# Ordered: conditionals must be rewritten before bare variables so that
# `{{ if .System }}` is not half-matched as a `.System` reference.
TRANSLATION_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"{{\s*if\s+\.System\s*}}"), "{% if system_message %}"),
    (re.compile(r"{{\s*if\s+\.Prompt\s*}}"), "{% if user_message %}"),
    (re.compile(r"{{\s*end\s*}}"), "{% endif %}"),
    (re.compile(r"{{\s*\.System\s*}}"), "{{ system_message }}"),
    (re.compile(r"{{\s*\.Prompt\s*}}"), "{{ user_message }}"),
    (re.compile(r"{{\s*\.Response\s*}}"), "{{ model_response }}"),
]


def convert_go_template_to_jinja(go_template: str) -> str:
    """
    Convert Go template syntax to Jinja.

        {{ if .System }} -> {% if system_message %}
        {{ .Prompt }}    -> {{ user_message }}
        {{ end }}        -> {% endif %}
    """
    result = go_template
    for pattern, replacement in TRANSLATION_RULES:
        result = pattern.sub(replacement, result)
    return result
