"""
Modelfile Models — Intermediate representation of parsed directives.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class ParsedModelfile:
    """
    TEMPLATE, SYSTEM and PARAMETER values extracted from a Modelfile.

    parameters maps a parameter name to every value given for it, in
    the order the PARAMETER lines appeared. It is stored as a read-only
    mapping of tuples.
    """
    template: str = ""
    system: str = ""
    parameters: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        frozen = {name: tuple(values) for name, values in self.parameters.items()}
        object.__setattr__(self, "parameters", MappingProxyType(frozen))

    @classmethod
    def empty(cls) -> "ParsedModelfile":
        return cls()

    def values(self, name: str) -> list[str]:
        """All values of a parameter (empty list if absent)."""
        return list(self.parameters.get(name, ()))

    def first(self, name: str) -> str | None:
        """First value of a parameter, or None."""
        values = self.parameters.get(name)
        return values[0] if values else None

    @property
    def has_template(self) -> bool:
        return bool(self.template)

    @property
    def has_system(self) -> bool:
        return bool(self.system)
