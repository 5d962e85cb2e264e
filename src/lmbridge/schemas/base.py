"""
Schema Base — Common pydantic configuration for LM Studio documents.

LM Studio expects camelCase keys; models use snake_case attributes and
serialize through camelCase aliases.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LMStudioModel(BaseModel):
    """Base for every model that is written into an LM Studio document."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible dict with LM Studio key names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
