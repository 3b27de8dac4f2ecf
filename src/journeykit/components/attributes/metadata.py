# journeykit/components/attributes/metadata.py

from typing import Any, Literal

from pydantic import Field

from journeykit.components.base import BaseMetadata, DeclarationRef

AttributeSource = Literal["inline", "decorator"]


class AttributeMetadata(BaseMetadata):
    """One named property of a persona, stakeholder, bounded context or other component."""

    name: str
    # "number", "str", or a class; stored as the type's name.
    type: DeclarationRef = None
    required: bool = False
    default: Any = None
    immutable: bool = False
    examples: list[Any] = Field(default_factory=list)
    # min/max, min_length/max_length, pattern, enum, ...
    validation: dict[str, Any] = Field(default_factory=dict)

    # Filled on registration.
    component: str | None = None
    source: AttributeSource = "inline"
