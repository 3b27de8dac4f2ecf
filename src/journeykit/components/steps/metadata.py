# journeykit/components/steps/metadata.py

from typing import Literal

from pydantic import Field

from journeykit.components.base import BaseMetadata, DeclarationRef


class StepMetadata(BaseMetadata):
    name: str
    order: int | None = None
    actor: DeclarationRef = None
    expectations: list[str] = Field(default_factory=list)
    optional: bool = False
    alternatives: list[str] = Field(default_factory=list)
    reusable: bool = False
    inline: bool = False

    # Set by the registry: label of the enclosing milestone/journey (or of the
    # step class itself for standalone steps).
    parent: str | None = None
    parent_type: Literal["milestone", "journey"] | None = None
