# journeykit/components/stakeholders/metadata.py

from typing import Any

from pydantic import Field

from journeykit.components.attributes.metadata import AttributeMetadata
from journeykit.components.base import BaseMetadata, DeclarationRef
from journeykit.components.enums import PersonaType


class PersonaMetadata(BaseMetadata):
    """Who someone is, independent of any bounded context."""

    name: str
    type: PersonaType
    motivations: list[str] = Field(default_factory=list)
    pain_points: list[str] = Field(default_factory=list)
    characteristics: dict[str, Any] = Field(default_factory=dict)
    attributes: list[AttributeMetadata] = Field(default_factory=list)


class StakeholderMetadata(BaseMetadata):
    """A persona playing a role inside one bounded context."""

    role: str
    persona: DeclarationRef
    context: DeclarationRef
    # "<context>:<role>" in kebab case when omitted.
    id: str | None = None
    goals: list[str] = Field(default_factory=list)
    responsibilities: list[str] = Field(default_factory=list)
    permissions: list[str] = Field(default_factory=list)
    attributes: list[AttributeMetadata] = Field(default_factory=list)
