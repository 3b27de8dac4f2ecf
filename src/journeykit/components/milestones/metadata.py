# journeykit/components/milestones/metadata.py

from pydantic import Field

from journeykit.components.base import BaseMetadata, DeclarationRef


class MilestoneMetadata(BaseMetadata):
    name: str
    id: str | None = None
    stakeholder: DeclarationRef = None
    order: float | None = None
    prerequisites: list[str] = Field(default_factory=list)
    business_event: DeclarationRef = None
    stateful: bool = True
    reusable: bool = False
    journeys: list[DeclarationRef] = Field(default_factory=list)
