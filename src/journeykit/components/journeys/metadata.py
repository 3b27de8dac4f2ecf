# journeykit/components/journeys/metadata.py

from pydantic import BaseModel, ConfigDict, Field

from journeykit.components.base import BaseMetadata, DeclarationRef


class MilestoneReference(BaseModel):
    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    milestone: DeclarationRef
    order: float
    prerequisites: list[str] = Field(default_factory=list)


class JourneyReference(BaseModel):
    """A detour: a sub-journey branching off after one milestone."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    journey: DeclarationRef
    order: float
    triggered_after: DeclarationRef
    triggered_by: str | None = None
    rejoins_at: float | str | None = None
    label: str | None = None


class StakeholderInteraction(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    interaction: str
    milestone: str | None = None


class JourneyMetadata(BaseMetadata):
    name: str
    slug: str
    primary_stakeholder: DeclarationRef = None
    milestones: list[MilestoneReference] = Field(default_factory=list)
    detours: list[JourneyReference] = Field(default_factory=list)
    participating_stakeholders: list[DeclarationRef] = Field(default_factory=list)
    outcomes: list[str] = Field(default_factory=list)
    triggering_event: DeclarationRef = None
    alternative_flows: list[str] = Field(default_factory=list)
    stakeholder_interactions: list[StakeholderInteraction] = Field(default_factory=list)
    critical_path: bool = False
    context: DeclarationRef = None
    is_detour: bool = False
