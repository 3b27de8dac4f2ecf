# journeykit/components/expectations/metadata.py

from pydantic import BaseModel, ConfigDict, Field

from journeykit.components.base import BaseMetadata, DeclarationRef
from journeykit.components.enums import ExpectationPriority


class Scenario(BaseModel):
    model_config = ConfigDict(extra="forbid")

    given: str | None = None
    when: str | None = None
    then: str | None = None


class ExpectationMetadata(BaseMetadata):
    expectation_id: str | None = None
    expecting_stakeholder: DeclarationRef = None
    providing_stakeholder: DeclarationRef = None
    behaviors: list[DeclarationRef] = Field(default_factory=list)
    priority: ExpectationPriority | None = None
    milestone: DeclarationRef = None
    milestone_id: str | None = None
    journey_slug: str | None = None
    critical_path: bool = False
    scenario: Scenario | None = None
