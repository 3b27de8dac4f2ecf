# journeykit/components/logic/metadata.py

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from journeykit.components.base import BaseMetadata, DeclarationRef
from journeykit.components.enums import LogicType


class LogicReference(BaseModel):
    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    logic: DeclarationRef
    condition: str | None = None


class LogicMetadata(BaseMetadata):
    name: str
    type: LogicType
    context: DeclarationRef = None
    invokes: list[DeclarationRef] = Field(default_factory=list)
    composed_of: list[LogicReference] = Field(default_factory=list)
    strategy: Literal["sequence", "parallel", "conditional"] | None = None
    inputs: dict[str, str] = Field(default_factory=dict)
    outputs: dict[str, str] = Field(default_factory=dict)
    requires: list[str] = Field(default_factory=list)
    applies_to: list[str] = Field(default_factory=list)
    aggregate_type: str | None = None
    expectation_id: str | None = None
    pure: bool = False
    idempotent: bool = False
    cacheable: bool = False
