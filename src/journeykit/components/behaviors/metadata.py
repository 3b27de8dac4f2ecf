# journeykit/components/behaviors/metadata.py

from pydantic import Field

from journeykit.components.base import BaseMetadata, DeclarationRef
from journeykit.components.enums import BehaviorContractType, BehaviorExecutionMode


class BehaviorMetadata(BaseMetadata):
    name: str
    # Inherited from the enclosing Expectation when declared inline.
    expectation_id: str | None = None
    context: DeclarationRef = None
    execution_mode: BehaviorExecutionMode | None = None
    contract_type: BehaviorContractType | None = None
    invokes_logic: DeclarationRef = None
    tests: list[str] = Field(default_factory=list)
