# journeykit/components/contexts/metadata.py

from pydantic import Field

from journeykit.components.attributes.metadata import AttributeMetadata
from journeykit.components.base import BaseMetadata
from journeykit.components.enums import ContextRelationshipType


class BoundedContextMetadata(BaseMetadata):
    name: str
    # Owning team.
    owner: str | None = None
    # other context name -> how this context relates to it
    relationships: dict[str, ContextRelationshipType] = Field(default_factory=dict)
    vocabulary: dict[str, str] = Field(default_factory=dict)
    attributes: list[AttributeMetadata] = Field(default_factory=list)
