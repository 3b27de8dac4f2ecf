# journeykit/components/base.py

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# A class, a function or the string name of a declaration.
DeclarationRef = Any


class BaseMetadata(BaseModel):
    """Fields shared by every metadata record.

    Records are mutable: the lazy resolver fills inherited fields in place and
    registries normalise references to string keys on registration.
    """

    model_config = ConfigDict(
        extra="forbid",
        use_enum_values=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )

    name: str | None = None
    description: str | None = None
    tags: list[str] = Field(default_factory=list)


__all__ = ["BaseMetadata", "DeclarationRef"]
