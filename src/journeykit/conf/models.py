# journeykit/conf/models.py

from pydantic import BaseModel, ConfigDict, Field


class JourneyKitSettings(BaseModel):
    """Validated view of a :class:`~journeykit.conf.Settings` mapping.

    Unknown upper-case keys are kept so applications can store their own
    values next to journeykit's.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    # "{EXPECTATION}-TEST-{NNN}"; tests without an expectation use the placeholder
    TEST_ID_PLACEHOLDER: str = Field(default="UNRESOLVED", min_length=1)
    TEST_ID_WIDTH: int = Field(default=3, ge=1)

    # "{JOURNEY}-EXP-{NNN}"
    EXPECTATION_ID_WIDTH: int = Field(default=3, ge=1)

    WARN_ON_UNRESOLVED: bool = True

    DEFAULT_HANDLER_PRIORITY: int = 0


DEFAULTS: dict[str, object] = JourneyKitSettings().model_dump()
