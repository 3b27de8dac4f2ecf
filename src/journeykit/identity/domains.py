"""Registry kind constants."""

from __future__ import annotations

__all__ = [
    "JOURNEYS",
    "MILESTONES",
    "STEPS",
    "EXPECTATIONS",
    "BEHAVIORS",
    "TESTS",
    "LOGIC",
    "EVENTS",
    "PERSONAS",
    "STAKEHOLDERS",
    "CONTEXTS",
    "ATTRIBUTES",
    "SUPPORTED_KINDS",
    "normalize_kind",
]

JOURNEYS = "journeys"
MILESTONES = "milestones"
STEPS = "steps"
EXPECTATIONS = "expectations"
BEHAVIORS = "behaviors"
TESTS = "tests"
LOGIC = "logic"
EVENTS = "events"
PERSONAS = "personas"
STAKEHOLDERS = "stakeholders"
CONTEXTS = "contexts"
ATTRIBUTES = "attributes"

SUPPORTED_KINDS: tuple[str, ...] = (
    JOURNEYS,
    MILESTONES,
    STEPS,
    EXPECTATIONS,
    BEHAVIORS,
    TESTS,
    LOGIC,
    EVENTS,
    PERSONAS,
    STAKEHOLDERS,
    CONTEXTS,
    ATTRIBUTES,
)


def normalize_kind(value: str) -> str:
    """Return the canonical kind for ``value`` (case/whitespace insensitive).

    :raises ValueError: if ``value`` is not a supported kind.
    """
    kind = str(value).strip().lower().replace("-", "_")
    if kind not in SUPPORTED_KINDS:
        raise ValueError(f"unknown registry kind {value!r}; expected one of {', '.join(SUPPORTED_KINDS)}")
    return kind
