# journeykit/exceptions/validation_exceptions.py
"""Structural validation errors raised at registration or on explicit demand."""
from collections.abc import Sequence

from journeykit.exceptions.base import JourneyKitError


class ValidationError(JourneyKitError): ...


class MissingOrderError(ValidationError):
    """Raised when a step needs an ``order`` and does not have one."""

    def __init__(self, message: str, *, names: Sequence[str] = ()) -> None:
        self.names = tuple(names)
        super().__init__(message)


class DetourValidationError(ValidationError):
    """Raised when a journey declares a detour that cannot branch off its milestones."""

    def __init__(self, journey: str, message: str) -> None:
        self.journey = journey
        super().__init__(f"Journey {journey!r}: {message}")


class CyclicDependencyError(ValidationError):
    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = tuple(cycle)
        super().__init__("Dependency cycle detected: " + " -> ".join(self.cycle))
