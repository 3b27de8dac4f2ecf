"""Exception hierarchy for journeykit."""

from .base import JourneyKitError
from .registry_exceptions import (
    DuplicateKeyError,
    RegistryDuplicateError,
    RegistryError,
    RegistryFrozenError,
    RegistryLookupError,
)
from .identity_exceptions import IdentityError, IdentityResolutionError
from .validation_exceptions import (
    CyclicDependencyError,
    DetourValidationError,
    MissingOrderError,
    ValidationError,
)

__all__ = [
    "JourneyKitError",
    "RegistryError",
    "RegistryDuplicateError",
    "DuplicateKeyError",
    "RegistryLookupError",
    "RegistryFrozenError",
    "IdentityError",
    "IdentityResolutionError",
    "ValidationError",
    "MissingOrderError",
    "DetourValidationError",
    "CyclicDependencyError",
]
