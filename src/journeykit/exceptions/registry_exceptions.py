# journeykit/exceptions/registry_exceptions.py
"""Registry exceptions"""
from journeykit.exceptions.base import JourneyKitError


# ----------------------------------------------------------------------------
# Registry errors
# ----------------------------------------------------------------------------
class RegistryError(JourneyKitError): ...


class RegistryDuplicateError(RegistryError): ...


class DuplicateKeyError(RegistryDuplicateError):
    """Raised when a key is registered twice in the same registry."""

    def __init__(self, kind: str, key: str) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"[{kind}] key {key!r} is already registered")


class RegistryLookupError(RegistryError): ...


class RegistryFrozenError(RuntimeError, RegistryError): ...
