"""
journeykit: registries and resolution for journey/domain metadata.

Declarations (journeys, milestones, steps, expectations, behaviors, tests,
logic, domain events and their handlers, personas, stakeholders and bounded
contexts) register typed metadata records here. The package keeps one keyed
registry per kind, resolves cross-references between declarations, fills in
inherited fields of inline declarations lazily and validates ordering and
dependency graphs.

Import Guidelines:
------------------
- Use `journeykit.registry` for the registry set and the active-set helpers.
- Use `journeykit.components.<kind>` for metadata models and registries.
- Use `journeykit.identity` to turn declaration objects into registry keys.
- Use `journeykit.exceptions` for standardized error handling.
- Use `journeykit.conf` to configure id generation and diagnostics.
"""

from importlib.metadata import PackageNotFoundError, version

from .conf import Settings
from .exceptions import JourneyKitError
from .registry import RegistrySet, get_registry_set, push_registry_set

try:
    __version__ = version("journeykit")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "JourneyKitError",
    "RegistrySet",
    "Settings",
    "get_registry_set",
    "push_registry_set",
]
