"""Keyed registries, lazy resolution and the active registry set."""

from .base import IndexView, KeyedRegistry
from .indexes import SecondaryIndex
from .pending import InheritingRegistry, PendingResolutions
from .records import RESOLVED, Pending, RegistryEntry, Resolved
from .store import RegistrySet
from .active import (
    ActiveRegistry,
    attributes,
    behaviors,
    contexts,
    events,
    expectations,
    get_default_registry_set,
    get_registry_set,
    get_identity,
    journeys,
    logic,
    milestones,
    personas,
    push_registry_set,
    stakeholders,
    steps,
    tests,
)

__all__ = [
    "ActiveRegistry",
    "IndexView",
    "InheritingRegistry",
    "KeyedRegistry",
    "Pending",
    "PendingResolutions",
    "RESOLVED",
    "RegistryEntry",
    "RegistrySet",
    "Resolved",
    "SecondaryIndex",
    "attributes",
    "behaviors",
    "contexts",
    "events",
    "expectations",
    "get_default_registry_set",
    "get_registry_set",
    "get_identity",
    "journeys",
    "logic",
    "milestones",
    "personas",
    "push_registry_set",
    "stakeholders",
    "steps",
    "tests",
]
