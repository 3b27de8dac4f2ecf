# journeykit/components/enums.py

from enum import Enum


class PersonaType(str, Enum):
    HUMAN = "human"
    ORGANIZATION = "organization"
    GROUP = "group"
    SYSTEM = "system"


class ExpectationPriority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ContextRelationshipType(str, Enum):
    UPSTREAM = "upstream"
    DOWNSTREAM = "downstream"
    PARTNERSHIP = "partnership"
    CUSTOMER_SUPPLIER = "customer-supplier"


class LogicType(str, Enum):
    SPECIFICATION = "specification"
    POLICY = "policy"
    RULE = "rule"
    BEHAVIOR = "behavior"
    CALCULATION = "calculation"
    TRANSFORMATION = "transformation"
    VALIDATION = "validation"
    ORCHESTRATION = "orchestration"
    QUERY = "query"
    COMMAND = "command"
    EVENT_HANDLER = "event-handler"


class TestType(str, Enum):
    __test__ = False

    UNIT = "unit"
    INTEGRATION = "integration"
    E2E = "e2e"
    CONTRACT = "contract"
    PERFORMANCE = "performance"
    SECURITY = "security"


class BehaviorExecutionMode(str, Enum):
    IMMEDIATE = "immediate"
    DEFERRED = "deferred"
    SCHEDULED = "scheduled"
    CONDITIONAL = "conditional"


class BehaviorContractType(str, Enum):
    SYNC = "sync"
    ASYNC = "async"
    EVENT_DRIVEN = "event-driven"
    BATCH = "batch"


__all__ = [
    "BehaviorContractType",
    "BehaviorExecutionMode",
    "ContextRelationshipType",
    "ExpectationPriority",
    "LogicType",
    "PersonaType",
    "TestType",
]
