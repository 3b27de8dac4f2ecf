import pytest

from journeykit.components.behaviors import BehaviorMetadata
from journeykit.components.expectations import ExpectationMetadata
from journeykit.components.tests import TestMetadata
from journeykit.exceptions import DuplicateKeyError, RegistryFrozenError


def test_ids_count_per_expectation(registries):
    keys = [
        registries.tests.register(TestMetadata(name=f"t{i}", expectation_id="EXP-001")).key
        for i in range(3)
    ]
    other = registries.tests.register(TestMetadata(name="other", expectation_id="EXP-002"))

    assert keys == ["EXP-001-TEST-001", "EXP-001-TEST-002", "EXP-001-TEST-003"]
    assert other.key == "EXP-002-TEST-001"
    assert registries.tests.get_by_id("EXP-001-TEST-002").metadata.name == "t1"


def test_explicit_test_id_is_honoured(registries):
    entry = registries.tests.register(TestMetadata(name="custom", test_id="PAY-SMOKE", expectation_id="EXP-001"))

    assert entry.key == "PAY-SMOKE"
    with pytest.raises(DuplicateKeyError):
        registries.tests.register(TestMetadata(name="again", test_id="PAY-SMOKE"))
    # explicit ids do not consume the counter
    assert registries.tests.register(TestMetadata(name="next", expectation_id="EXP-001")).key == "EXP-001-TEST-001"


def test_lookups_by_behavior_and_type(registries):
    class Capture:
        pass

    registries.behaviors.register(BehaviorMetadata(name="Capture"), Capture)
    unit = registries.tests.register(TestMetadata(name="u", behavior_id=Capture, expectation_id="EXP-1"))
    e2e = registries.tests.register(TestMetadata(name="e", behavior_id="Capture", type="e2e", framework="playwright"))

    assert registries.tests.get_by_behavior("Capture") == [unit, e2e]
    assert registries.tests.get_by_behavior(Capture) == [unit, e2e]
    assert registries.tests.get_by_type("e2e") == [e2e]
    assert registries.tests.get_stats()["by_framework"] == {"unknown": 1, "playwright": 1}


def test_coverage_and_gaps(registries):
    registries.tests.register(TestMetadata(name="a", expectation_id="EXP-1"))
    registries.tests.register(TestMetadata(name="b", expectation_id="EXP-1"))
    registries.tests.register(TestMetadata(name="c", expectation_id="EXP-2"))

    assert registries.tests.get_covered_expectations() == ["EXP-1", "EXP-2"]
    assert registries.tests.has_tests("EXP-2")
    assert not registries.tests.has_tests("EXP-3")

    coverage = registries.tests.get_coverage(["EXP-1", "EXP-2", "EXP-3", "EXP-4"])
    assert coverage["total_tests"] == 3
    assert coverage["covered_expectations"] == 2
    assert coverage["total_expectations"] == 4
    assert coverage["coverage_percentage"] == 50.0
    assert registries.tests.get_gaps(["EXP-1", "EXP-3", "EXP-4"]) == ["EXP-3", "EXP-4"]


def test_expectation_reference_resolves_through_registry(registries):
    class SettlementExpectation:
        pass

    registries.expectations.register(ExpectationMetadata(expectation_id="EXP-77"), SettlementExpectation)
    entry = registries.tests.register(TestMetadata(name="settles", expectation_id=SettlementExpectation))

    assert entry.key == "EXP-77-TEST-001"


def test_stats_and_behavior_coverage(registries):
    registries.behaviors.register(BehaviorMetadata(name="Capture", expectation_id="EXP-1"))
    registries.behaviors.register(BehaviorMetadata(name="Refund"))
    registries.tests.register(TestMetadata(name="a", behavior_id="Capture", expectation_id="EXP-1"))

    assert registries.behaviors.get_coverage_by_behavior() == {"Capture": 1, "Refund": 0}
    stats = registries.behaviors.get_stats()
    assert stats["behaviors_with_tests"] == 1
    assert stats["behaviors_without_tests"] == 1
    assert stats["average_tests_per_behavior"] == 0.5
    assert registries.tests.get_stats()["total_tests"] == 1


def test_generated_id_skips_explicitly_taken_ids(registries):
    registries.tests.register(TestMetadata(name="a", test_id="EXP-001-TEST-001", expectation_id="EXP-001"))

    entry = registries.tests.register(TestMetadata(name="b", expectation_id="EXP-001"))

    assert entry.key == "EXP-001-TEST-002"
    assert entry.metadata.test_id == "EXP-001-TEST-002"
    assert registries.tests.register(TestMetadata(name="c", expectation_id="EXP-001")).key == "EXP-001-TEST-003"


def test_rejected_registration_leaves_id_and_counter_untouched(registries):
    registries.tests.freeze()
    metadata = TestMetadata(name="late", expectation_id="EXP-001")

    with pytest.raises(RegistryFrozenError):
        registries.tests.register(metadata)

    assert metadata.test_id is None
