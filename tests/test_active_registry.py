from journeykit import RegistrySet, get_registry_set, push_registry_set
from journeykit.components.logic import LogicMetadata
from journeykit.registry import logic as logic_registry
from journeykit.registry import ActiveRegistry, get_identity


def test_push_registry_set_restores_previous():
    original = get_registry_set()
    fresh = RegistrySet()
    with push_registry_set(fresh) as active:
        assert active is fresh
        assert get_registry_set() is fresh
        with push_registry_set() as nested:
            assert get_registry_set() is nested
            assert nested is not fresh
        assert get_registry_set() is fresh
    assert get_registry_set() is original


def test_module_handles_follow_the_active_set():
    with push_registry_set() as first:
        logic_registry.register(LogicMetadata(name="CalculateFee", type="calculation"))
        assert "CalculateFee" in first.logic

    with push_registry_set() as second:
        assert logic_registry.count() == 0
        assert len(logic_registry) == 0
        assert logic_registry.current() is second.logic
        assert ActiveRegistry("Logic").get("CalculateFee") is None
        assert get_identity() is second.identity


def test_active_registry_normalizes_kind_and_forwards_calls(registries):
    handle = ActiveRegistry(" Logic ")

    assert handle.kind == "logic"
    assert repr(handle) == "<ActiveRegistry kind='logic'>"
    handle.register(LogicMetadata(name="ApproveLoan", type="rule"))
    assert "ApproveLoan" in registries.logic
    assert registries.logic.count() == 1


def test_registry_set_exposes_every_kind():
    registries = RegistrySet()

    assert registries.kinds() == tuple(
        sorted(
            [
                "attributes",
                "behaviors",
                "contexts",
                "events",
                "expectations",
                "journeys",
                "logic",
                "milestones",
                "personas",
                "stakeholders",
                "steps",
                "tests",
            ]
        )
    )
    assert registries["Journeys"] is registries.journeys
    assert set(registries.stats()) == set(registries.kinds())


def test_clear_all_resets_every_registry(registries):
    registries.logic.register(LogicMetadata(name="CalculateFee", type="calculation"))
    registries.clear_all()
    assert registries.logic.count() == 0
