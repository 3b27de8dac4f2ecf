from journeykit.components.milestones import MilestoneMetadata


def test_get_by_journey_sorts_by_order_with_unordered_last(registries):
    registries.milestones.register(MilestoneMetadata(name="Approve", order=3), journey_slug="onboarding")
    registries.milestones.register(MilestoneMetadata(name="Notify"), journey_slug="onboarding")
    registries.milestones.register(MilestoneMetadata(name="Submit", order=1, journeys=["onboarding", "renewal"]))

    assert [e.key for e in registries.milestones.get_by_journey("onboarding")] == ["Submit", "Approve", "Notify"]
    assert [e.key for e in registries.milestones.get_by_journey("renewal")] == ["Submit"]
    assert registries.milestones.all_journey_slugs() == ("onboarding", "renewal")


def test_lookups(registries):
    submit = registries.milestones.register(
        MilestoneMetadata(name="Submit", id="M-1", stakeholder="Customer", reusable=True)
    )
    review = registries.milestones.register(MilestoneMetadata(name="Review", prerequisites=["Submit"], stateful=False))

    assert registries.milestones.get_by_name("Submit") is submit
    assert registries.milestones.get_by_id("M-1") is submit
    assert registries.milestones.get_by_stakeholder("Customer") == [submit]
    assert registries.milestones.get_prerequisites("Review") == [submit]
    assert registries.milestones.get_prerequisites("missing") == []
    assert registries.milestones.get_reusable() == [submit]
    assert registries.milestones.get_stateful() == [submit]
    assert review.metadata.stateful is False


def test_circular_prerequisites(registries):
    registries.milestones.register(MilestoneMetadata(name="A", prerequisites=["B"]))
    registries.milestones.register(MilestoneMetadata(name="B", prerequisites=["A"]))
    registries.milestones.register(MilestoneMetadata(name="C", prerequisites=["Unknown"]))

    assert registries.milestones.has_circular_dependency("A")
    assert not registries.milestones.has_circular_dependency("C")


def test_stats(registries):
    registries.milestones.register(MilestoneMetadata(name="Submit", reusable=True), journey_slug="onboarding")
    stats = registries.milestones.get_stats()
    assert stats["total_milestones"] == 1
    assert stats["reusable_milestones"] == 1
    assert stats["by_journey"] == {"onboarding": 1}
