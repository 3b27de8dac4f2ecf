import logging

from journeykit.components.contexts import BoundedContextMetadata, RelatedContext
from journeykit.components.enums import ContextRelationshipType, PersonaType
from journeykit.components.stakeholders import PersonaMetadata, StakeholderMetadata


class InvestorPersona:
    pass


class InvestmentContext:
    pass


def test_personas_by_type_and_tag(registries):
    investor = registries.personas.register(
        PersonaMetadata(name="Investor", type=PersonaType.HUMAN, tags=["retail"]), InvestorPersona
    )
    bank = registries.personas.register(PersonaMetadata(name="Bank", type="organization"))

    assert registries.personas.get_by_type(PersonaType.HUMAN) == [investor]
    assert registries.personas.get_by_type("organization") == [bank]
    assert registries.personas.get_by_tag("retail") == [investor]
    assert registries.personas.names() == ("Investor", "Bank")


def test_stakeholder_id_and_references(registries):
    registries.personas.register(PersonaMetadata(name="Investor", type="human"), InvestorPersona)
    registries.contexts.register(BoundedContextMetadata(name="Investment Management"), InvestmentContext)

    entry = registries.stakeholders.register(
        StakeholderMetadata(role="Portfolio Owner", persona=InvestorPersona, context=InvestmentContext, tags=["vip"])
    )

    assert entry.key == "investment-management:portfolio-owner"
    assert entry.metadata.persona == "Investor"
    assert entry.metadata.context == "Investment Management"
    assert entry.metadata.name == "Portfolio Owner"
    assert registries.stakeholders.get_by_persona(InvestorPersona) == [entry]
    assert registries.stakeholders.get_by_context("Investment Management") == [entry]
    assert registries.stakeholders.get_by_role("Portfolio Owner") == [entry]
    assert registries.stakeholders.get_by_tag("vip") == [entry]
    assert registries.stakeholders.context_of("Portfolio Owner") == "Investment Management"
    assert registries.stakeholders.context_of("Nobody") is None


def test_stakeholder_with_unregistered_persona_warns(registries, caplog):
    with caplog.at_level(logging.WARNING, logger="journeykit"):
        entry = registries.stakeholders.register(
            StakeholderMetadata(role="Auditor", persona="Regulator", context="Compliance", id="auditor")
        )

    assert entry.key == "auditor"
    assert "persona 'Regulator'" in caplog.text


def test_bounded_context_relationships(registries):
    orders = registries.contexts.register(
        BoundedContextMetadata(
            name="Orders",
            owner="Sales Team",
            relationships={
                "Inventory": ContextRelationshipType.UPSTREAM,
                "Shipping": "downstream",
                "Payments": "partnership",
            },
            vocabulary={"Order": "A customer purchase request"},
            tags=["core-domain"],
        )
    )

    assert registries.contexts.get_related_contexts("Orders") == [
        RelatedContext("Inventory", "upstream"),
        RelatedContext("Shipping", "downstream"),
        RelatedContext("Payments", "partnership"),
    ]
    assert registries.contexts.get_related_contexts("Orders", ContextRelationshipType.PARTNERSHIP) == [
        ("Payments", "partnership")
    ]
    assert registries.contexts.get_upstream_contexts("Orders") == ["Inventory"]
    assert registries.contexts.get_downstream_contexts("Orders") == ["Shipping"]
    assert registries.contexts.get_related_contexts("Unknown") == []
    assert registries.contexts.get_vocabulary("Orders") == {"Order": "A customer purchase request"}
    assert registries.contexts.get_vocabulary("Unknown") is None
    assert registries.contexts.get_by_context_owner("Sales Team") == [orders]
    assert registries.contexts.get_by_tag("core-domain") == [orders]
