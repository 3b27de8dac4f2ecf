import pytest

from journeykit.components.attributes import AttributeMetadata
from journeykit.components.contexts import BoundedContextMetadata
from journeykit.components.stakeholders import PersonaMetadata
from journeykit.exceptions import DuplicateKeyError, IdentityResolutionError


class CustomerPersona:
    pass


class AdminPersona:
    pass


class Money:
    pass


def test_inline_attributes_registered_per_component(registries):
    entries = registries.attributes.register_inline(
        CustomerPersona,
        [AttributeMetadata(name="age", type="number", required=True), AttributeMetadata(name="income", type="number")],
    )

    assert [e.key for e in entries] == ["CustomerPersona:inline:age", "CustomerPersona:inline:income"]
    assert [a.name for a in registries.attributes.get_inline(CustomerPersona)] == ["age", "income"]
    assert registries.attributes.has_inline(CustomerPersona)
    assert not registries.attributes.has_inline(AdminPersona)
    assert registries.attributes.get_inline(AdminPersona) == []


def test_single_inline_attribute_appends(registries):
    registries.attributes.register_inline(CustomerPersona, [AttributeMetadata(name="age")])
    registries.attributes.register_inline_attribute(CustomerPersona, AttributeMetadata(name="segment"))

    assert [a.name for a in registries.attributes.get_inline(CustomerPersona)] == ["age", "segment"]
    with pytest.raises(DuplicateKeyError):
        registries.attributes.register_inline_attribute(CustomerPersona, AttributeMetadata(name="age"))


def test_decorator_attributes_win_when_merged(registries):
    registries.attributes.register_inline(CustomerPersona, [AttributeMetadata(name="age", type="number")])
    registries.attributes.register_decorator(CustomerPersona, AttributeMetadata(name="age", type=int, required=True))
    registries.attributes.register_decorator(CustomerPersona, AttributeMetadata(name="balance", type=Money))

    merged = registries.attributes.get_attributes(CustomerPersona)

    assert [(a.name, a.source, a.type) for a in merged] == [
        ("age", "decorator", "int"),
        ("balance", "decorator", "Money"),
    ]
    assert registries.attributes.has_decorator(CustomerPersona)
    assert [e.metadata.name for e in registries.attributes.get_by_type(Money)] == ["balance"]


def test_registration_copies_the_declared_attribute(registries):
    declared = AttributeMetadata(name="age")

    registries.attributes.register_decorator(CustomerPersona, declared)

    assert declared.component is None
    assert declared.source == "inline"
    assert registries.attributes.get_decorator(CustomerPersona)[0].component == "CustomerPersona"


def test_attribute_needs_a_component(registries):
    with pytest.raises(IdentityResolutionError):
        registries.attributes.register(AttributeMetadata(name="orphan"))


def test_global_queries(registries):
    registries.attributes.register_inline(CustomerPersona, [AttributeMetadata(name="age")])
    registries.attributes.register_decorator(AdminPersona, AttributeMetadata(name="level"))
    registries.attributes.register_inline("Billing", [AttributeMetadata(name="currency")])

    assert list(registries.attributes.get_all_inline()) == [CustomerPersona, "Billing"]
    assert list(registries.attributes.get_all_decorator()) == [AdminPersona]
    assert registries.attributes.get_all_components() == [CustomerPersona, AdminPersona, "Billing"]
    assert registries.attributes.component_count() == 3
    assert list(registries.attributes.query_by_name(r"Persona$")) == [CustomerPersona, AdminPersona]

    stats = registries.attributes.get_stats()
    assert stats["total_attributes"] == 3
    assert stats["by_source"] == {"inline": 2, "decorator": 1}


def test_persona_and_context_declarations_feed_inline_attributes(registries):
    registries.personas.register(
        PersonaMetadata(name="Customer", type="human", attributes=[AttributeMetadata(name="age", type="number")]),
        CustomerPersona,
    )
    registries.contexts.register(
        BoundedContextMetadata(name="Billing", attributes=[AttributeMetadata(name="currency")])
    )

    assert [a.name for a in registries.attributes.get_inline(CustomerPersona)] == ["age"]
    assert [a.name for a in registries.attributes.get_inline("Billing")] == ["currency"]
    assert registries.attributes.component_count() == 2


def test_clear_empties_components(registries):
    registries.attributes.register_inline(CustomerPersona, [AttributeMetadata(name="age")])
    registries.clear_all()

    assert registries.attributes.get_all_components() == []
    assert registries.attributes.get_inline(CustomerPersona) == []
