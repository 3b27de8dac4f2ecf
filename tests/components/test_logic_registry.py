import pytest

from journeykit.components.logic import LogicMetadata, LogicReference
from journeykit.exceptions import CyclicDependencyError


class ComputeTax:
    pass


def logic(registries, name, *, invokes=(), composed_of=(), **fields):
    fields.setdefault("type", "calculation")
    return registries.logic.register(
        LogicMetadata(
            name=name,
            invokes=list(invokes),
            composed_of=[LogicReference(logic=ref) for ref in composed_of],
            **fields,
        )
    )


def test_lookups(registries):
    fee = logic(registries, "CalculateFee", context="Payments", pure=True)
    policy = logic(registries, "RefundPolicy", type="policy")

    assert registries.logic.get_by_name("CalculateFee") is fee
    assert registries.logic.get_by_type("policy") == [policy]
    assert registries.logic.get_by_context("Payments") == [fee]
    assert registries.logic.get_stats()["pure_logic"] == 1


def test_dependencies_merge_invokes_and_composition(registries):
    registries.logic.register(LogicMetadata(name="ComputeTax", type="calculation"), ComputeTax)
    logic(registries, "Checkout", invokes=["CalculateFee", ComputeTax], composed_of=[ComputeTax, "Notify"])

    assert registries.logic.get_dependencies("Checkout") == ["CalculateFee", "ComputeTax", "Notify"]
    assert registries.logic.get_dependencies("missing") == []


def test_cycle_detection(registries):
    logic(registries, "A", invokes=["B"])
    logic(registries, "B", composed_of=["C"])
    logic(registries, "C", invokes=["D"])

    assert not any(registries.logic.has_cycle(name) for name in ("A", "B", "C", "D"))

    logic(registries, "D", invokes=["B"])
    assert all(registries.logic.has_cycle(name) for name in ("B", "C", "D"))
    assert registries.logic.find_cycle("B") == ["B", "C", "D", "B"]

    with pytest.raises(CyclicDependencyError):
        registries.logic.require_acyclic("A")


def test_find_compatible(registries):
    fee = logic(registries, "CalculateFee", inputs={"amount": "Decimal"}, outputs={"fee": "Decimal"})
    untyped = logic(registries, "Anything")
    logic(registries, "Convert", inputs={"amount": "int"})

    assert registries.logic.find_compatible(inputs={"amount": "Decimal"}) == [fee, untyped]
    assert registries.logic.find_compatible(outputs={"fee": "Decimal"}) == [fee, untyped, registries.logic.get("Convert")]
