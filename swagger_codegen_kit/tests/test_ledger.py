"""
Tests for the reference ledger and the reference resolver feeding it.
"""

import threading
from unittest import TestCase

from swagger_codegen_kit.analyzer import ReferenceLedger, ReferenceResolver
from swagger_codegen_kit.model import PossibleReference, Reference


class TestReferenceLedger(TestCase):
    def test_add_is_idempotent(self):
        ledger = ReferenceLedger()
        ledger.add("#/definitions/Missing", "Pet")
        ledger.add("#/definitions/Missing", "Pet")
        ledger.add("#/definitions/Gone", "Pet")
        ledger.add("#/definitions/Missing", "Dog")

        self.assertEqual(
            ledger.references,
            {
                "Pet": frozenset({"#/definitions/Missing", "#/definitions/Gone"}),
                "Dog": frozenset({"#/definitions/Missing"}),
            },
        )
        self.assertEqual(len(ledger), 3)
        self.assertTrue(ledger)

    def test_snapshot_is_a_copy(self):
        ledger = ReferenceLedger()
        ledger.add("#/definitions/A", "X")
        snapshot = ledger.snapshot()
        ledger.add("#/definitions/B", "X")

        self.assertEqual(snapshot, {"X": frozenset({"#/definitions/A"})})

    def test_empty_ledger(self):
        ledger = ReferenceLedger()
        self.assertEqual(ledger.snapshot(), {})
        self.assertEqual(len(ledger), 0)
        self.assertFalse(ledger)

    def test_reset(self):
        ledger = ReferenceLedger()
        ledger.add("#/definitions/A", "X")
        ledger.reset()
        self.assertEqual(ledger.snapshot(), {})

    def test_drain(self):
        ledger = ReferenceLedger()
        ledger.add("#/definitions/A", "X")

        self.assertEqual(ledger.drain(), {"X": frozenset({"#/definitions/A"})})
        self.assertEqual(ledger.snapshot(), {})

    def test_concurrent_adds_are_not_lost(self):
        ledger = ReferenceLedger()

        def record(worker):
            for i in range(200):
                ledger.add(f"#/definitions/T{worker}_{i}", "Shared")

        threads = [threading.Thread(target=record, args=(w,)) for w in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(len(ledger.snapshot()["Shared"]), 8 * 200)


def test_resolver_records_missing_targets(petstore_spec, ledger):
    resolver = ReferenceResolver(petstore_spec, ledger)

    pet = resolver.resolve_schema(Reference("#/definitions/Pet"), "owner")
    assert pet.name == "Pet"
    assert pet.value is petstore_spec.definitions["Pet"]
    assert not ledger

    assert resolver.resolve_schema(Reference("#/definitions/Nope"), "owner") is None
    # Wrong table and external documents are unresolved too
    assert resolver.resolve_schema(Reference("#/parameters/sortOrder"), "owner") is None
    assert resolver.resolve_schema(Reference("other.json#/definitions/Pet"), "owner") is None
    assert ledger.snapshot() == {
        "owner": frozenset({"#/definitions/Nope", "#/parameters/sortOrder", "other.json#/definitions/Pet"})
    }


def test_resolver_passes_inline_values_through(petstore_spec, ledger):
    resolver = ReferenceResolver(petstore_spec, ledger)
    inline = petstore_spec.parameters["limit"]

    assert resolver.resolve_parameter(PossibleReference(value=inline), "op") is inline
    assert resolver.resolve_parameter(PossibleReference(reference=Reference("#/parameters/limit")), "op") is inline
    assert resolver.resolve_response(PossibleReference(reference=Reference("#/responses/NotFound")), "op").description == "Not found"
    assert not ledger


def test_unresolved_references_are_logged(petstore_spec, ledger, caplog):
    resolver = ReferenceResolver(petstore_spec, ledger)
    with caplog.at_level("WARNING", logger="swagger_codegen_kit.analyzer.reference_resolver"):
        resolver.resolve_response(PossibleReference(reference=Reference("#/responses/Nope")), "getThing")

    assert "Unresolved reference #/responses/Nope in getThing" in caplog.text


def test_lookup_does_not_touch_the_ledger(petstore_spec, ledger, caplog):
    resolver = ReferenceResolver(petstore_spec, ledger)

    with caplog.at_level("WARNING", logger="swagger_codegen_kit.analyzer.reference_resolver"):
        assert resolver.lookup(Reference("#/responses/NotFound"), "responses").name == "NotFound"
        assert resolver.lookup(Reference("#/definitions/Nope"), "definitions") is None
        assert resolver.is_resolvable(Reference("#/parameters/limit"), "parameters")
        assert not resolver.is_resolvable(Reference("#/parameters/limit"), "definitions")

    assert not ledger
    assert caplog.text == ""
