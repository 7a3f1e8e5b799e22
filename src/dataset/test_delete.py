"""
Unit test for the dataset registry and the Dataset Delete web service.

HOW TO RUN:
From the src directory, run:
    python -m dataset.test_delete
"""

from rdflib import Dataset

from crud.store import RecordStore
from framework.identity import Identity
from permission import PermissionStore
from .delete import DatasetDelete
from .registry import DatasetRegistry


REGISTRY = "http://localhost/wsf/datasets/"
DATASET = "http://ex.org/onto"


def create_service():
    triple_store = Dataset()
    registry = DatasetRegistry(triple_store, REGISTRY)
    records = RecordStore(triple_store)
    permissions = PermissionStore()

    registry.register(DATASET, title="Example ontology", creator="10.0.0.1", hold_ontology=True)
    registry.register("http://ex.org/other", title="Other")
    records.add_record(DATASET, "http://ex.org/Foo", labels={"en": "Foo"})
    records.add_record("http://ex.org/other", "http://ex.org/x", labels={"en": "X"})

    return DatasetDelete(registry, records, permissions), registry, records, permissions


def test_registry():
    print("Testing dataset registry...")

    _, registry, _, _ = create_service()
    assert registry.datasets() == [DATASET, "http://ex.org/other"]
    assert registry.has_hold_marker(DATASET)
    assert not registry.has_hold_marker("http://ex.org/other")

    description = registry.describe(DATASET)
    assert description["title"] == "Example ontology"
    assert description["creator"] == "10.0.0.1"
    assert description["hold_ontology"] is True
    assert registry.describe("http://ex.org/unknown") is None

    print("✓ Dataset registry working correctly")


def test_delete_dataset():
    """Test the description, the records and the accesses are all removed."""
    print("Testing delete dataset...")

    dataset_delete, registry, records, permissions = create_service()
    permissions.grant("10.0.0.1", DATASET, ["delete"])
    permissions.grant("10.0.0.2", DATASET, ["read"])

    response = dataset_delete.delete(DATASET, Identity.from_request("10.0.0.1"))
    assert response.is_ok()
    assert not registry.is_registered(DATASET)
    assert not registry.has_hold_marker(DATASET)
    assert records.count_records(DATASET) == 0
    assert permissions.records() == []

    # the other dataset is untouched
    assert registry.is_registered("http://ex.org/other")
    assert records.count_records("http://ex.org/other") == 1

    print("✓ Delete dataset working correctly")


def test_delete_dataset_denied():
    print("Testing delete dataset denied...")

    dataset_delete, registry, _, permissions = create_service()
    permissions.grant("10.0.0.1", DATASET, ["read"])

    response = dataset_delete.delete(DATASET, Identity.from_request("10.0.0.1"))
    assert response.status == 403
    assert response.error.id == "WS-AUTH-VALIDATOR-301"
    assert registry.is_registered(DATASET)

    print("✓ Delete dataset denied working correctly")


def test_delete_dataset_without_uri():
    dataset_delete, _, _, _ = create_service()

    response = dataset_delete.delete("", Identity.from_request("10.0.0.1"))
    assert response.status == 400
    assert response.error.id == "WS-DATASET-DELETE-200"


class FailingRegistry(DatasetRegistry):
    def remove(self, dataset_uri):
        raise IOError("registry graph is read-only")


def test_delete_dataset_store_failure():
    print("Testing delete dataset store failure...")

    triple_store = Dataset()
    permissions = PermissionStore()
    permissions.grant("10.0.0.1", DATASET, ["delete"])
    dataset_delete = DatasetDelete(FailingRegistry(triple_store, REGISTRY), RecordStore(triple_store), permissions)

    response = dataset_delete.delete(DATASET, Identity.from_request("10.0.0.1"))
    assert response.status == 500
    assert response.error.id == "WS-DATASET-DELETE-300"

    print("✓ Delete dataset store failure working correctly")


def run_all_tests():
    """Run all test functions."""
    print("=" * 50)
    print("Running DatasetDelete Tests")
    print("=" * 50)

    test_functions = [
        test_registry,
        test_delete_dataset,
        test_delete_dataset_denied,
        test_delete_dataset_without_uri,
        test_delete_dataset_store_failure,
    ]

    passed = 0
    failed = 0

    for test_func in test_functions:
        try:
            test_func()
            passed += 1
        except Exception as e:
            print(f"✗ {test_func.__name__} FAILED: {e}")
            failed += 1

    print("=" * 50)
    print(f"Test Results: {passed} passed, {failed} failed")
    print("=" * 50)

    return failed == 0


if __name__ == "__main__":
    exit(0 if run_all_tests() else 1)
