"""
Unit test for the ontology delete domain models and error catalog.

HOW TO RUN:
From the src directory, run:
    python -m ontology_delete.test_domain
"""

from framework.errors import ErrorLevel
from .domain import PipelineStage, ResourceKind, ResourceTarget
from .errors import ONTOLOGY_DELETE_ERRORS


def test_resource_kind_selectors():
    """Test the operation selectors accepted by the service."""
    print("Testing resource kind selectors...")

    assert ResourceKind.from_function("class") is ResourceKind.CLASS
    assert ResourceKind.from_function("deleteClass") is ResourceKind.CLASS
    assert ResourceKind.from_function("delete_property") is ResourceKind.PROPERTY
    assert ResourceKind.from_function("deleteNamedIndividual") is ResourceKind.NAMED_INDIVIDUAL
    assert ResourceKind.from_function("named_individual") is ResourceKind.NAMED_INDIVIDUAL
    assert ResourceKind.from_function("deleteOntology") is ResourceKind.ONTOLOGY

    assert ResourceKind.from_function("") is None
    assert ResourceKind.from_function("delete") is None
    assert ResourceKind.from_function("deleteDataset") is None

    print("✓ Resource kind selectors working correctly")


def test_ontology_target_uses_ontology_uri():
    target = ResourceTarget.for_kind(ResourceKind.ONTOLOGY, "http://ex.org/onto", "http://ex.org/ignored")
    assert target.uri == "http://ex.org/onto"

    target = ResourceTarget.for_kind(ResourceKind.CLASS, "http://ex.org/onto", "http://ex.org/Foo")
    assert target.uri == "http://ex.org/Foo"
    assert target.ontology_uri == "http://ex.org/onto"


def test_pipeline_stage_errors():
    assert PipelineStage.CASCADE_ERROR.is_error
    assert PipelineStage.AUTH_ERROR.is_error
    assert not PipelineStage.CASCADED.is_error
    assert not PipelineStage.DONE.is_error


def test_error_catalog():
    """Test the catalog codes and their severity."""
    print("Testing ontology delete error catalog...")

    assert ONTOLOGY_DELETE_ERRORS.webservice == "/ws/ontology/delete/"
    for code in ("_200", "_201", "_202", "_203", "_204"):
        assert ONTOLOGY_DELETE_ERRORS.lookup(code).level == ErrorLevel.WARNING
    for code in ("_300", "_301", "_302", "_303", "_304", "_305"):
        assert ONTOLOGY_DELETE_ERRORS.lookup(code).level == ErrorLevel.ERROR

    assert ONTOLOGY_DELETE_ERRORS.lookup("_203").id == "WS-ONTOLOGY-DELETE-203"
    assert ONTOLOGY_DELETE_ERRORS.lookup("_300").name == "Can't load the ontology"

    print("✓ Ontology delete error catalog working correctly")


def run_all_tests():
    """Run all test functions."""
    print("=" * 50)
    print("Running Ontology Delete Domain Tests")
    print("=" * 50)

    test_functions = [
        test_resource_kind_selectors,
        test_ontology_target_uses_ontology_uri,
        test_pipeline_stage_errors,
        test_error_catalog,
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
