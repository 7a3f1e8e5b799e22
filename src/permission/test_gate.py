"""
Unit test for the permission store and the two-tier permission gate.

HOW TO RUN:
From the src directory, run:
    python -m permission.test_gate
"""

from concurrent.futures import ThreadPoolExecutor

from framework.identity import Identity
from .gate import PermissionGate
from .store import PermissionStore


REGISTRY = "http://localhost/wsf/ontologies/"
ONTO = "http://ex.org/onto"


def test_grant_and_check():
    """Test access records are granted, checked and replaced."""
    print("Testing grant and check...")

    store = PermissionStore()
    record = store.grant("10.0.0.1", ONTO, ["read", "delete"])
    assert record.actions == frozenset({"read", "delete"})

    assert store.check("10.0.0.1", ONTO, "delete").ok
    assert store.check("10.0.0.1", ONTO, "read").ok

    denied = store.check("10.0.0.1", ONTO, "update")
    assert denied.status == 403
    assert denied.error.id == "WS-AUTH-VALIDATOR-301"

    # Granting again replaces the record
    store.grant("10.0.0.1", ONTO, ["read"])
    assert not store.check("10.0.0.1", ONTO, "delete").ok
    assert len(store.records()) == 1

    print("✓ Grant and check working correctly")


def test_check_failures():
    """Test the failure statuses of the store."""
    print("Testing check failures...")

    store = PermissionStore()

    no_access = store.check("10.0.0.1", ONTO)
    assert no_access.status == 403
    assert no_access.status_message == "Forbidden"
    assert no_access.status_message_ext == "No access defined"
    assert no_access.error.id == "WS-AUTH-VALIDATOR-300"
    assert ONTO in no_access.error.debug_info

    assert store.check("", ONTO).status == 401
    assert store.check("10.0.0.1", ONTO, "destroy").status == 400

    try:
        store.grant("10.0.0.1", ONTO, ["destroy"])
        assert False, "Expected ValueError"
    except ValueError:
        pass

    print("✓ Check failures working correctly")


def test_revoke_scope():
    print("Testing revoke scope...")

    store = PermissionStore()
    store.grant("10.0.0.1", ONTO, ["delete"])
    store.grant("10.0.0.2", ONTO, ["delete"])
    store.grant("10.0.0.1", REGISTRY, ["delete"])

    assert store.revoke_scope(ONTO) == 2
    assert not store.check("10.0.0.2", ONTO).ok
    assert store.check("10.0.0.1", REGISTRY).ok

    print("✓ Revoke scope working correctly")


def test_registry_scope_grants():
    """Test registry scope access is enough."""
    print("Testing registry scope...")

    store = PermissionStore()
    store.grant("10.0.0.1", REGISTRY, ["delete"])
    gate = PermissionGate(store)

    assert gate.authorize("10.0.0.1", ONTO, REGISTRY).ok

    print("✓ Registry scope working correctly")


def test_resource_scope_fallback():
    """Test the resource scope is checked when the registry scope is denied."""
    print("Testing resource scope fallback...")

    store = PermissionStore()
    store.grant("10.0.0.1", ONTO, ["delete"])
    gate = PermissionGate(store)

    assert gate.authorize("10.0.0.1", ONTO, REGISTRY).ok

    print("✓ Resource scope fallback working correctly")


def test_double_denial_reports_resource_scope():
    """Test the resource scope failure is surfaced, not the registry one."""
    print("Testing double denial...")

    store = PermissionStore()
    # access to the registry exists but without delete, the ontology has none
    store.grant("10.0.0.1", REGISTRY, ["read"])
    gate = PermissionGate(store)

    check = gate.authorize("10.0.0.1", ONTO, REGISTRY)
    assert not check.ok
    assert check.error.id == "WS-AUTH-VALIDATOR-300"
    assert ONTO in check.error.debug_info
    assert REGISTRY not in check.error.debug_info

    print("✓ Double denial working correctly")


def test_empty_resource_uses_registry_scope_only():
    print("Testing empty resource URI...")

    store = PermissionStore()
    gate = PermissionGate(store)

    check = gate.authorize("10.0.0.1", "", REGISTRY)
    assert not check.ok
    assert REGISTRY in check.error.debug_info

    store.grant("10.0.0.1", REGISTRY, ["delete"])
    assert gate.authorize("10.0.0.1", "", REGISTRY).ok

    print("✓ Empty resource URI working correctly")


def test_authorize_identities_checks_delegated_identity():
    """Test the registered identity is checked only when it differs."""
    print("Testing delegated identity...")

    store = PermissionStore()
    store.grant("10.0.0.1", ONTO, ["delete"])
    gate = PermissionGate(store)

    assert gate.authorize_identities(Identity.from_request("10.0.0.1"), ONTO, REGISTRY).ok

    delegated = Identity.from_request("10.0.0.1", "self::bob")
    check = gate.authorize_identities(delegated, ONTO, REGISTRY)
    assert not check.ok
    assert "10.0.0.1::bob" in check.error.debug_info

    store.grant("10.0.0.1::bob", ONTO, ["delete"])
    assert gate.authorize_identities(delegated, ONTO, REGISTRY).ok

    print("✓ Delegated identity working correctly")


def test_requester_failure_stops_before_registered():
    print("Testing requester failure...")

    store = PermissionStore()
    store.grant("10.0.0.2", ONTO, ["delete"])
    gate = PermissionGate(store)

    check = gate.authorize_identities(Identity.from_request("10.0.0.1", "10.0.0.2"), ONTO, REGISTRY)
    assert not check.ok
    assert "identity: 10.0.0.1;" in check.error.debug_info

    print("✓ Requester failure working correctly")


class FailingCloseStore(PermissionStore):
    """Permission store whose sessions fail to close."""

    def _release(self, session):
        raise RuntimeError("connection reset")


def test_session_cleanup_failures_are_suppressed():
    """Test a failing session close does not change the check result."""
    print("Testing session cleanup...")

    store = FailingCloseStore()
    store.grant("10.0.0.1", REGISTRY, ["delete"])
    gate = PermissionGate(store)

    assert gate.authorize("10.0.0.1", ONTO, REGISTRY).ok

    healthy = PermissionStore()
    PermissionGate(healthy).authorize("10.0.0.1", ONTO, REGISTRY)
    assert healthy.open_sessions == 0

    print("✓ Session cleanup working correctly")


def test_concurrent_sessions_are_counted():
    """Test the open session counter is back to zero after concurrent checks."""
    print("Testing concurrent sessions...")

    store = PermissionStore()
    store.grant("10.0.0.1", ONTO, ["delete"])
    gate = PermissionGate(store)

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(lambda _: gate.authorize("10.0.0.1", ONTO, REGISTRY).ok, range(200)))

    assert all(results)
    assert store.open_sessions == 0

    print("✓ Concurrent sessions working correctly")


def run_all_tests():
    """Run all test functions."""
    print("=" * 50)
    print("Running Permission Tests")
    print("=" * 50)

    test_functions = [
        test_grant_and_check,
        test_check_failures,
        test_revoke_scope,
        test_registry_scope_grants,
        test_resource_scope_fallback,
        test_double_denial_reports_resource_scope,
        test_empty_resource_uses_registry_scope_only,
        test_authorize_identities_checks_delegated_identity,
        test_requester_failure_stops_before_registered,
        test_session_cleanup_failures_are_suppressed,
        test_concurrent_sessions_are_counted,
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
