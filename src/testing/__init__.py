"""Test support shipped with the library: service conformance checks."""

from .service_contract import (
    CONTRACT_CHECKS,
    ServiceFixture,
    check_count,
    check_count_after_delete,
    check_create,
    check_delete,
    check_delete_by_id,
    check_find_all,
    check_find_by_id,
    check_find_page,
    check_update,
    clear,
    model_state,
    service_fixture,
)

__all__ = [
    "CONTRACT_CHECKS",
    "ServiceFixture",
    "service_fixture",
    "clear",
    "model_state",
    "check_create",
    "check_update",
    "check_delete",
    "check_delete_by_id",
    "check_find_by_id",
    "check_find_all",
    "check_find_page",
    "check_count",
    "check_count_after_delete",
]
