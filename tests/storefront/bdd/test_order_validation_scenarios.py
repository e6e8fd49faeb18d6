"""BDD tests for order validation."""

from pytest_bdd import scenarios

scenarios("features/order_validation.feature")
