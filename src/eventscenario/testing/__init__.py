"""
Given/When/Then scenario testing for event-sourced aggregates.

Components:
    AggregateRootTestCase: pytest base class that runs one scenario per test
    ScenarioController: drives a scenario without the base class
    EventStager: stages history for aggregates other than the one under test
    assert_expected_failure: compares expected and caught failures

Example:
    >>> from eventscenario.testing import AggregateRootTestCase
    >>>
    >>> class TestAccount(AggregateRootTestCase):
    ...     aggregate_root_class = Account
    ...
    ...     def handle(self, command: str, *args) -> None:
    ...         ...
    ...
    ...     def test_cannot_withdraw_from_empty_account(self) -> None:
    ...         self.given(AccountOpened(owner="ada"))
    ...         self.when("withdraw", 10)
    ...         self.expect_to_fail(InsufficientFunds("balance is 0", code=402))

Note:
    This module is intended for test code only.
"""

from eventscenario.testing.case import AggregateRootTestCase
from eventscenario.testing.failures import (
    assert_expected_failure,
    describe_failure,
    failure_code,
)
from eventscenario.testing.scenario import (
    EventStager,
    ScenarioController,
    ScenarioPhase,
    ScenarioState,
    describe_event_mismatch,
)

__all__ = [
    "AggregateRootTestCase",
    "ScenarioController",
    "ScenarioPhase",
    "ScenarioState",
    "EventStager",
    "assert_expected_failure",
    "describe_failure",
    "describe_event_mismatch",
    "failure_code",
]
