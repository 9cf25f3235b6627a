"""
Shared fixtures for Account Manager tests.

No test touches the real terminal: input comes from a ScriptedInput
and output is collected into a list.
"""

import pytest

from account_manager.audit import AuditLogger, configure_logging
from account_manager.config import LoggingSettings, get_settings
from account_manager.menu import MenuLoop
from account_manager.operations import AccountOperations
from account_manager.services.storage import (
    InMemoryAuditStorage,
    InMemoryBalanceStorage,
)
from account_manager.validation import AmountValidator


class ScriptedInput:
    """Stands in for input(): returns lines in order, then raises EOFError."""

    def __init__(self, lines):
        self._lines = list(lines)
        self.prompts = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)


@pytest.fixture
def scripted_input():
    """The ScriptedInput class, for tests that wire their own components."""
    return ScriptedInput


@pytest.fixture(autouse=True)
def quiet_logging():
    """Route structured logs to stderr at WARNING for every test."""
    configure_logging(LoggingSettings(level="WARNING", json_format=True))


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def balance_storage():
    return InMemoryBalanceStorage()


@pytest.fixture
def audit_storage():
    return InMemoryAuditStorage()


@pytest.fixture
def audit_logger(audit_storage):
    return AuditLogger(audit_storage)


@pytest.fixture
def output():
    """Everything the program would have printed, one entry per message."""
    return []


@pytest.fixture
def operations(balance_storage, audit_logger, output):
    return AccountOperations(
        storage=balance_storage,
        audit_logger=audit_logger,
        echo=output.append,
    )


@pytest.fixture
def make_menu(operations, audit_logger, output):
    """Build a MenuLoop driven by the given input lines."""
    def _make(lines, allow_negative=False):
        scripted = ScriptedInput(lines)
        menu = MenuLoop(
            operations=operations,
            validator=AmountValidator(allow_negative=allow_negative),
            audit_logger=audit_logger,
            input_fn=scripted,
            echo=output.append,
        )
        return menu, scripted
    return _make
