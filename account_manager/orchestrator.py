"""
Main Orchestrator for Account Manager

This module ties together all the components:
balance store -> account operations -> menu loop,
with the audit logger and amount validator plugged in.

DESIGN DECISION: The balance store is created here and handed to the
operations explicitly. Nothing else creates or reaches for a balance,
so there is exactly one per process and no hidden shared state.
"""

import sys
from typing import Callable, Optional

import structlog

from account_manager.audit import AuditLogger, configure_logging
from account_manager.config import Settings, get_settings, validate_all_settings
from account_manager.menu import MenuLoop
from account_manager.operations import AccountOperations
from account_manager.services.storage import (
    InMemoryAuditStorage,
    InMemoryBalanceStorage,
)
from account_manager.validation import AmountValidator


logger = structlog.get_logger(__name__)

EXIT_INTERRUPTED = 130


def create_app_components(
    settings: Optional[Settings] = None,
    input_fn: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
) -> tuple[MenuLoop, InMemoryBalanceStorage, InMemoryAuditStorage]:
    """
    Factory function to create all application components.

    Args:
        settings: Settings to build from; the cached settings if None.
        input_fn: Line reader used for every prompt.
        echo: Writer used for every message shown to the user.

    Returns:
        (menu_loop, balance_storage, audit_storage)
    """
    settings = settings or get_settings()
    app_settings = settings.app

    balance_storage = InMemoryBalanceStorage(app_settings.initial_balance)
    # Kept for the whole process; bounded only when audit_max_events is set.
    audit_storage = InMemoryAuditStorage(max_events=app_settings.audit_max_events)
    audit_logger = AuditLogger(audit_storage)

    operations = AccountOperations(
        storage=balance_storage,
        audit_logger=audit_logger,
        echo=echo,
    )
    validator = AmountValidator(settings=app_settings)

    menu_loop = MenuLoop(
        operations=operations,
        validator=validator,
        audit_logger=audit_logger,
        input_fn=input_fn,
        echo=echo,
    )

    return menu_loop, balance_storage, audit_storage


def main() -> int:
    """
    Console entry point.

    Returns the process exit code: 0 after the user chooses exit,
    1 if the configuration is invalid, 130 on Ctrl-C.
    """
    settings = get_settings()

    status = validate_all_settings()
    if not all(status.get(name, False) for name in ("app", "logging")):
        for key, value in status.items():
            if key.endswith("_error"):
                print(f"Configuration error ({key[:-6]}): {value}", file=sys.stderr)
        return 1

    logging_settings = settings.logging
    if settings.app.debug_mode:
        logging_settings = logging_settings.model_copy(update={"level": "DEBUG"})
    configure_logging(logging_settings)

    menu_loop, _, _ = create_app_components(settings)

    try:
        return menu_loop.run()
    except KeyboardInterrupt:
        print()
        logger.warning("session_interrupted", correlation_id=str(menu_loop.correlation_id))
        return EXIT_INTERRUPTED
