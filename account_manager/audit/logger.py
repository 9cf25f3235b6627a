"""
Audit Logger

DESIGN DECISION: Every user action in a session is logged.
This provides:
1. A trail of every balance change and refused debit
2. Debugging capability
3. Session history that can be inspected after the fact

The audit logger:
- Writes to stderr so log lines never interleave with the menu on stdout
- Gracefully handles failures (doesn't crash the menu if logging fails)
- Supports correlation IDs to tie events to one session
"""

import logging
import sys
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

import structlog

from account_manager.config import LoggingSettings
from account_manager.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from account_manager.services.storage import AuditStorageInterface, StorageError


LOGGER_NAME = "account_manager"


def configure_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Configure the package logger and structlog.

    Safe to call more than once; the stderr handler is replaced, not stacked.
    """
    settings = settings or LoggingSettings()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger(LOGGER_NAME)
    for existing in package_logger.handlers[:]:
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(settings.level)
    package_logger.propagate = False

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return package_logger


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. Audit storage (for session history), when one is configured
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for persistence.
                    If None, only logs locally.
        """
        self._storage = storage
        self._logger = structlog.get_logger(__name__)

    @property
    def storage(self) -> Optional[AuditStorageInterface]:
        return self._storage

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Persists to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage is not None:
            try:
                return self._storage.append_event(event)
            except StorageError as e:
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_session_started(
        self,
        initial_balance: Decimal,
        correlation_id: UUID,
    ) -> None:
        """Log the start of a menu session."""
        self.log(AuditEventBuilder.session_started(
            initial_balance=initial_balance,
            correlation_id=correlation_id,
        ))

    def log_session_ended(
        self,
        final_balance: Decimal,
        correlation_id: UUID,
    ) -> None:
        """Log the end of a menu session."""
        self.log(AuditEventBuilder.session_ended(
            final_balance=final_balance,
            correlation_id=correlation_id,
        ))

    def log_balance_viewed(
        self,
        balance: Decimal,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.balance_viewed(
            balance=balance,
            correlation_id=correlation_id,
        ))

    def log_account_credited(
        self,
        amount: Decimal,
        balance_before: Decimal,
        balance_after: Decimal,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.account_credited(
            amount=amount,
            balance_before=balance_before,
            balance_after=balance_after,
            correlation_id=correlation_id,
        ))

    def log_account_debited(
        self,
        amount: Decimal,
        balance_before: Decimal,
        balance_after: Decimal,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.account_debited(
            amount=amount,
            balance_before=balance_before,
            balance_after=balance_after,
            correlation_id=correlation_id,
        ))

    def log_debit_rejected(
        self,
        amount: Decimal,
        balance: Decimal,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a debit refused for insufficient funds."""
        self.log(AuditEventBuilder.debit_rejected(
            amount=amount,
            balance=balance,
            correlation_id=correlation_id,
        ))

    def log_invalid_amount(
        self,
        raw_input: str,
        operation: str,
        reason: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.invalid_amount(
            raw_input=raw_input,
            operation=operation,
            reason=reason,
            correlation_id=correlation_id,
        ))

    def log_invalid_menu_choice(
        self,
        choice: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.invalid_menu_choice(
            choice=choice,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a menu session and pass it to
    every operation run during that session.
    """
    return uuid4()
