"""
Audit Models for Account Manager

Every user action in a session is logged for audit purposes.
This provides:
1. Traceability of every balance change
2. A record of refused debits and bad input
3. Debugging information when something looks off

DESIGN DECISION: Audit logs are append-only. We never delete or modify them.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Session lifecycle
    SESSION_STARTED = "session_started"
    SESSION_ENDED = "session_ended"

    # Account operations
    BALANCE_VIEWED = "balance_viewed"
    ACCOUNT_CREDITED = "account_credited"
    ACCOUNT_DEBITED = "account_debited"
    DEBIT_REJECTED = "debit_rejected"

    # Input problems
    INVALID_AMOUNT = "invalid_amount"
    INVALID_MENU_CHOICE = "invalid_menu_choice"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    INFO = "info"
    WARNING = "warning"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    Every user action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Correlation - one id per menu session
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (all events in one session)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.account_credited(amount, before, after, correlation_id)
        event = AuditEventBuilder.invalid_menu_choice(choice, correlation_id)

    Money values go into details as strings so they serialize exactly.
    """

    @staticmethod
    def session_started(
        initial_balance: Decimal,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            correlation_id=correlation_id,
            description="Menu session started",
            details={
                "balance": str(initial_balance),
            },
        )

    @staticmethod
    def session_ended(
        final_balance: Decimal,
        correlation_id: UUID
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_ENDED,
            correlation_id=correlation_id,
            description="Menu session ended",
            details={
                "balance": str(final_balance),
            },
            is_user_action=True,
        )

    @staticmethod
    def balance_viewed(
        balance: Decimal,
        correlation_id: Optional[UUID]
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BALANCE_VIEWED,
            correlation_id=correlation_id,
            description="Balance viewed",
            details={
                "balance": str(balance),
            },
            is_user_action=True,
        )

    @staticmethod
    def account_credited(
        amount: Decimal,
        balance_before: Decimal,
        balance_after: Decimal,
        correlation_id: Optional[UUID]
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ACCOUNT_CREDITED,
            correlation_id=correlation_id,
            description=f"Account credited with {amount}",
            details={
                "amount": str(amount),
                "balance_before": str(balance_before),
                "balance_after": str(balance_after),
            },
            is_user_action=True,
        )

    @staticmethod
    def account_debited(
        amount: Decimal,
        balance_before: Decimal,
        balance_after: Decimal,
        correlation_id: Optional[UUID]
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ACCOUNT_DEBITED,
            correlation_id=correlation_id,
            description=f"Account debited by {amount}",
            details={
                "amount": str(amount),
                "balance_before": str(balance_before),
                "balance_after": str(balance_after),
            },
            is_user_action=True,
        )

    @staticmethod
    def debit_rejected(
        amount: Decimal,
        balance: Decimal,
        correlation_id: Optional[UUID]
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DEBIT_REJECTED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Debit of {amount} refused: insufficient funds",
            details={
                "amount": str(amount),
                "balance": str(balance),
            },
            is_user_action=True,
        )

    @staticmethod
    def invalid_amount(
        raw_input: str,
        operation: str,
        reason: str,
        correlation_id: Optional[UUID]
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_AMOUNT,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Invalid {operation} amount entered",
            details={
                "raw_input": raw_input,
                "operation": operation,
                "reason": reason,
            },
            is_user_action=True,
        )

    @staticmethod
    def invalid_menu_choice(
        choice: str,
        correlation_id: Optional[UUID]
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_MENU_CHOICE,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description="Invalid menu choice entered",
            details={
                "choice": choice,
            },
            is_user_action=True,
        )
