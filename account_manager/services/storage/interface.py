"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep the account operations decoupled from where the balance lives
2. Pass the store explicitly instead of sharing module-level state
3. Swap in a durable backend later without touching business logic

The interface is intentionally tiny. The account has exactly one value.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional
from uuid import UUID

from account_manager.models.account import Number
from account_manager.models.audit import AuditEvent


class BalanceStorageInterface(ABC):
    """
    Abstract interface for the balance store.

    Implementations hold a single balance, always rounded to
    two decimal places.
    """

    @abstractmethod
    def read(self) -> Decimal:
        """
        Return the current balance.

        Returns:
            The balance, rounded to two decimal places
        """
        pass

    @abstractmethod
    def write(self, balance: Number) -> None:
        """
        Replace the stored balance.

        Args:
            balance: New balance; stored rounded to two decimal places
        """
        pass

    @abstractmethod
    def reset(self) -> None:
        """
        Restore the initial balance.

        Intended for tests and debugging only.
        """
        pass


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Args:
            event: The audit event to log

        Returns:
            True if logged successfully
        """
        pass

    @abstractmethod
    def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        """
        Get all events for a correlation ID (one menu session).

        Args:
            correlation_id: The correlation identifier

        Returns:
            List of related events in chronological order
        """
        pass

    @abstractmethod
    def get_recent_events(
        self,
        limit: int = 100,
        correlation_id: Optional[UUID] = None,
    ) -> list[AuditEvent]:
        """
        Get the most recent audit events.

        Args:
            limit: Maximum number of events to return
            correlation_id: Only return events from this session

        Returns:
            List of recent events (newest first)
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass
