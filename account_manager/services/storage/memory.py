"""
In-Memory Storage Implementation

The balance lives only as long as the process. Nothing is written
to disk; a restart always begins again from the initial balance.
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from account_manager.models.account import INITIAL_BALANCE, Number, to_money
from account_manager.models.audit import AuditEvent
from account_manager.services.storage.interface import (
    AuditStorageInterface,
    BalanceStorageInterface,
    StorageError,
)


class InMemoryBalanceStorage(BalanceStorageInterface):
    """Balance store backed by a single Decimal attribute."""

    def __init__(self, initial_balance: Number = INITIAL_BALANCE):
        self._initial_balance = to_money(initial_balance)
        self._balance = self._initial_balance

    @property
    def initial_balance(self) -> Decimal:
        return self._initial_balance

    def read(self) -> Decimal:
        return to_money(self._balance)

    def write(self, balance: Number) -> None:
        self._balance = to_money(balance)

    def reset(self) -> None:
        self._balance = self._initial_balance


class InMemoryAuditStorage(AuditStorageInterface):
    """
    Append-only audit log kept in a list.

    max_events bounds memory for long sessions; once full, further
    appends raise StorageError rather than silently dropping history.
    """

    def __init__(self, max_events: Optional[int] = None):
        self._events: list[AuditEvent] = []
        self._max_events = max_events

    def __len__(self) -> int:
        return len(self._events)

    def append_event(self, event: AuditEvent) -> bool:
        if self._max_events is not None and len(self._events) >= self._max_events:
            raise StorageError(
                f"Audit log is full ({self._max_events} events)"
            )
        self._events.append(event)
        return True

    def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        return [e for e in self._events if e.correlation_id == correlation_id]

    def get_recent_events(
        self,
        limit: int = 100,
        correlation_id: Optional[UUID] = None,
    ) -> list[AuditEvent]:
        events = self._events
        if correlation_id is not None:
            events = self.get_events_by_correlation_id(correlation_id)
        return list(reversed(events))[:limit]
