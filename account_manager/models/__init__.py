"""
Data Models Package

This package contains all Pydantic models used in the Account Manager.
"""

from account_manager.models.account import (
    CENTS,
    INITIAL_BALANCE,
    AmountEntry,
    OperationOutcome,
    OperationResult,
    PermissiveAmountEntry,
    TransactionType,
    money_context,
    to_money,
)
from account_manager.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Account models
    "CENTS",
    "INITIAL_BALANCE",
    "AmountEntry",
    "OperationOutcome",
    "OperationResult",
    "PermissiveAmountEntry",
    "TransactionType",
    "money_context",
    "to_money",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
