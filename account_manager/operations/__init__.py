"""Account operations package."""

from account_manager.operations.account_operations import (
    INSUFFICIENT_FUNDS_MESSAGE,
    AccountOperations,
    format_balance,
)

__all__ = ["INSUFFICIENT_FUNDS_MESSAGE", "AccountOperations", "format_balance"]
