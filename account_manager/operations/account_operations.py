"""
Account Operations

The three things a user can do to the account: view, credit, debit.

BUSINESS RULE: Overdraft prevention.
A debit succeeds only if the current balance is greater than or equal
to the amount. There are no partial debits; a refused debit leaves the
balance exactly as it was.

Each operation prints its message through the injected echo callable
and returns an OperationResult describing what happened.
"""

from decimal import Decimal
from typing import Callable, Optional
from uuid import UUID

import structlog

from account_manager.audit import AuditLogger
from account_manager.models.account import (
    Number,
    OperationOutcome,
    OperationResult,
    TransactionType,
    money_context,
    to_money,
)
from account_manager.services.storage import BalanceStorageInterface


logger = structlog.get_logger(__name__)

INSUFFICIENT_FUNDS_MESSAGE = "Insufficient funds for this debit."


def format_balance(balance: Number) -> str:
    """
    Render a balance in fixed-width ledger format: DDDDDD.DD.

    The integer part is zero-padded to six digits but never truncated,
    so 1000999 renders as 1000999.00.
    """
    amount = to_money(balance)
    sign = "-" if amount < 0 else ""
    whole, cents = f"{amount.copy_abs():f}".split(".")
    return f"{sign}{whole.zfill(6)}.{cents}"


class AccountOperations:
    """
    View, credit and debit against one balance store.

    The store is passed in explicitly; the operations hold no
    balance of their own.
    """

    def __init__(
        self,
        storage: BalanceStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
        echo: Callable[[str], None] = print,
        correlation_id: Optional[UUID] = None,
    ):
        self._storage = storage
        self._audit_logger = audit_logger
        self._echo = echo
        self.correlation_id = correlation_id

    @property
    def storage(self) -> BalanceStorageInterface:
        return self._storage

    def view_balance(self) -> OperationResult:
        """Show the current balance. Never changes it."""
        balance = self._storage.read()
        message = f"Current balance: {format_balance(balance)}"
        self._echo(message)

        if self._audit_logger:
            self._audit_logger.log_balance_viewed(
                balance=balance,
                correlation_id=self.correlation_id,
            )

        return OperationResult(
            operation=TransactionType.VIEW,
            balance_before=balance,
            balance_after=balance,
            message=message,
        )

    def credit_account(self, amount: Number) -> OperationResult:
        """
        Add amount to the balance.

        No upper bound is enforced; zero is a valid credit.
        """
        amount = _as_decimal(amount)
        balance_before = self._storage.read()
        with money_context(balance_before, amount):
            self._storage.write(balance_before + amount)
        balance_after = self._storage.read()

        message = f"Amount credited. New balance: {format_balance(balance_after)}"
        self._echo(message)
        logger.debug(
            "account_credited",
            amount=str(amount),
            balance_after=str(balance_after),
        )

        if self._audit_logger:
            self._audit_logger.log_account_credited(
                amount=amount,
                balance_before=balance_before,
                balance_after=balance_after,
                correlation_id=self.correlation_id,
            )

        return OperationResult(
            operation=TransactionType.CREDIT,
            amount=amount,
            balance_before=balance_before,
            balance_after=balance_after,
            message=message,
        )

    def debit_account(self, amount: Number) -> OperationResult:
        """
        Subtract amount from the balance if funds allow.

        A debit equal to the whole balance is allowed and leaves 0.00.
        """
        amount = _as_decimal(amount)
        balance_before = self._storage.read()

        if balance_before < amount:
            self._echo(INSUFFICIENT_FUNDS_MESSAGE)
            logger.debug(
                "debit_rejected",
                amount=str(amount),
                balance=str(balance_before),
            )
            if self._audit_logger:
                self._audit_logger.log_debit_rejected(
                    amount=amount,
                    balance=balance_before,
                    correlation_id=self.correlation_id,
                )
            return OperationResult(
                operation=TransactionType.DEBIT,
                amount=amount,
                balance_before=balance_before,
                balance_after=balance_before,
                outcome=OperationOutcome.INSUFFICIENT_FUNDS,
                message=INSUFFICIENT_FUNDS_MESSAGE,
            )

        with money_context(balance_before, amount):
            self._storage.write(balance_before - amount)
        balance_after = self._storage.read()

        message = f"Amount debited. New balance: {format_balance(balance_after)}"
        self._echo(message)
        logger.debug(
            "account_debited",
            amount=str(amount),
            balance_after=str(balance_after),
        )

        if self._audit_logger:
            self._audit_logger.log_account_debited(
                amount=amount,
                balance_before=balance_before,
                balance_after=balance_after,
                correlation_id=self.correlation_id,
            )

        return OperationResult(
            operation=TransactionType.DEBIT,
            amount=amount,
            balance_before=balance_before,
            balance_after=balance_after,
            message=message,
        )


def _as_decimal(value: Number) -> Decimal:
    # The debit threshold compares the exact, unrounded amount.
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
