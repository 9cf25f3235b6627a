"""
Core Data Models for Account Manager

These models define the schemas for everything the account operations
produce or consume. They are designed to:
1. Keep money in Decimal, never float
2. Give every operation a uniform, inspectable result
3. Be serializable for logging and the audit trail

DESIGN DECISION: The balance is held as Decimal quantized to cents.
Floats coming from the outside are converted through str() first so
that 0.1 + 0.2 style drift never reaches the stored balance.
"""

from decimal import ROUND_HALF_UP, Decimal, getcontext, localcontext
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


CENTS = Decimal("0.01")
INITIAL_BALANCE = Decimal("1000.00")

Number = Union[Decimal, int, float, str]


def money_context(*values: Decimal):
    """
    Decimal context wide enough to hold the given values, and their sum
    or difference, exactly to the cent.

    Amounts have no upper bound, so the default 28-digit context is
    widened instead of letting large balances round or overflow.
    """
    context = getcontext().copy()
    digits = max((v.adjusted() for v in values if v.is_finite()), default=0)
    # +1 for the leading digit, +2 for cents, +1 for a carry.
    context.prec = max(context.prec, digits + 4)
    return localcontext(context)


def to_money(value: Number) -> Decimal:
    """Convert a number to a Decimal rounded half-up to two decimal places."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    with money_context(value):
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)


# =============================================================================
# ENUMS
# =============================================================================

class TransactionType(str, Enum):
    """Operations a user can run against the account."""
    VIEW = "view"
    CREDIT = "credit"
    DEBIT = "debit"


class OperationOutcome(str, Enum):
    """
    How an operation ended.

    INSUFFICIENT_FUNDS is a normal business outcome, not an error:
    the debit is refused and the balance stays as it was.
    """
    COMPLETED = "completed"
    INSUFFICIENT_FUNDS = "insufficient_funds"


# =============================================================================
# OPERATION MODELS
# =============================================================================

class AmountEntry(BaseModel):
    """
    A user-entered amount for a credit or debit.

    NaN and infinity are never accepted. Negative amounts are
    rejected here; legacy permissive mode skips this model's
    lower bound (see PermissiveAmountEntry).
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    amount: Decimal = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Amount to credit or debit"
    )


class PermissiveAmountEntry(BaseModel):
    """Amount entry that accepts negative values."""
    model_config = ConfigDict(str_strip_whitespace=True)

    amount: Decimal = Field(
        ...,
        allow_inf_nan=False,
        description="Amount to credit or debit (sign not checked)"
    )


class OperationResult(BaseModel):
    """
    Result of running one account operation.

    The message is exactly what was shown to the user.
    """

    operation: TransactionType
    amount: Optional[Decimal] = Field(
        default=None,
        description="Requested amount (None for balance views)"
    )
    balance_before: Decimal
    balance_after: Decimal
    outcome: OperationOutcome = OperationOutcome.COMPLETED
    message: str

    @property
    def succeeded(self) -> bool:
        return self.outcome == OperationOutcome.COMPLETED

    @property
    def balance_changed(self) -> bool:
        return self.balance_before != self.balance_after
