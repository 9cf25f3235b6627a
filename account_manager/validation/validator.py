"""
Amount Validation

DESIGN DECISION: Amounts typed at the prompt are parsed once, here,
before any operation sees them. A value that is not a finite number
never reaches the balance, so the balance can never become NaN.

Negative amounts are refused by default. Legacy permissive mode
(allow_negative_amounts) accepts them, matching the old behavior where
a negative credit silently acted as a debit and vice versa.

IMPORTANT: Validation NEVER silently fixes input.
It reports the problem and the caller decides what to show the user.
"""

from decimal import Decimal
from typing import Optional

from pydantic import ValidationError

from account_manager.config import AppSettings
from account_manager.models.account import AmountEntry, PermissiveAmountEntry


class InvalidAmountError(ValueError):
    """Raised when an entered amount is not an acceptable number."""

    def __init__(self, raw_input: str, reason: str):
        self.raw_input = raw_input
        self.reason = reason
        super().__init__(f"Invalid amount {raw_input!r}: {reason}")


class AmountValidator:
    """Parses raw amount input into a validated Decimal."""

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        allow_negative: Optional[bool] = None,
    ):
        """
        Initialize validator.

        Args:
            settings: Application settings; loaded from the environment if None.
            allow_negative: Overrides settings.allow_negative_amounts when given.
        """
        if allow_negative is None:
            settings = settings or AppSettings()
            allow_negative = settings.allow_negative_amounts
        self._allow_negative = allow_negative

    @property
    def allow_negative(self) -> bool:
        return self._allow_negative

    def parse(self, raw_input: str) -> Decimal:
        """
        Parse one line of user input as an amount.

        Raises:
            InvalidAmountError: If the input is empty, not a number,
                not finite, or negative (unless negatives are allowed).
        """
        text = raw_input.strip()
        if not text:
            raise InvalidAmountError(raw_input, "no amount entered")

        entry_model = PermissiveAmountEntry if self._allow_negative else AmountEntry
        try:
            entry = entry_model(amount=text)
        except ValidationError as e:
            raise InvalidAmountError(raw_input, _first_error(e)) from e

        return entry.amount


def _first_error(error: ValidationError) -> str:
    errors = error.errors()
    if not errors:
        return "not a valid number"
    return errors[0]["msg"]


def parse_amount(raw_input: str, allow_negative: bool = False) -> Decimal:
    """Parse an amount with a one-off validator."""
    return AmountValidator(allow_negative=allow_negative).parse(raw_input)
