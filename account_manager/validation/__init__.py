"""Input validation package."""

from account_manager.validation.validator import (
    AmountValidator,
    InvalidAmountError,
    parse_amount,
)

__all__ = ["AmountValidator", "InvalidAmountError", "parse_amount"]
