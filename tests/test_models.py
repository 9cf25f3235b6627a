"""
Tests for Account Manager models

Test strategy:
1. Unit tests for individual components (models, validators, storage)
2. Flow tests for the menu loop driven by scripted input
3. No real terminal I/O in tests
"""

import pytest
from decimal import Decimal, getcontext
from uuid import uuid4

from pydantic import ValidationError

from account_manager.models.account import (
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


class TestToMoney:
    """Tests for the two-decimal rounding helper."""

    def test_integer_gets_two_places(self):
        """Test that integers become cents-precision Decimals."""
        assert to_money(1000) == Decimal("1000.00")
        assert str(to_money(1000)) == "1000.00"

    def test_float_drift_is_removed(self):
        """Test that binary float noise does not survive rounding."""
        assert to_money(0.1 + 0.2) == Decimal("0.30")

    def test_rounds_half_up(self):
        """Test half-cent values round away from zero."""
        assert to_money("2.005") == Decimal("2.01")
        assert to_money(Decimal("1.234")) == Decimal("1.23")

    def test_string_input(self):
        """Test string input is parsed as a decimal."""
        assert to_money("1500.5") == Decimal("1500.50")

    def test_values_wider_than_default_precision(self):
        """Test quantizing a 31-digit integer part does not overflow."""
        assert str(to_money(Decimal("1e30"))) == "1" + "0" * 30 + ".00"
        assert to_money("123456789012345678901234567890.125") == Decimal(
            "123456789012345678901234567890.13"
        )


class TestMoneyContext:
    """Tests for the widened arithmetic context."""

    def test_sum_is_exact(self):
        """Test addition keeps every digit of large operands."""
        big = Decimal("1e30")
        cents = Decimal("0.01")
        with money_context(big, cents):
            total = big + cents
        assert total == Decimal("1000000000000000000000000000000.01")

    def test_keeps_default_precision_for_small_values(self):
        """Test ordinary amounts keep the default precision."""
        default_prec = getcontext().prec
        with money_context(Decimal("1.00")) as ctx:
            assert ctx.prec == default_prec

    def test_widens_for_large_values(self):
        """Test the precision grows with the widest operand."""
        with money_context(Decimal("1e40"), Decimal("5")) as ctx:
            assert ctx.prec == 44


class TestAmountEntry:
    """Tests for amount entry models."""

    def test_accepts_non_negative(self):
        """Test a plain amount is parsed to Decimal."""
        assert AmountEntry(amount="500").amount == Decimal("500")
        assert AmountEntry(amount="0").amount == Decimal("0")

    def test_rejects_negative(self):
        """Test that negative amounts are rejected."""
        with pytest.raises(ValidationError):
            AmountEntry(amount="-1")

    def test_rejects_non_numeric(self):
        """Test that text is rejected."""
        with pytest.raises(ValidationError):
            AmountEntry(amount="abc")

    @pytest.mark.parametrize("value", ["nan", "inf", "-inf", "Infinity"])
    def test_rejects_non_finite(self, value):
        """Test that NaN and infinity never get through."""
        with pytest.raises(ValidationError):
            AmountEntry(amount=value)
        with pytest.raises(ValidationError):
            PermissiveAmountEntry(amount=value)

    def test_permissive_accepts_negative(self):
        """Test the permissive entry keeps the sign."""
        assert PermissiveAmountEntry(amount="-5").amount == Decimal("-5")


class TestOperationResult:
    """Tests for OperationResult."""

    def test_completed_credit(self):
        """Test a completed credit reports success and a change."""
        result = OperationResult(
            operation=TransactionType.CREDIT,
            amount=Decimal("500"),
            balance_before=Decimal("1000.00"),
            balance_after=Decimal("1500.00"),
            message="Amount credited. New balance: 001500.00",
        )
        assert result.succeeded is True
        assert result.balance_changed is True
        assert result.outcome == OperationOutcome.COMPLETED

    def test_insufficient_funds(self):
        """Test a refused debit is not a success and changes nothing."""
        result = OperationResult(
            operation=TransactionType.DEBIT,
            amount=Decimal("2000"),
            balance_before=Decimal("1000.00"),
            balance_after=Decimal("1000.00"),
            outcome=OperationOutcome.INSUFFICIENT_FUNDS,
            message="Insufficient funds for this debit.",
        )
        assert result.succeeded is False
        assert result.balance_changed is False

    def test_view_has_no_amount(self):
        """Test that views default to no amount."""
        result = OperationResult(
            operation=TransactionType.VIEW,
            balance_before=Decimal("1000.00"),
            balance_after=Decimal("1000.00"),
            message="Current balance: 001000.00",
        )
        assert result.amount is None


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.BALANCE_VIEWED,
            description="Balance viewed",
        )
        assert event.event_type == AuditEventType.BALANCE_VIEWED
        assert event.severity == AuditSeverity.INFO
        assert event.timestamp.tzinfo is not None

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        correlation_id = uuid4()
        event = AuditEventBuilder.account_credited(
            amount=Decimal("500"),
            balance_before=Decimal("1000.00"),
            balance_after=Decimal("1500.00"),
            correlation_id=correlation_id,
        )
        log_dict = event.to_log_dict()
        assert log_dict["event_type"] == "account_credited"
        assert log_dict["correlation_id"] == str(correlation_id)
        assert log_dict["details"] == {
            "amount": "500",
            "balance_before": "1000.00",
            "balance_after": "1500.00",
        }

    def test_log_dict_without_correlation(self):
        """Test missing correlation id is rendered as None."""
        event = AuditEventBuilder.balance_viewed(
            balance=Decimal("1000.00"),
            correlation_id=None,
        )
        assert event.to_log_dict()["correlation_id"] is None

    def test_debit_rejected_is_warning(self):
        """Test AuditEventBuilder.debit_rejected."""
        event = AuditEventBuilder.debit_rejected(
            amount=Decimal("2000"),
            balance=Decimal("1000.00"),
            correlation_id=uuid4(),
        )
        assert event.event_type == AuditEventType.DEBIT_REJECTED
        assert event.severity == AuditSeverity.WARNING
        assert event.is_user_action is True
        assert event.details["balance"] == "1000.00"

    def test_session_started_is_not_user_action(self):
        """Test that starting a session is attributed to the system."""
        event = AuditEventBuilder.session_started(
            initial_balance=Decimal("1000.00"),
            correlation_id=uuid4(),
        )
        assert event.is_user_action is False

    def test_invalid_menu_choice(self):
        """Test AuditEventBuilder.invalid_menu_choice."""
        event = AuditEventBuilder.invalid_menu_choice(
            choice="5",
            correlation_id=uuid4(),
        )
        assert event.event_type == AuditEventType.INVALID_MENU_CHOICE
        assert event.details == {"choice": "5"}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
