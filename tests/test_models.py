"""
Tests for FundWarrior

Test strategy:
1. Unit tests for individual components (models, validation, ledger)
2. Storage tests against a temporary directory
3. Command line tests through main() with an explicit config file
"""

import pytest
from decimal import Decimal
from uuid import uuid4

from fundwarrior.models.fund import Fund, LedgerDocument, LEDGER_FORMAT_VERSION, MAX_AMOUNT
from fundwarrior.models.event import (
    EventSeverity,
    LedgerEvent,
    LedgerEventBuilder,
    LedgerEventType,
)


class TestFundModel:
    """Tests for the Fund model."""

    def test_fund_creation(self):
        """Test Fund model creation."""
        fund = Fund(name="grocery", balance=Decimal("100.00"), goal=Decimal("150.00"))
        assert fund.name == "grocery"
        assert fund.balance == Decimal("100.00")
        assert fund.goal == Decimal("150.00")

    def test_fund_defaults_to_zero(self):
        """Test that balance and goal default to zero."""
        fund = Fund(name="car")
        assert fund.balance == Decimal("0.00")
        assert fund.goal == Decimal("0.00")

    def test_amounts_quantized_to_cents(self):
        """Test that whole amounts are stored with two decimal places."""
        fund = Fund(name="car", balance=Decimal("5"), goal=Decimal("7.5"))
        assert str(fund.balance) == "5.00"
        assert str(fund.goal) == "7.50"

    def test_fund_rejects_sub_cent_amounts(self):
        """Test that more than two decimal places are rejected."""
        with pytest.raises(ValueError):
            Fund(name="car", balance=Decimal("1.005"))

    def test_fund_rejects_negative_goal(self):
        """Test that goals cannot be negative."""
        with pytest.raises(ValueError):
            Fund(name="car", goal=Decimal("-1.00"))

    def test_fund_rejects_out_of_range_amounts(self):
        """Test that balances and goals beyond MAX_AMOUNT are rejected."""
        with pytest.raises(ValueError):
            Fund(name="car", balance=Decimal("1" * 30 + ".00"))
        with pytest.raises(ValueError):
            Fund(name="car", goal=MAX_AMOUNT + Decimal("0.01"))

    def test_fund_rejects_whitespace_name(self):
        """Test that names with whitespace are rejected."""
        with pytest.raises(ValueError):
            Fund(name="has space")

    def test_fund_rejects_empty_name(self):
        """Test that empty names are rejected."""
        with pytest.raises(ValueError):
            Fund(name="")

    def test_fund_is_frozen(self):
        """Test that a fund cannot be modified in place."""
        fund = Fund(name="car")
        with pytest.raises(ValueError):
            fund.balance = Decimal("10.00")

    def test_remaining_to_goal(self):
        """Test distance to goal, including past the goal."""
        fund = Fund(name="car", balance=Decimal("40.00"), goal=Decimal("100.00"))
        assert fund.remaining_to_goal == Decimal("60.00")
        assert fund.goal_reached is False

        over = fund.with_balance(Decimal("120.00"))
        assert over.remaining_to_goal == Decimal("-20.00")
        assert over.goal_reached is True

    def test_with_balance_returns_copy(self):
        """Test that with_balance leaves the original untouched."""
        fund = Fund(name="car", balance=Decimal("10.00"))
        updated = fund.with_balance(Decimal("15.00"))
        assert fund.balance == Decimal("10.00")
        assert updated.balance == Decimal("15.00")
        assert updated.name == "car"


class TestLedgerDocument:
    """Tests for the persisted ledger shape."""

    def test_document_defaults(self):
        """Test an empty document."""
        document = LedgerDocument()
        assert document.version == LEDGER_FORMAT_VERSION
        assert document.funds == []

    def test_document_rejects_duplicate_names(self):
        """Test that a document cannot hold two funds with one name."""
        with pytest.raises(ValueError, match="Duplicate fund name"):
            LedgerDocument(funds=[Fund(name="car"), Fund(name="car")])

    def test_document_rejects_newer_version(self):
        """Test that unknown future versions are refused."""
        with pytest.raises(ValueError, match="Unsupported ledger format version"):
            LedgerDocument(version=LEDGER_FORMAT_VERSION + 1)

    def test_document_json_keeps_amounts_as_text(self):
        """Test that amounts serialize as exact decimal strings."""
        document = LedgerDocument(funds=[Fund(name="car", balance=Decimal("0.30"))])
        dumped = document.model_dump(mode="json")
        assert dumped["funds"][0]["balance"] == "0.30"


class TestEventModels:
    """Tests for ledger event models."""

    def test_event_creation(self):
        """Test LedgerEvent model creation."""
        event = LedgerEvent(
            event_type=LedgerEventType.FUND_CREATED,
            description="Fund created",
        )
        assert event.event_type == LedgerEventType.FUND_CREATED
        assert event.severity == EventSeverity.INFO

    def test_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = LedgerEventBuilder.fund_deposited(
            fund_name="car",
            amount=Decimal("50.00"),
            new_balance=Decimal("550.00"),
        )
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "fund_deposited"
        assert log_dict["fund_name"] == "car"
        assert log_dict["details"]["balance"] == "550.00"

    def test_overdrawn_is_a_warning(self):
        """Test that overdraft events are warnings."""
        event = LedgerEventBuilder.fund_overdrawn(
            fund_name="car",
            amount=Decimal("10.00"),
            new_balance=Decimal("-5.00"),
        )
        assert event.severity == EventSeverity.WARNING
        assert event.event_type == LedgerEventType.FUND_OVERDRAWN

    def test_command_rejected_carries_error(self):
        """Test LedgerEventBuilder.command_rejected."""
        correlation_id = uuid4()
        event = LedgerEventBuilder.command_rejected(
            command="spend",
            error_type="InsufficientFundsError",
            error_message="not enough",
            fund_name="car",
            correlation_id=correlation_id,
        )
        assert event.error_code == "InsufficientFundsError"
        assert event.correlation_id == correlation_id
        assert event.details["command"] == "spend"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
