"""Unit tests for ApplyPercent use case."""

from decimal import Context, Decimal
from unittest.mock import Mock

import pytest

from money_percent.application.dtos.percent import AdjustmentRequest
from money_percent.application.use_cases.apply_percent import ApplyPercent


class TestApplyPercent:
    """Test cases for ApplyPercent."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.logger = Mock()
        self.use_case = ApplyPercent(default_locale="en_US", logger=self.logger)

    def test_ten_percent_of_euro_amount(self) -> None:
        """Test 10% of EUR 2.35."""
        request = AdjustmentRequest(percent=Decimal("10"), amount=Decimal("2.35"), currency="EUR")

        result = self.use_case.execute(request, request_id="req-1")

        assert result.amount == Decimal("0.235")
        assert result.currency == "EUR"
        assert result.rate == Decimal("0.1")
        assert result.formatted_rate == "10%"
        assert result.request_id is None

    def test_negative_percent(self) -> None:
        """Test that negative percentages produce negative amounts."""
        request = AdjustmentRequest(percent=Decimal("-5"), amount=Decimal("10"), currency="usd")

        result = self.use_case.execute(request)

        assert result.amount == Decimal("-0.5")
        assert result.currency == "USD"
        assert result.formatted_rate == "-5%"

    def test_request_locale_wins_over_default(self) -> None:
        """Test that the request locale is used for the formatted rate."""
        request = AdjustmentRequest(
            percent=Decimal("3"), amount=Decimal("100"), currency="EUR", locale="de_DE"
        )

        result = self.use_case.execute(request)

        assert result.formatted_rate.startswith("3")
        assert result.formatted_rate != "3%"

    def test_injected_context_sets_precision(self) -> None:
        """Test that the injected context controls the rate."""
        use_case = ApplyPercent(context=Context(prec=4), default_locale="en_US")
        request = AdjustmentRequest(
            percent=Decimal("12.3456"), amount=Decimal("100"), currency="USD"
        )

        result = use_case.execute(request)

        assert result.rate == Decimal("0.1235")
        assert result.amount == Decimal("12.35")

    def test_logs_adjustment(self) -> None:
        """Test that the logger receives the adjustment."""
        request = AdjustmentRequest(percent=Decimal("10"), amount=Decimal("2.35"), currency="EUR")

        self.use_case.execute(request, request_id="req-42")

        self.logger.assert_called_once()
        args, kwargs = self.logger.call_args
        assert args == ("req-42", "apply_percent")
        assert kwargs["rate"] == "0.1"
        assert kwargs["amount_out"] == "0.235"
        assert kwargs["currency"] == "EUR"

    def test_unknown_currency_raises_error(self) -> None:
        """Test that unknown currencies are rejected."""
        request = AdjustmentRequest(percent=Decimal("10"), amount=Decimal("1"), currency="ZZQ")

        with pytest.raises(ValueError, match="Unknown currency"):
            self.use_case.execute(request)
        self.logger.assert_not_called()
