"""
Tests for the host-facing summary: input parsing, messages and formatting.
"""
import pytest

from trade_charges.api.summary import (
    INVALID_INPUT_MESSAGE,
    QUANTITY_MISMATCH_MESSAGE,
    calculate_profit_loss,
    format_integer,
    format_price,
)
from trade_charges.core.entities.pnl import PnlOutcome
from trade_charges.core.errors import InvalidInputError, QuantityMismatchError


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0"),
        (999, "999"),
        (1000, "1,000"),
        (100000, "1,00,000"),
        (1234567.6, "12,34,568"),
        (-1234, "-1,234"),
        (2.5, "3"),
        (-2.5, "-2"),
        (-0.3, "-0"),
        (-0.5, "-0"),
        (float("nan"), "N/A"),
        (float("inf"), "N/A"),
        (None, "N/A"),
    ],
)
def test_format_integer(value, expected):
    assert format_integer(value) == expected


def test_format_price():
    assert format_price(200.105363) == "200.1054"
    assert format_price(1234.5) == "1234.5000"
    assert format_price(100.03125) == "100.0313"
    assert format_price(-0.03125) == "-0.0313"
    assert format_price(100) == "100.0000"
    assert format_price(12.345678, decimals=2) == "12.35"
    assert format_price(None) == "N/A"
    assert format_price(float("nan")) == "N/A"


def test_intraday_summary():
    summary = calculate_profit_loss(50, 200, "INTRADAY", 50, 210, "INTRADAY")

    assert summary.buy_row.side == "Buy"
    assert summary.buy_row.trade_value == "10,000"
    assert summary.buy_row.stt == "0"
    assert summary.buy_row.stamp_duty == "0"
    assert summary.buy_row.brokerage == "1"
    assert summary.buy_row.total_charges == "1"

    assert summary.sell_row.side == "Sell"
    assert summary.sell_row.trade_value == "10,500"
    assert summary.sell_row.stt == "3"
    assert summary.sell_row.total_charges == "4"

    assert summary.gross_pl == "500"
    assert summary.total_charges == "5"
    assert summary.net_pl == "+495"
    assert summary.outcome is PnlOutcome.PROFIT
    assert summary.loaded_rate == "200.1054"
    assert summary.result.gross_profit == 500


def test_form_strings_are_accepted():
    summary = calculate_profit_loss("50", " 200 ", "intraday", "50", "210", "Intraday")

    assert summary.gross_pl == "500"
    assert summary.loaded_rate == "200.1054"


def test_delivery_loss_summary():
    summary = calculate_profit_loss(100, 1000, "ROLLING T1", 100, 990, "ROLLING T1")

    assert summary.buy_row.trade_value == "1,00,000"
    assert summary.buy_row.total_charges == "201"
    assert summary.gross_pl == "-1,000"
    assert summary.net_pl == "-1,386"
    assert summary.outcome is PnlOutcome.LOSS


@pytest.mark.parametrize("bad", ["abc", "", "0", "-5", "nan", "inf", None, 0, -1.5, True])
def test_invalid_input_message(bad):
    with pytest.raises(InvalidInputError) as exc:
        calculate_profit_loss(bad, 200, "INTRADAY", 50, 210, "INTRADAY")

    assert str(exc.value) == INVALID_INPUT_MESSAGE
    assert exc.value.field == "buy quantity"


def test_invalid_sell_price_message():
    with pytest.raises(InvalidInputError) as exc:
        calculate_profit_loss(50, 200, "INTRADAY", 50, "x", "INTRADAY")

    assert exc.value.field == "sell price"


def test_quantity_mismatch_message():
    with pytest.raises(QuantityMismatchError) as exc:
        calculate_profit_loss(50, 200, "INTRADAY", 40, 210, "INTRADAY")

    assert str(exc.value) == QUANTITY_MISMATCH_MESSAGE


def test_zero_outcome_summary(free_schedule):
    summary = calculate_profit_loss(10, 100, "INTRADAY", 10, 100, "INTRADAY", free_schedule)

    assert summary.outcome is PnlOutcome.ZERO
    assert summary.gross_pl == "0"
    assert summary.total_charges == "0"
    assert summary.net_pl == "0"
    assert summary.loaded_rate == "100.0000"


def test_small_loss_keeps_sign(free_schedule):
    summary = calculate_profit_loss(1, 100.3, "INTRADAY", 1, 100, "INTRADAY", free_schedule)

    assert summary.outcome is PnlOutcome.LOSS
    assert summary.net_pl == "-0"


def test_overflowing_loaded_rate_is_not_applicable():
    summary = calculate_profit_loss(1, 1.797e308, "ROLLING T1", 1, 1.797e308, "ROLLING T1")

    assert summary.result.break_even_price is None
    assert summary.loaded_rate == "N/A"
    assert summary.gross_pl == "0"
    assert summary.outcome is PnlOutcome.LOSS
