"""
Pytest configuration and shared fixtures.
"""
import pytest

from trade_charges.core.fee_schedule import DEFAULT_FEE_SCHEDULE, FeeSchedule, SegmentRates
from trade_charges.core.use_cases.charge_calculator import ChargeCalculator
from trade_charges.core.use_cases.pnl_calculator import PnlAggregator


@pytest.fixture
def calculator():
    return ChargeCalculator(DEFAULT_FEE_SCHEDULE)


@pytest.fixture
def aggregator(calculator):
    return PnlAggregator(calculator)


@pytest.fixture
def free_schedule():
    """Schedule with every rate at zero, so net P&L equals gross P&L."""
    zero = SegmentRates(brokerage_rate=0, exchange_rate=0)
    return FeeSchedule(
        gst_rate=0,
        sebi_turnover_rate=0,
        delivery=zero,
        intraday=zero,
        futures_options=zero,
    )
