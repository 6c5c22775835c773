"""
In-process entry point for a host UI.

Takes the raw buy/sell form values, runs the charge and P&L use cases and
returns display-ready strings alongside the exact result.
"""
import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

from trade_charges.core.entities.charges import ChargeBreakdown
from trade_charges.core.entities.pnl import PnlOutcome, PnlResult
from trade_charges.core.entities.trade import Segment, TradeLeg
from trade_charges.core.errors import InvalidInputError, QuantityMismatchError
from trade_charges.core.fee_schedule import DEFAULT_FEE_SCHEDULE, FeeSchedule
from trade_charges.core.numbers import is_finite_number, round_half_up
from trade_charges.core.use_cases.pnl_calculator import compute_pnl

logger = logging.getLogger(__name__)

NOT_APPLICABLE = "N/A"
INVALID_INPUT_MESSAGE = "Please enter valid quantities and prices (> 0)."
QUANTITY_MISMATCH_MESSAGE = "The Buy Quantity and Sell Quantity must match for a single P&L calculation."


# --- Output Models ---

class ChargeRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    side: str
    trade_value: str
    stt: str
    sebi_exchange_charges: str
    stamp_duty: str
    brokerage: str
    total_charges: str


class ProfitLossSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    buy_row: ChargeRow
    sell_row: ChargeRow
    gross_pl: str
    total_charges: str
    net_pl: str
    outcome: PnlOutcome
    loaded_rate: str
    result: PnlResult


# --- Formatting ---

def _group_indian(number: int) -> str:
    # 12345678 -> 1,23,45,678
    sign = "-" if number < 0 else ""
    digits = str(abs(number))
    if len(digits) <= 3:
        return sign + digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ",".join(groups) + "," + tail


def format_integer(value: Optional[float]) -> str:
    """Rounded to whole rupees with Indian digit grouping."""
    if value is None or not is_finite_number(value):
        return NOT_APPLICABLE
    rounded = round_half_up(value)
    if rounded == 0 and math.copysign(1.0, value) < 0:
        # Small losses keep their sign, e.g. -0.3 -> "-0"
        return "-0"
    return _group_indian(rounded)


def format_price(value: Optional[float], decimals: int = 4) -> str:
    """Fixed decimals, no grouping. Exact binary ties round away from zero."""
    if value is None or not is_finite_number(value):
        return NOT_APPLICABLE
    with localcontext() as ctx:
        # Wide enough for every finite float at the requested scale
        ctx.prec = 340 + decimals
        quantized = Decimal(value).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return f"{quantized:f}"


def _charge_row(side: str, breakdown: ChargeBreakdown) -> ChargeRow:
    display = breakdown.rounded()
    return ChargeRow(
        side=side,
        trade_value=_group_indian(display.trade_value),
        stt=_group_indian(display.stt),
        sebi_exchange_charges=_group_indian(display.sebi_exchange_charges),
        stamp_duty=_group_indian(display.stamp_duty),
        brokerage=_group_indian(display.brokerage),
        total_charges=_group_indian(display.total_charges),
    )


# --- Input handling ---

def _to_number(field: str, raw: Any) -> float:
    """Form values arrive as numbers or numeric strings."""
    if isinstance(raw, bool):
        raise InvalidInputError(field, raw, INVALID_INPUT_MESSAGE)
    try:
        value = float(raw.strip()) if isinstance(raw, str) else float(raw)
    except (TypeError, ValueError):
        raise InvalidInputError(field, raw, INVALID_INPUT_MESSAGE)
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(field, raw, INVALID_INPUT_MESSAGE)
    return value


def calculate_profit_loss(
    buy_quantity: Any,
    buy_price: Any,
    buy_segment: Union[Segment, str],
    sell_quantity: Any,
    sell_price: Any,
    sell_segment: Union[Segment, str],
    schedule: FeeSchedule = DEFAULT_FEE_SCHEDULE,
) -> ProfitLossSummary:
    """
    Validates the raw form values, computes both legs and formats the result.

    Raises InvalidInputError for missing, non-numeric, non-finite or
    non-positive values and QuantityMismatchError when the quantities differ.
    """
    # 1. Validate
    try:
        buy_qty = _to_number("buy quantity", buy_quantity)
        buy_px = _to_number("buy price", buy_price)
        sell_qty = _to_number("sell quantity", sell_quantity)
        sell_px = _to_number("sell price", sell_price)
    except InvalidInputError as e:
        logger.warning(f"Invalid P&L input {e.field}={e.value!r}")
        raise

    if buy_qty != sell_qty:
        logger.warning(f"Quantity mismatch: buy={buy_qty} sell={sell_qty}")
        raise QuantityMismatchError(buy_qty, sell_qty, QUANTITY_MISMATCH_MESSAGE)

    # 2. Charges + P&L
    result = compute_pnl(
        TradeLeg.buy(buy_qty, buy_px, buy_segment),
        TradeLeg.sell(sell_qty, sell_px, sell_segment),
        schedule,
    )

    # 3. Display values
    net_pl = format_integer(result.net_profit_loss)
    if result.outcome is PnlOutcome.PROFIT:
        net_pl = "+" + net_pl

    return ProfitLossSummary(
        buy_row=_charge_row("Buy", result.buy),
        sell_row=_charge_row("Sell", result.sell),
        gross_pl=format_integer(result.gross_profit),
        total_charges=format_integer(result.total_charges),
        net_pl=net_pl,
        outcome=result.outcome,
        loaded_rate=format_price(result.break_even_price),
        result=result,
    )
