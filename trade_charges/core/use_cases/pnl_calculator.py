import logging
import math
from typing import Optional

from trade_charges.core.entities.pnl import PnlResult
from trade_charges.core.entities.trade import Action, TradeLeg
from trade_charges.core.errors import InvalidInputError, QuantityMismatchError
from trade_charges.core.fee_schedule import DEFAULT_FEE_SCHEDULE, FeeSchedule
from trade_charges.core.numbers import require_positive
from trade_charges.core.use_cases.charge_calculator import ChargeCalculator

logger = logging.getLogger(__name__)


def break_even_price(buy_trade_value: float, total_charges: float, buy_quantity: float) -> Optional[float]:
    """(Buy trade value + total charges) / buy quantity, or None if not finite."""
    if buy_quantity <= 0:
        return None
    price = (buy_trade_value + total_charges) / buy_quantity
    return price if math.isfinite(price) else None


class PnlAggregator:
    def __init__(self, calculator: Optional[ChargeCalculator] = None):
        self.calculator = calculator or ChargeCalculator()

    def aggregate(self, buy_leg: TradeLeg, sell_leg: TradeLeg) -> PnlResult:
        """
        Charges both legs and derives gross/net P&L and the loaded rate.
        The buy leg is always charged as BUY and the sell leg as SELL.
        """
        try:
            for side, leg in (("buy", buy_leg), ("sell", sell_leg)):
                require_positive(f"{side} quantity", leg.quantity)
                require_positive(f"{side} price", leg.price)
        except InvalidInputError as e:
            logger.warning(f"Rejected P&L calculation: {e}")
            raise

        if buy_leg.quantity != sell_leg.quantity:
            logger.warning(f"Quantity mismatch: buy={buy_leg.quantity} sell={sell_leg.quantity}")
            raise QuantityMismatchError(buy_leg.quantity, sell_leg.quantity)

        buy = self.calculator.compute(buy_leg.quantity, buy_leg.price, Action.BUY, buy_leg.segment)
        sell = self.calculator.compute(sell_leg.quantity, sell_leg.price, Action.SELL, sell_leg.segment)

        # Exact values only, never the rounded display figures
        gross_profit = (sell_leg.quantity * sell_leg.price) - (buy_leg.quantity * buy_leg.price)
        total_charges = buy.total_charges + sell.total_charges
        net_profit_loss = gross_profit - total_charges

        result = PnlResult(
            buy=buy,
            sell=sell,
            gross_profit=gross_profit,
            total_charges=total_charges,
            net_profit_loss=net_profit_loss,
            break_even_price=break_even_price(buy.trade_value, total_charges, buy_leg.quantity),
        )
        logger.info(
            f"P&L qty={buy_leg.quantity} buy={buy_leg.price} sell={sell_leg.price}: "
            f"gross={gross_profit:.2f} charges={total_charges:.2f} net={net_profit_loss:.2f}"
        )
        return result


def compute_pnl(
    buy_leg: TradeLeg,
    sell_leg: TradeLeg,
    schedule: FeeSchedule = DEFAULT_FEE_SCHEDULE,
) -> PnlResult:
    return PnlAggregator(ChargeCalculator(schedule)).aggregate(buy_leg, sell_leg)
