import logging
import math
from typing import Union

from trade_charges.core.entities.charges import ChargeBreakdown
from trade_charges.core.entities.trade import Action, Segment, TradeLeg
from trade_charges.core.errors import InvalidInputError
from trade_charges.core.fee_schedule import DEFAULT_FEE_SCHEDULE, FeeSchedule
from trade_charges.core.numbers import require_positive

logger = logging.getLogger(__name__)


class ChargeCalculator:
    """
    Computes brokerage, STT, SEBI/exchange fees and stamp duty for one leg.
    Stateless apart from the injected fee schedule.
    """

    def __init__(self, schedule: FeeSchedule = DEFAULT_FEE_SCHEDULE):
        self.schedule = schedule

    def compute(
        self,
        qty: float,
        price: float,
        action: Union[Action, str],
        segment: Union[Segment, str],
    ) -> ChargeBreakdown:
        try:
            qty = require_positive("quantity", qty)
            price = require_positive("price", price)
            action = Action.parse(action)
        except InvalidInputError as e:
            logger.warning(f"Rejected charge calculation: {e}")
            raise
        segment = Segment.from_label(segment)

        trade_value = qty * price
        if not math.isfinite(trade_value):
            logger.warning(f"Trade value overflow for qty={qty} price={price}")
            raise InvalidInputError("trade_value", trade_value, "Trade value is not a finite number")

        rates = self.schedule.for_segment(segment)

        # 1. Brokerage + GST
        brokerage_base = trade_value * rates.brokerage_rate
        brokerage_gst = brokerage_base * self.schedule.gst_rate
        brokerage = brokerage_base + brokerage_gst

        # 2. STT
        stt = trade_value * rates.stt_rate(action)

        # 3. SEBI turnover + exchange transaction charges
        sebi_turnover_fee = trade_value * self.schedule.sebi_turnover_rate
        exchange_charges = trade_value * rates.exchange_rate
        sebi_exchange_charges = sebi_turnover_fee + exchange_charges

        # 4. Stamp duty
        stamp_duty = trade_value * rates.stamp_rate(action)

        total_charges = stt + sebi_exchange_charges + stamp_duty + brokerage

        logger.debug(
            f"{action.value} {segment.value} qty={qty} px={price}: "
            f"value={trade_value} charges={total_charges}"
        )

        return ChargeBreakdown(
            quantity=qty,
            price=price,
            action=action,
            segment=segment,
            trade_value=trade_value,
            brokerage_base=brokerage_base,
            brokerage_gst=brokerage_gst,
            brokerage=brokerage,
            stt=stt,
            sebi_turnover_fee=sebi_turnover_fee,
            exchange_charges=exchange_charges,
            sebi_exchange_charges=sebi_exchange_charges,
            stamp_duty=stamp_duty,
            total_charges=total_charges,
        )

    def compute_leg(self, leg: TradeLeg) -> ChargeBreakdown:
        return self.compute(leg.quantity, leg.price, leg.action, leg.segment)


def compute_charges(
    qty: float,
    price: float,
    action: Union[Action, str],
    segment: Union[Segment, str],
    schedule: FeeSchedule = DEFAULT_FEE_SCHEDULE,
) -> ChargeBreakdown:
    return ChargeCalculator(schedule).compute(qty, price, action, segment)
