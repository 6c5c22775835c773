from pydantic import BaseModel, ConfigDict

from trade_charges.core.entities.trade import Action, Segment
from trade_charges.core.numbers import round_half_up


class ChargeDisplay(BaseModel):
    """Whole-rupee values shown for one leg."""
    model_config = ConfigDict(frozen=True)

    trade_value: int
    stt: int
    sebi_exchange_charges: int
    stamp_duty: int
    brokerage: int
    total_charges: int


class ChargeBreakdown(BaseModel):
    """
    All charges for a single leg.
    Values are kept unrounded so that P&L aggregation does not
    compound rounding error; use rounded() for display.
    """
    model_config = ConfigDict(frozen=True)

    quantity: float
    price: float
    action: Action
    segment: Segment

    trade_value: float
    brokerage_base: float
    brokerage_gst: float
    brokerage: float  # base + GST
    stt: float
    sebi_turnover_fee: float
    exchange_charges: float
    sebi_exchange_charges: float
    stamp_duty: float
    total_charges: float

    def rounded(self) -> ChargeDisplay:
        return ChargeDisplay(
            trade_value=round_half_up(self.trade_value),
            stt=round_half_up(self.stt),
            sebi_exchange_charges=round_half_up(self.sebi_exchange_charges),
            stamp_duty=round_half_up(self.stamp_duty),
            brokerage=round_half_up(self.brokerage),
            total_charges=round_half_up(self.total_charges),
        )
