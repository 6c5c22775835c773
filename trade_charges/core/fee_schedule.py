"""
Fee schedule for NSE equity and derivatives trades.

Rates are fractions of trade value (0.001 == 0.1%). Each segment carries
its own row, and STT / stamp duty are split by action, so a
(segment, action) pair always selects exactly one rate per charge.
"""
import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

from trade_charges.core.entities.trade import Action, Segment


class SegmentRates(BaseModel):
    model_config = ConfigDict(frozen=True)

    brokerage_rate: float
    exchange_rate: float
    stt_buy_rate: float = 0.0
    stt_sell_rate: float = 0.0
    stamp_buy_rate: float = 0.0
    stamp_sell_rate: float = 0.0

    @field_validator("*")
    @classmethod
    def _non_negative(cls, value: float) -> float:
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"rate must be a finite number >= 0, got {value}")
        return value

    def stt_rate(self, action: Action) -> float:
        return self.stt_buy_rate if action is Action.BUY else self.stt_sell_rate

    def stamp_rate(self, action: Action) -> float:
        return self.stamp_buy_rate if action is Action.BUY else self.stamp_sell_rate


class FeeSchedule(BaseModel):
    model_config = ConfigDict(frozen=True)

    gst_rate: float = 0.18  # on brokerage
    sebi_turnover_rate: float = 0.000001  # 0.0001%

    delivery: SegmentRates = Field(default_factory=lambda: SegmentRates(
        brokerage_rate=0.000704847026178763,  # 0.0704847026178763%
        exchange_rate=0.0000307,  # 0.00307%
        stt_buy_rate=0.001,  # 0.1%, both sides
        stt_sell_rate=0.001,
        stamp_buy_rate=0.00015,  # 0.015%
    ))
    intraday: SegmentRates = Field(default_factory=lambda: SegmentRates(
        brokerage_rate=0.00007,  # 0.007%
        exchange_rate=0.0000307,
        stt_sell_rate=0.00025,  # 0.025%
        stamp_buy_rate=0.00003,  # 0.003%
    ))
    futures_options: SegmentRates = Field(default_factory=lambda: SegmentRates(
        brokerage_rate=0.00007,
        exchange_rate=0.0000183,  # 0.00183%
        stt_sell_rate=0.0002,  # 0.02%
        stamp_buy_rate=0.00002,  # 0.002%
    ))

    @field_validator("gst_rate", "sebi_turnover_rate")
    @classmethod
    def _non_negative(cls, value: float) -> float:
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"rate must be a finite number >= 0, got {value}")
        return value

    def for_segment(self, segment: Segment) -> SegmentRates:
        if segment is Segment.DELIVERY:
            return self.delivery
        if segment is Segment.FUTURES_OPTIONS:
            return self.futures_options
        return self.intraday


DEFAULT_FEE_SCHEDULE = FeeSchedule()
