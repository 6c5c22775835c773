from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from trade_charges.core.entities.charges import ChargeBreakdown


class PnlOutcome(str, Enum):
    PROFIT = "profit"
    LOSS = "loss"
    ZERO = "zero"


class PnlResult(BaseModel):
    """
    Round-trip result for a matched buy and sell leg.
    break_even_price is None when it cannot be computed as a finite number.
    """
    model_config = ConfigDict(frozen=True)

    buy: ChargeBreakdown
    sell: ChargeBreakdown
    gross_profit: float
    total_charges: float
    net_profit_loss: float
    break_even_price: Optional[float] = None

    @property
    def outcome(self) -> PnlOutcome:
        if self.net_profit_loss > 0:
            return PnlOutcome.PROFIT
        if self.net_profit_loss < 0:
            return PnlOutcome.LOSS
        return PnlOutcome.ZERO
