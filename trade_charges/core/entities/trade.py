from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, field_validator

from trade_charges.core.errors import InvalidInputError

DELIVERY_LABEL = "ROLLING T1"
FUTURES_OPTIONS_LABEL = "F&O"


def _require_number(field: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(field, value, f"{field} must be a number, got {value!r}")


class Action(str, Enum):
    BUY = "BUY"
    SELL = "SELL"

    @classmethod
    def parse(cls, value: Union["Action", str]) -> "Action":
        if isinstance(value, Action):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise InvalidInputError("action", value, f"action must be BUY or SELL, got {value!r}")


class Segment(str, Enum):
    DELIVERY = "DELIVERY"
    INTRADAY = "INTRADAY"
    FUTURES_OPTIONS = "FUTURES_OPTIONS"

    @classmethod
    def from_label(cls, label: Union["Segment", str]) -> "Segment":
        """
        Classifies a segment label as shown to users.
        "ROLLING T1" is delivery, "F&O" is futures & options and
        any other label is treated as intraday cash.
        """
        if isinstance(label, Segment):
            return label
        normalized = str(label).strip().upper()
        if normalized == DELIVERY_LABEL:
            return cls.DELIVERY
        if normalized == FUTURES_OPTIONS_LABEL:
            return cls.FUTURES_OPTIONS
        return cls.INTRADAY


class TradeLeg(BaseModel):
    """
    One side of a round-trip trade.

    Quantity and price must be real ints or floats; strings and booleans
    are not coerced. Direct construction reports those as a pydantic
    ValidationError, while buy() and sell() raise InvalidInputError.
    Range checks (> 0, finite) are left to the calculators.
    """
    model_config = ConfigDict(frozen=True)

    quantity: Union[StrictInt, StrictFloat]
    price: Union[StrictInt, StrictFloat]
    action: Action
    segment: Segment

    @field_validator("action", mode="before")
    @classmethod
    def _parse_action(cls, value: Any) -> Action:
        return Action.parse(value)

    @field_validator("segment", mode="before")
    @classmethod
    def _classify_segment(cls, value: Any) -> Segment:
        return Segment.from_label(value)

    @property
    def trade_value(self) -> float:
        return self.quantity * self.price

    @classmethod
    def buy(cls, quantity: float, price: float, segment: Union[Segment, str]) -> "TradeLeg":
        _require_number("quantity", quantity)
        _require_number("price", price)
        return cls(quantity=quantity, price=price, action=Action.BUY, segment=segment)

    @classmethod
    def sell(cls, quantity: float, price: float, segment: Union[Segment, str]) -> "TradeLeg":
        _require_number("quantity", quantity)
        _require_number("price", price)
        return cls(quantity=quantity, price=price, action=Action.SELL, segment=segment)
