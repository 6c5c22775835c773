from typing import Any


class ChargeCalculationError(ValueError):
    """Base class for every rejected charge or P&L calculation."""


class InvalidInputError(ChargeCalculationError):
    """
    Quantity, price or action cannot be used for a calculation.
    Raised before any charge is computed.
    """

    def __init__(self, field: str, value: Any, message: str = ""):
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid {field}: {value!r}")


class QuantityMismatchError(ChargeCalculationError):
    """Buy and sell legs do not cover the same quantity."""

    def __init__(self, buy_quantity: float, sell_quantity: float, message: str = ""):
        self.buy_quantity = buy_quantity
        self.sell_quantity = sell_quantity
        super().__init__(
            message or f"Buy quantity {buy_quantity} does not match sell quantity {sell_quantity}"
        )
