"""Mini README: Fixed-point currency values stored as integer cents.

Structure:
    * Money - immutable, non-negative amount of minor currency units.
    * format_signed - render a signed cent total, parenthesising negatives.

Amounts never carry a sign; whether a value adds to or subtracts from a
total is decided by the owning transaction's kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal, InvalidOperation, localcontext

from ..errors import MoneyParseError

CENTS_PER_UNIT = 100
CENTS_DIGITS = 2


@dataclass(frozen=True, slots=True)
class Money:
    """A non-negative amount expressed in cents."""

    cents: int = 0

    def __post_init__(self) -> None:
        if self.cents < 0:
            raise ValueError(f"Money cannot be negative: {self.cents}")

    @classmethod
    def parse(cls, text: str) -> "Money":
        """Parse a decimal string, multiplying by 100 and truncating."""

        try:
            value = Decimal(str(text).strip())
        except (InvalidOperation, ValueError) as error:
            raise MoneyParseError(text) from error
        if not value.is_finite() or value < 0:
            raise MoneyParseError(text)
        with localcontext() as context:
            context.prec = max(context.prec, len(value.as_tuple().digits) + CENTS_DIGITS)
            try:
                cents = value.scaleb(CENTS_DIGITS).to_integral_value(rounding=ROUND_DOWN)
            except ArithmeticError as error:
                raise MoneyParseError(text) from error
        return cls(int(cents))

    def format(self, width: int = 0) -> str:
        """Render as ``D.CC`` with the dollar part right-aligned to ``width``."""

        dollars, cents = divmod(self.cents, CENTS_PER_UNIT)
        return f"{dollars:>{width}}.{cents:02d}"

    def scale(self, multiplier: float) -> "Money":
        """Multiply by a float factor, truncating toward zero."""

        return Money(int(self.cents * multiplier))

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.cents + other.cents)

    def __str__(self) -> str:
        return self.format()


def format_signed(cents: int, width: int = 0) -> str:
    """Render a signed total, wrapping negative values in parentheses."""

    if cents < 0:
        return f"({Money(-cents).format(width)})"
    return Money(cents).format(width)
