"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from pos.domain.exceptions import InvalidQuantityError, ValidationError

DEFAULT_CURRENCY = "PKR"

# Digits with at most one decimal point; both parts optional.
_QUANTITY_TEXT = re.compile(r"[0-9]*\.?[0-9]*")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: Quantity | Decimal | int) -> Money:
        if isinstance(factor, Quantity):
            factor = factor.value
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by a quantity, got {type(factor).__name__}"
            )
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0"), currency)


@dataclass(frozen=True)
class Quantity:
    """A positive real quantity (products may be sold by weight or length).

    Enforces the invariant that a cart can never hold zero or negative
    amounts of a product.
    """

    value: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float, Decimal)):
            raise InvalidQuantityError(
                f"Quantity must be a number, got {type(self.value).__name__}"
            )
        if isinstance(self.value, float):
            # 2.5 -> Decimal("2.5"), not the binary expansion.
            object.__setattr__(self, "value", Decimal(str(self.value)))
        elif not isinstance(self.value, Decimal):
            object.__setattr__(self, "value", Decimal(self.value))
        if not self.value.is_finite() or self.value <= 0:
            raise InvalidQuantityError("Quantity must be positive")

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __str__(self) -> str:
        # 3.000 -> "3", 2.50 -> "2.5"
        text = format(self.value, "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    @staticmethod
    def of(amount: str | int | float | Decimal) -> Quantity:
        try:
            return Quantity(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidQuantityError(f"Invalid quantity: {amount!r}") from exc


def is_quantity_text(text: str) -> bool:
    """Return True if *text* is acceptable while a quantity is being typed.

    Partial input such as ``""``, ``"."`` or ``"2."`` is accepted here;
    whether it is a usable quantity is decided by ``parse_quantity``.
    """
    return _QUANTITY_TEXT.fullmatch(text) is not None


def parse_quantity(text: str | None) -> Quantity:
    """Parse free-text quantity entry into a positive Quantity.

    Raises InvalidQuantityError for empty, non-numeric, zero or
    negative input.
    """
    if not text or not is_quantity_text(text):
        raise InvalidQuantityError(f"Invalid quantity: {text!r}")
    return Quantity.of(text)
