"""Cart aggregate — the lines a customer intends to buy before payment.

The Cart owns its lines and is the only thing allowed to change them.
Each session holds exactly one Cart; callers mutate it through the
methods below and never hold on to a line across mutations.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    """One product in the cart.

    Name, price, SKU and unit are copied from the product when the line is
    created, so later catalog refreshes do not reprice an open cart.
    """

    product_id: int
    name: str
    unit_price: Money
    quantity: Quantity
    sku: str
    unit: str

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


class Cart:
    """Insertion-ordered collection of CartLines keyed by product ID.

    Invariants:
    - no two lines share a ``product_id``
    - every stored line has a positive quantity
    """

    def __init__(self) -> None:
        self._lines: dict[int, CartLine] = {}

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: Quantity | Decimal | int | float = 1) -> CartLine:
        """Add *quantity* of *product*, merging into an existing line."""
        if not isinstance(quantity, Quantity):
            quantity = Quantity(quantity)

        line = self._lines.get(product.id)
        if line is not None:
            line.quantity = line.quantity + quantity
            return line

        line = CartLine(
            product_id=product.id,
            name=product.name,
            unit_price=product.price,  # <-- price snapshot
            quantity=quantity,
            sku=product.sku,
            unit=product.unit,
        )
        self._lines[product.id] = line
        return line

    def set_quantity(self, product_id: int, quantity: Decimal | int | float) -> None:
        """Replace a line's quantity; zero or less removes the line.

        Setting a quantity for a product that is not in the cart does
        nothing.
        """
        if quantity <= 0:
            self.remove(product_id)
            return
        line = self._lines.get(product_id)
        if line is not None:
            line.quantity = Quantity(quantity)

    def increment(self, product_id: int) -> None:
        line = self._lines.get(product_id)
        if line is not None:
            self.set_quantity(product_id, line.quantity.value + 1)

    def decrement(self, product_id: int) -> None:
        line = self._lines.get(product_id)
        if line is not None:
            self.set_quantity(product_id, line.quantity.value - 1)

    def remove(self, product_id: int) -> None:
        self._lines.pop(product_id, None)

    def clear(self) -> None:
        self._lines.clear()

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> list[CartLine]:
        return list(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def get(self, product_id: int) -> CartLine | None:
        return self._lines.get(product_id)

    def total(self) -> Money:
        """Sum of ``unit_price * quantity`` over the current lines."""
        result = Money.zero()
        for line in self._lines.values():
            result = result + line.line_total
        return result

    def item_count(self) -> Decimal:
        """Total number of units across all lines (shown on the cart badge)."""
        return sum((line.quantity.value for line in self._lines.values()), Decimal("0"))

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._lines
