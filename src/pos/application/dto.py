"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.cart import Cart
from pos.domain.model.product import Product
from pos.domain.model.sale import Sale, SaleRecord


@dataclass(frozen=True)
class ProductDTO:
    """Output: one product tile on the sales screen."""

    id: int
    name: str
    sku: str
    price: str  # formatted, e.g. "PKR 50.00"
    stock: str
    unit: str
    category: str | None
    pinned: bool

    @staticmethod
    def from_product(product: Product, pinned: bool) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            sku=product.sku,
            price=str(product.price),
            stock=f"{product.stock.normalize():f}",
            unit=product.unit,
            category=product.category,
            pinned=pinned,
        )


@dataclass(frozen=True)
class CartLineDTO:
    product_id: int
    name: str
    sku: str
    quantity: str
    unit: str
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    item_count: str
    total: str

    @staticmethod
    def from_cart(cart: Cart) -> CartDTO:
        count = cart.item_count()
        return CartDTO(
            lines=[
                CartLineDTO(
                    product_id=line.product_id,
                    name=line.name,
                    sku=line.sku,
                    quantity=str(line.quantity),
                    unit=line.unit,
                    unit_price=str(line.unit_price),
                    line_total=str(line.line_total),
                )
                for line in cart.lines
            ],
            item_count=f"{count.normalize():f}",
            total=str(cart.total()),
        )


@dataclass(frozen=True)
class SaleLineItemDTO:
    product_id: int
    quantity: str
    unit_price: str
    total_price: str


@dataclass(frozen=True)
class SaleDTO:
    customer_id: int | None
    customer_name: str
    items: list[SaleLineItemDTO]
    total_amount: str
    discount: str
    payment_method: str
    status: str
    sale_date: str
    notes: str

    @staticmethod
    def from_sale(sale: Sale) -> SaleDTO:
        return SaleDTO(
            customer_id=sale.customer_id,
            customer_name=sale.customer_name,
            items=[
                SaleLineItemDTO(
                    product_id=item.product_id,
                    quantity=str(item.quantity),
                    unit_price=str(item.unit_price),
                    total_price=str(item.total_price),
                )
                for item in sale.items
            ],
            total_amount=str(sale.total_amount),
            discount=str(sale.discount),
            payment_method=sale.payment_method.value,
            status=sale.status.value,
            sale_date=sale.sale_date.strftime("%Y-%m-%d %H:%M UTC"),
            notes=sale.notes,
        )


@dataclass(frozen=True)
class SaleRecordDTO:
    """Output: one row of today's orders."""

    id: int
    customer_name: str
    total_amount: str
    payment_method: str
    status: str
    time: str
    item_count: int

    @staticmethod
    def from_record(record: SaleRecord) -> SaleRecordDTO:
        return SaleRecordDTO(
            id=record.id,
            customer_name=record.customer_name,
            total_amount=str(record.total_amount),
            payment_method=record.payment_method,
            status=record.status,
            time=record.sale_date.strftime("%H:%M"),
            item_count=record.item_count,
        )


@dataclass(frozen=True)
class CheckoutResultDTO:
    """Output: what happened when the cashier pressed Complete Sale."""

    success: bool
    message: str
    sale: SaleDTO | None = None
