from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from fastapi import HTTPException, status

from restaurant_api.api.catalog.contracts.product_contract import (
    IProductContract,
    VariationDTO,
    VariationOptionDTO,
)
from restaurant_api.api.orders.models.model_order_detail import OrderDetailModel
from restaurant_api.api.orders.schemas.schema_order_detail import OrderDetailIn


def to_money(value: float | Decimal | int | None) -> Decimal:
    """Two-decimal Decimal from any numeric value."""
    return Decimal(str(value or 0)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def default_option(variation: Optional[VariationDTO]) -> Optional[VariationOptionDTO]:
    if variation is None:
        return None
    return next((o for o in variation.options if o.is_default), None)


def unit_price_for(base_price: float, variation: Optional[VariationDTO]) -> Decimal:
    """
    Base price, replaced by the default option's absolute price or shifted by
    its modifier.
    """
    option = default_option(variation)
    if option is not None:
        if option.price_absolute is not None:
            return to_money(option.price_absolute)
        if option.price_modifier is not None:
            return to_money(base_price) + to_money(option.price_modifier)
    return to_money(base_price)


def build_detail(item: OrderDetailIn, products: IProductContract) -> OrderDetailModel:
    """Prices one line and snapshots the catalog names onto it."""
    if item.product_id is None:
        if item.variation_id:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "product_id is required when variation_id is set")
        name = (item.product_name or "").strip()
        if not name:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "product_name is required for lines without a product")
        unit_price = to_money(item.unit_price)
        variation_name = item.variation_name
    else:
        product = products.get_product(item.product_id)
        if product is None:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, f"product not found: {item.product_id}")

        variation = None
        if item.variation_id:
            variation = products.get_variation(item.variation_id)
            if variation is None:
                raise HTTPException(status.HTTP_400_BAD_REQUEST, f"variation not found: {item.variation_id}")
            if variation.product_id != product.id:
                raise HTTPException(status.HTTP_400_BAD_REQUEST, "variation does not belong to product")

        option = default_option(variation)
        name = product.name
        variation_name = option.label if option else None
        unit_price = unit_price_for(product.base_price, variation)

    return OrderDetailModel(
        product_id=item.product_id,
        variation_id=item.variation_id,
        product_name=name,
        variation_name=variation_name,
        unit_price=unit_price,
        quantity=item.quantity,
        total_price=unit_price * item.quantity,
        note=item.note,
    )


def build_details(items: Iterable[OrderDetailIn], products: IProductContract) -> list[OrderDetailModel]:
    return [build_detail(item, products) for item in items]


def sum_totals(details: Iterable[OrderDetailModel]) -> Decimal:
    return sum((to_money(d.total_price) for d in details), Decimal("0.00"))
