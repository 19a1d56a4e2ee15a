"""
Pricing Engine - Order totals with package tier pricing and traceability.

Resolution order for one order:
1. Classify every line into a bucket (mini, full, small salsa, large salsa)
2. Sum quantities per bucket
3. Price mini and full counts through their package tiers, largest first
4. Charge salsas a flat unit price
5. Add the delivery fee once

Totals are never rounded here; display code formats currency.
"""
import logging
from typing import Iterable, Optional, Sequence

from .item_classifier import classify_item, is_known_full_flavor
from .models import (
    LineItem,
    MenuSettings,
    OrderQuote,
    PricingSettings,
    PricingTier,
    ProductCategory,
)

logger = logging.getLogger(__name__)


def price_for_count(quantity: int, base_price: float, tiers: Sequence[PricingTier] = ()) -> float:
    """
    Price a quantity of one size class, applying package deals first.

    Packages are consumed greedily from the largest size down. This is not
    guaranteed to be the cheapest packing; callers depend on this exact
    result. Tiers with a non-positive size are skipped. Whatever is left is
    charged at `base_price` per unit.
    """
    if quantity <= 0:
        return 0

    # sorted() is stable, so equal package sizes keep their input order
    sorted_tiers = sorted(tiers, key=lambda t: t.quantity, reverse=True)

    remaining = quantity
    total = 0
    for tier in sorted_tiers:
        if tier.quantity <= 0:
            continue
        packages = remaining // tier.quantity
        if packages > 0:
            total += packages * tier.price
            remaining %= tier.quantity

    total += remaining * base_price
    return total


def _quantity(item: LineItem) -> int:
    return item.quantity or 0


def order_total(items: Iterable[LineItem], delivery_fee: Optional[float], pricing: PricingSettings) -> float:
    """
    Calculate the charge for an order.

    Args:
        items: Order lines; missing quantities count as 0
        delivery_fee: Added once; None counts as 0
        pricing: Price list for the order

    Returns:
        Unrounded total
    """
    return calculate_order(items, delivery_fee, pricing).total


def calculate_order(
    items: Iterable[LineItem],
    delivery_fee: Optional[float],
    pricing: PricingSettings,
    menu: Optional[MenuSettings] = None,
) -> OrderQuote:
    """
    Calculate an order total with a per-bucket breakdown, trace and warnings.

    Passing a `menu` enables warnings for names the classifier could only
    place by default. Warnings never change the total.
    """
    quote = OrderQuote(total=0.0, delivery_fee=delivery_fee or 0)

    for item in items:
        qty = _quantity(item)
        category = classify_item(item.name, menu)

        if category in (ProductCategory.MINI, ProductCategory.UNCLASSIFIED):
            quote.mini_quantity += qty
            if category is ProductCategory.UNCLASSIFIED:
                quote.add_warning(f"Unclassified item priced as mini: {item.name}")
        elif category is ProductCategory.FULL:
            quote.full_quantity += qty
            if not is_known_full_flavor(item.name, menu):
                quote.add_warning(f"Full-size flavor not on menu: {item.name}")
        elif category is ProductCategory.SALSA_SMALL:
            quote.small_salsa_quantity += qty
        elif category is ProductCategory.SALSA_LARGE:
            quote.large_salsa_quantity += qty
        else:
            quote.add_warning(f"Salsa without a size was not charged: {item.name}")

    quote.add_trace(
        "Classification",
        "mini/full/small salsa/large salsa",
        f"{quote.mini_quantity}/{quote.full_quantity}/"
        f"{quote.small_salsa_quantity}/{quote.large_salsa_quantity}",
    )

    quote.mini_total = price_for_count(quote.mini_quantity, pricing.mini.base_price, pricing.mini.tiers)
    quote.add_trace("Mini Pricing", f"{quote.mini_quantity} minis with {len(pricing.mini.tiers)} tiers",
                    f"${quote.mini_total:.2f}")

    quote.full_total = price_for_count(quote.full_quantity, pricing.full.base_price, pricing.full.tiers)
    quote.add_trace("Full Pricing", f"{quote.full_quantity} full-size with {len(pricing.full.tiers)} tiers",
                    f"${quote.full_total:.2f}")

    quote.salsa_total = (
        quote.small_salsa_quantity * pricing.salsa_small
        + quote.large_salsa_quantity * pricing.salsa_large
    )
    quote.add_trace("Salsa Pricing", "Flat unit prices", f"${quote.salsa_total:.2f}")

    quote.total = quote.mini_total + quote.full_total + quote.salsa_total + quote.delivery_fee
    if quote.delivery_fee:
        quote.add_trace("Delivery", "Delivery fee added", f"${quote.delivery_fee:.2f}")

    if quote.warnings:
        logger.debug("Order quote warnings: %s", quote.warnings)

    return quote


def count_items(items: Iterable[LineItem]) -> tuple[int, int]:
    """Return (mini, full) counts as stored on an order's totals."""
    mini = 0
    full = 0
    for item in items:
        category = classify_item(item.name)
        if category is ProductCategory.FULL:
            full += _quantity(item)
        elif category is ProductCategory.MINI:
            mini += _quantity(item)
    return mini, full
