"""Engine subpackage - order pricing and item classification."""
from .models import (
    LineItem,
    MenuSettings,
    Order,
    OrderQuote,
    PricingSettings,
    PricingTier,
    ProductCategory,
    ProductPricing,
)
from .item_classifier import classify_item
from .pricing_engine import calculate_order, count_items, order_total, price_for_count

__all__ = [
    'LineItem', 'MenuSettings', 'Order', 'OrderQuote', 'PricingSettings',
    'PricingTier', 'ProductCategory', 'ProductPricing',
    'classify_item', 'calculate_order', 'count_items', 'order_total', 'price_for_count',
]
