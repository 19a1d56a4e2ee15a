"""
Order Items - Separates package contents from loose items.
"""
from .models import LineItem, Order, PackageSelection


def group_order_items(order: Order) -> tuple[list[PackageSelection], list[LineItem]]:
    """
    Split an order into its package selections and the loose items left over.

    Package contents are subtracted from the order's per-name totals. If a
    package claims more than the order holds, the remainder floors at 0.
    """
    if not order.packages:
        return [], list(order.items)

    remaining: dict[str, int] = {}
    for item in order.items:
        remaining[item.name] = remaining.get(item.name, 0) + (item.quantity or 0)

    for package in order.packages:
        for package_item in package.items:
            current = remaining.get(package_item.name, 0)
            remaining[package_item.name] = max(0, current - (package_item.quantity or 0))

    loose_items = [LineItem(name=name, quantity=qty) for name, qty in remaining.items() if qty > 0]
    return list(order.packages), loose_items
