"""
Item Classifier - Maps legacy order item names to a pricing category.

Order items carry no category field; the size and product type are encoded
in the display name ("Full Beef", "Salsa Verde - Small (4oz)", "Chicken").
This module is the only place that interprets those names.
"""
import logging
from typing import Optional

from .models import MenuSettings, ProductCategory

logger = logging.getLogger(__name__)

FULL_PREFIX = "Full "
SALSA_MARKER = "Salsa"
SMALL_MARKER = "Small"
LARGE_MARKER = "Large"


def flavor_of(name: str) -> str:
    """Strip the full-size prefix from an item name."""
    if name.startswith(FULL_PREFIX):
        return name[len(FULL_PREFIX):]
    return name


def classify_item(name: str, menu: Optional[MenuSettings] = None) -> ProductCategory:
    """
    Classify an item name. Matching is case-sensitive.

    Without a menu every non-full, non-salsa name is MINI. With a menu, a
    name that is neither full, salsa nor a known mini flavor is
    UNCLASSIFIED; callers price it as mini.
    """
    name = name or ""

    if name.startswith(FULL_PREFIX):
        return ProductCategory.FULL

    if SALSA_MARKER in name:
        if SMALL_MARKER in name:
            return ProductCategory.SALSA_SMALL
        if LARGE_MARKER in name:
            return ProductCategory.SALSA_LARGE
        return ProductCategory.SALSA_UNSIZED

    if menu is not None and menu.mini_flavors and name not in menu.mini_flavors:
        logger.debug("Item %r not on the mini menu", name)
        return ProductCategory.UNCLASSIFIED

    return ProductCategory.MINI


def is_known_full_flavor(name: str, menu: Optional[MenuSettings]) -> bool:
    """True unless a menu is given and the full-size flavor is missing from it."""
    if menu is None or not menu.full_flavors:
        return True
    # Stored menus list full flavors both with and without the prefix
    return flavor_of(name) in menu.full_flavors or name in menu.full_flavors
