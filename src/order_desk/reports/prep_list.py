"""
Prep List - Empanada counts and filling weights for the kitchen.

Counts every non-salsa line of the given orders per flavor, split into
minis and full-size, and converts demand to pounds of filling using the
per-flavor rate for 20 minis. A full-size empanada takes the rate times
the full-size multiplier.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import pandas as pd

from ..engine.item_classifier import classify_item, flavor_of
from ..engine.models import Order, PrepSettings, ProductCategory

logger = logging.getLogger(__name__)

PREP_BATCH_SIZE = 20

PREP_COLUMNS = ["flavor", "mini_qty", "full_qty", "lbs_per_20", "total_lbs"]

_SALSA = (ProductCategory.SALSA_SMALL, ProductCategory.SALSA_LARGE, ProductCategory.SALSA_UNSIZED)


@dataclass
class PrepList:
    """Totals plus one row per flavor with demand, sorted by flavor."""
    total_mini: int
    total_full: int
    rows: pd.DataFrame

    @property
    def total_lbs(self) -> float:
        return float(self.rows["total_lbs"].sum()) if not self.rows.empty else 0.0


def build_prep_list(orders: Iterable[Order], prep: Optional[PrepSettings] = None) -> PrepList:
    """
    Build the prep list for a set of orders.

    Args:
        orders: Orders to prepare, usually one day's approved orders
        prep: Filling rates; flavors without a rate need 0 lbs
    """
    prep = prep or PrepSettings()
    mini_counts: dict[str, int] = {}
    full_counts: dict[str, int] = {}

    for order in orders:
        for item in order.items:
            category = classify_item(item.name)
            if category in _SALSA:
                continue
            quantity = item.quantity or 0
            counts = full_counts if category is ProductCategory.FULL else mini_counts
            flavor = flavor_of(item.name)
            counts[flavor] = counts.get(flavor, 0) + quantity

    rows = []
    for flavor in sorted(set(mini_counts) | set(full_counts), key=str.casefold):
        mini_qty = mini_counts.get(flavor, 0)
        full_qty = full_counts.get(flavor, 0)
        if mini_qty == 0 and full_qty == 0:
            continue
        lbs_per_20 = prep.lbs_per_20.get(flavor, 0.0)
        mini_lbs = mini_qty / PREP_BATCH_SIZE * lbs_per_20
        full_lbs = full_qty / PREP_BATCH_SIZE * lbs_per_20 * prep.full_size_multiplier
        rows.append({
            "flavor": flavor,
            "mini_qty": mini_qty,
            "full_qty": full_qty,
            "lbs_per_20": lbs_per_20,
            "total_lbs": mini_lbs + full_lbs,
        })
        if lbs_per_20 == 0:
            logger.debug("No filling rate for %s; prep weight left at 0", flavor)

    return PrepList(
        total_mini=sum(mini_counts.values()),
        total_full=sum(full_counts.values()),
        rows=pd.DataFrame(rows, columns=PREP_COLUMNS),
    )
