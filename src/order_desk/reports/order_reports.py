"""
Order Reports - Date filtering and financial aggregation for the dashboard.

Every date decision goes through the pickup date parser, so orders whose
pickup date cannot be parsed are left out of ranged views and calendar
buckets rather than guessed into one.
"""
import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Union

import pandas as pd

from ..engine.item_classifier import classify_item, flavor_of
from ..engine.models import ApprovalStatus, Expense, FollowUpStatus, MenuSettings, Order, ProductCategory
from ..scheduling.date_parser import (
    ValidInstant,
    end_of_day,
    instant_sort_key,
    is_within,
    parse_order_instant,
    start_of_day,
)

logger = logging.getLogger(__name__)

DateLike = Union[date, str, None]


def _to_date(value: DateLike) -> Optional[date]:
    """Accept a date, a datetime, a YYYY-MM-DD string or None."""
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def filter_orders_by_date(orders: Iterable[Order], start: DateLike = None, end: DateLike = None) -> list[Order]:
    """
    Keep orders picked up within [start 00:00, end 23:59:59.999999].

    Orders with an unparseable pickup date are dropped whenever a bound is
    given. With no bounds every order is kept.
    """
    start_day = _to_date(start)
    end_day = _to_date(end)
    orders = list(orders)
    if start_day is None and end_day is None:
        return orders

    lower = start_of_day(start_day) if start_day else None
    upper = end_of_day(end_day) if end_day else None

    kept = [o for o in orders if is_within(parse_order_instant(o), lower, upper)]
    if len(kept) < len(orders):
        logger.debug("Date filter dropped %d of %d orders", len(orders) - len(kept), len(orders))
    return kept


def filter_expenses_by_date(expenses: Iterable[Expense], start: DateLike = None, end: DateLike = None) -> list[Expense]:
    """Keep expenses dated within [start, end]; undated expenses drop when a bound is set."""
    start_day = _to_date(start)
    end_day = _to_date(end)
    expenses = list(expenses)
    if start_day is None and end_day is None:
        return expenses

    kept = []
    for expense in expenses:
        try:
            day = date.fromisoformat(expense.date[:10])
        except (TypeError, ValueError):
            continue
        if start_day and day < start_day:
            continue
        if end_day and day > end_day:
            continue
        kept.append(expense)
    return kept


def orders_by_day(orders: Iterable[Order], year: int, month: int) -> dict[int, list[Order]]:
    """Group a month's orders by day of month for the calendar view."""
    days: dict[int, list[Order]] = {}
    for order in orders:
        instant = parse_order_instant(order)
        if not isinstance(instant, ValidInstant):
            continue
        if instant.at.year == year and instant.at.month == month:
            days.setdefault(instant.at.day, []).append(order)
    return days


def active_orders(orders: Iterable[Order]) -> list[Order]:
    """Approved orders; these are the ones the business fulfils."""
    return [o for o in orders if o.approval_status == ApprovalStatus.APPROVED]


def pending_orders(orders: Iterable[Order]) -> list[Order]:
    return [o for o in orders if o.approval_status == ApprovalStatus.PENDING]


def sort_orders_by_pickup(orders: Iterable[Order], descending: bool = False) -> list[Order]:
    """Sort by pickup instant. Unparseable dates sort first (last when descending)."""
    return sorted(orders, key=lambda o: instant_sort_key(parse_order_instant(o)), reverse=descending)


def dashboard_stats(orders: Iterable[Order]) -> dict:
    """Headline numbers for the dashboard cards."""
    orders = list(orders)
    return {
        "total_revenue": sum(o.amount_charged for o in orders),
        "orders_to_follow_up": sum(1 for o in orders if o.follow_up_status == FollowUpStatus.NEEDED),
        "total_empanadas_sold": sum(o.total_mini + o.total_full_size for o in orders),
    }


def _order_cost(order: Order) -> float:
    return order.total_cost if order.total_cost is not None else 0.0


def _expense_frame(expenses: Iterable[Expense]) -> pd.DataFrame:
    rows = [{"date": e.date, "amount": e.amount, "category": e.category} for e in expenses]
    return pd.DataFrame(rows, columns=["date", "amount", "category"])


def financial_summary(orders: Iterable[Order], expenses: Iterable[Expense]) -> dict:
    """
    Profit and loss for a set of orders and expenses.

    Cost of goods uses each order's recorded `total_cost`; orders without
    one contribute nothing.
    """
    orders = list(orders)
    df_expenses = _expense_frame(expenses)

    revenue = float(sum(o.amount_charged for o in orders))
    cogs = float(sum(_order_cost(o) for o in orders))
    fixed = float(df_expenses["amount"].sum()) if not df_expenses.empty else 0.0
    total_expenses = cogs + fixed
    net_profit = revenue - total_expenses
    margin = (net_profit / revenue) * 100 if revenue > 0 else 0.0

    breakdown = {"Ingredients (COGS)": cogs}
    if not df_expenses.empty:
        by_category = df_expenses.groupby("category", sort=False)["amount"].sum()
        for category, amount in by_category.items():
            breakdown[category] = breakdown.get(category, 0.0) + float(amount)
    breakdown = {k: v for k, v in breakdown.items() if v > 0}

    return {
        "revenue": revenue,
        "cogs": cogs,
        "fixed_expenses": fixed,
        "total_expenses": total_expenses,
        "net_profit": net_profit,
        "margin": margin,
        "expense_breakdown": breakdown,
    }


def monthly_pnl(orders: Iterable[Order], expenses: Iterable[Expense]) -> pd.DataFrame:
    """
    Revenue, expense and profit per YYYY-MM month, sorted by month.

    Orders are bucketed by pickup month; order cost counts as expense.
    """
    rows = []
    for order in orders:
        instant = parse_order_instant(order)
        if not isinstance(instant, ValidInstant):
            continue
        rows.append({
            "month": instant.at.strftime("%Y-%m"),
            "revenue": order.amount_charged,
            "expense": _order_cost(order),
        })
    for expense in expenses:
        try:
            month = date.fromisoformat(expense.date[:10]).strftime("%Y-%m")
        except (TypeError, ValueError):
            logger.debug("Skipping expense with unusable date %r", expense.date)
            continue
        rows.append({"month": month, "revenue": 0.0, "expense": expense.amount})

    if not rows:
        return pd.DataFrame(columns=["month", "revenue", "expense", "profit"])

    df = pd.DataFrame(rows).groupby("month", as_index=False)[["revenue", "expense"]].sum()
    df["profit"] = df["revenue"] - df["expense"]
    return df.sort_values("month").reset_index(drop=True)


def start_of_week(day: date) -> date:
    """Sunday on or before `day`."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def weekly_sales(orders: Iterable[Order]) -> pd.DataFrame:
    """Mini and full-size counts per week (weeks start Sunday)."""
    rows = []
    for order in orders:
        instant = parse_order_instant(order)
        if not isinstance(instant, ValidInstant):
            continue
        rows.append({
            "week": start_of_week(instant.at.date()),
            "mini": order.total_mini,
            "full": order.total_full_size,
        })

    if not rows:
        return pd.DataFrame(columns=["week", "mini", "full"])

    df = pd.DataFrame(rows).groupby("week", as_index=False)[["mini", "full"]].sum()
    return df.sort_values("week").reset_index(drop=True)


def popular_products(orders: Iterable[Order], size: str = "full",
                     menu: Optional[MenuSettings] = None) -> pd.DataFrame:
    """
    Quantity sold per flavor, most popular first.

    Args:
        orders: Orders to count
        size: "full" for full-size flavors, "mini" for minis
        menu: When given, mini counts only include the menu's mini flavors
    """
    wanted = ProductCategory.FULL if size == "full" else ProductCategory.MINI
    rows = [
        {"name": flavor_of(item.name), "count": item.quantity or 0}
        for order in orders
        for item in order.items
        if classify_item(item.name, menu) is wanted
    ]
    if not rows:
        return pd.DataFrame(columns=["name", "count"])

    df = pd.DataFrame(rows).groupby("name", as_index=False, sort=False)["count"].sum()
    return df.sort_values("count", ascending=False, kind="stable").reset_index(drop=True)
