"""Tests for the kitchen prep list."""
import pytest

from order_desk.engine.models import LineItem, Order, PrepSettings
from order_desk.reports.prep_list import PREP_COLUMNS, build_prep_list


def make_order(order_id, *items):
    return Order(id=order_id, pickup_date="2024-03-05", pickup_time="2pm", items=list(items))


@pytest.fixture
def prep():
    return PrepSettings(lbs_per_20={"Beef": 1.5, "Chicken": 1.0}, full_size_multiplier=2.0)


def test_counts_and_pounds_per_flavor(prep):
    orders = [
        make_order("a", LineItem("Beef", 20), LineItem("Full Beef", 10)),
        make_order("b", LineItem("Chicken", 10), LineItem("Beef", 20)),
    ]

    result = build_prep_list(orders, prep)

    assert result.total_mini == 50
    assert result.total_full == 10
    assert result.rows.columns.tolist() == PREP_COLUMNS
    assert result.rows["flavor"].tolist() == ["Beef", "Chicken"]
    assert result.rows["mini_qty"].tolist() == [40, 10]
    assert result.rows["full_qty"].tolist() == [10, 0]
    # Beef: 40/20*1.5 + 10/20*1.5*2 = 3.0 + 1.5
    assert result.rows["total_lbs"].tolist() == pytest.approx([4.5, 0.5])
    assert result.total_lbs == pytest.approx(5.0)


def test_salsa_is_skipped(prep):
    orders = [make_order("a", LineItem("Salsa Verde - Small (4oz)", 3), LineItem("Salsa Roja", 1),
                         LineItem("Beef", 2))]
    result = build_prep_list(orders, prep)
    assert result.rows["flavor"].tolist() == ["Beef"]
    assert result.total_mini == 2


def test_flavor_without_rate_needs_no_filling(prep):
    result = build_prep_list([make_order("a", LineItem("Spinach", 40))], prep)
    assert result.rows["lbs_per_20"].tolist() == [0.0]
    assert result.rows["total_lbs"].tolist() == [0.0]


def test_full_size_multiplier_applies():
    prep = PrepSettings(lbs_per_20={"Beef": 2.0}, full_size_multiplier=3.0)
    result = build_prep_list([make_order("a", LineItem("Full Beef", 20))], prep)
    assert result.rows["total_lbs"].tolist() == pytest.approx([6.0])


def test_default_multiplier_is_two():
    assert PrepSettings().full_size_multiplier == 2.0


def test_zero_demand_rows_dropped(prep):
    orders = [make_order("a", LineItem("Beef", 0), LineItem("Chicken", None), LineItem("Full Beef", 2))]
    result = build_prep_list(orders, prep)
    assert result.rows["flavor"].tolist() == ["Beef"]
    assert result.rows["mini_qty"].tolist() == [0]
    assert result.rows["full_qty"].tolist() == [2]


def test_sorted_by_flavor_ignoring_case(prep):
    orders = [make_order("a", LineItem("spinach", 1), LineItem("Chicken", 1), LineItem("Beef", 1))]
    assert build_prep_list(orders, prep).rows["flavor"].tolist() == ["Beef", "Chicken", "spinach"]


def test_empty_orders():
    result = build_prep_list([])
    assert result.rows.empty
    assert result.rows.columns.tolist() == PREP_COLUMNS
    assert (result.total_mini, result.total_full, result.total_lbs) == (0, 0, 0.0)
