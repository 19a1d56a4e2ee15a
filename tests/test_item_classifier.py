"""Tests for mapping item names to pricing categories."""
import pytest

from order_desk.engine import MenuSettings, ProductCategory, classify_item
from order_desk.engine.item_classifier import flavor_of, is_known_full_flavor


@pytest.mark.parametrize("name, expected", [
    ("Beef", ProductCategory.MINI),
    ("Ham & Cheese", ProductCategory.MINI),
    ("Full Beef", ProductCategory.FULL),
    ("Salsa Verde - Small (4oz)", ProductCategory.SALSA_SMALL),
    ("Salsa Roja - Large (8oz)", ProductCategory.SALSA_LARGE),
    ("Salsa Verde", ProductCategory.SALSA_UNSIZED),
    ("salsa verde small", ProductCategory.MINI),
    ("Fuller Beef", ProductCategory.MINI),
    ("Full Salsa - Small", ProductCategory.FULL),
    ("", ProductCategory.MINI),
])
def test_classify_without_menu(name, expected):
    assert classify_item(name) is expected


def test_unknown_mini_is_unclassified_with_menu(menu):
    assert classify_item("Mystery Box", menu) is ProductCategory.UNCLASSIFIED
    assert classify_item("Beef", menu) is ProductCategory.MINI


def test_empty_menu_does_not_flag():
    assert classify_item("Mystery Box", MenuSettings()) is ProductCategory.MINI


def test_menu_does_not_affect_full_or_salsa(menu):
    assert classify_item("Full Birria", menu) is ProductCategory.FULL
    assert classify_item("Salsa - Large", menu) is ProductCategory.SALSA_LARGE


def test_flavor_of():
    assert flavor_of("Full Pulled Pork") == "Pulled Pork"
    assert flavor_of("Beef") == "Beef"


def test_full_flavor_lookup(menu):
    assert is_known_full_flavor("Full Beef", menu)
    assert not is_known_full_flavor("Full Birria", menu)
    assert is_known_full_flavor("Full Birria", None)


def test_full_flavor_lookup_with_prefixed_menu():
    menu = MenuSettings(full_flavors=("Full Beef",))
    assert is_known_full_flavor("Full Beef", menu)
