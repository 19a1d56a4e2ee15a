"""Tests for settings loading."""
import json

import pytest

from order_desk.config import settings as settings_module
from order_desk.config.settings import (
    PRICING_FILE_ENV,
    LABOR_WAGE,
    Settings,
    default_pricing,
    get_settings,
    load_settings_document,
)
from order_desk.engine.models import Employee, PrepSettings, PricingTier
from order_desk.exceptions import OrderDeskError, SettingsError


def write_json(path, data):
    path.write_text(json.dumps(data), encoding='utf-8')
    return path


def test_missing_file_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv(PRICING_FILE_ENV, raising=False)
    settings = Settings.load(tmp_path)

    assert settings.pricing == default_pricing()
    assert settings.pricing.mini.base_price == 1.75
    assert settings.pricing.full.base_price == 3.0
    assert settings.menu.mini_flavors == ()


def test_loads_pricing_and_menu(tmp_path, monkeypatch):
    monkeypatch.delenv(PRICING_FILE_ENV, raising=False)
    write_json(tmp_path / 'pricing_settings.json', {
        "pricing": {
            "mini": {"basePrice": 2, "tiers": [{"quantity": 12, "price": 20}]},
            "full": {"basePrice": 4.5},
            "salsaSmall": 2.5,
            "salsaLarge": 5,
        },
        "empanadaFlavors": ["Beef", {"name": "Chicken", "visible": False}, {"visible": True}],
        "fullSizeEmpanadaFlavors": [{"name": "Beef", "visible": True}],
    })

    settings = Settings.load(tmp_path)

    assert settings.pricing.mini.base_price == 2.0
    assert settings.pricing.mini.tiers == (PricingTier(quantity=12, price=20.0),)
    assert settings.pricing.full.tiers == ()
    assert settings.pricing.salsa_large == 5.0
    assert settings.menu.mini_flavors == ("Beef", "Chicken")
    assert settings.menu.full_flavors == ("Beef",)


def test_loads_prep_and_labor(tmp_path, monkeypatch):
    monkeypatch.delenv(PRICING_FILE_ENV, raising=False)
    write_json(tmp_path / 'pricing_settings.json', {
        "prepSettings": {"lbsPer20": {"Beef": 1.5, "Chicken": None}, "fullSizeMultiplier": 2.5},
        "laborWage": 17,
        "employees": [{"id": "e1", "name": "Ana", "hourlyWage": 18}, {"id": 2}],
    })

    settings = Settings.load(tmp_path)

    assert settings.prep == PrepSettings(lbs_per_20={"Beef": 1.5, "Chicken": 0.0}, full_size_multiplier=2.5)
    assert settings.labor_wage == 17.0
    assert settings.employees == (Employee("e1", "Ana", 18.0), Employee("2", "", 0.0))
    assert settings.find_employee("e1").hourly_wage == 18.0
    assert settings.find_employee("nobody") is None


def test_prep_and_labor_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv(PRICING_FILE_ENV, raising=False)
    write_json(tmp_path / 'pricing_settings.json', {"prepSettings": {"fullSizeMultiplier": 0}, "laborWage": None})

    settings = Settings.load(tmp_path)

    assert settings.prep.full_size_multiplier == 2.0
    assert settings.prep.lbs_per_20 == {}
    assert settings.labor_wage == LABOR_WAGE
    assert settings.employees == ()


def test_env_override(tmp_path, monkeypatch):
    custom = write_json(tmp_path / 'custom.json', {"empanadaFlavors": ["Corn"]})
    monkeypatch.setenv(PRICING_FILE_ENV, str(custom))

    settings = Settings.load(tmp_path)

    assert settings.pricing_file == custom
    assert settings.pricing == default_pricing()
    assert settings.menu.mini_flavors == ("Corn",)


def test_invalid_json_raises(tmp_path):
    path = tmp_path / 'pricing_settings.json'
    path.write_text("{not json", encoding='utf-8')
    with pytest.raises(SettingsError, match="Invalid JSON"):
        load_settings_document(path)


def test_wrong_shape_raises(tmp_path):
    path = write_json(tmp_path / 'pricing_settings.json', {"pricing": {"mini": {}}})
    with pytest.raises(SettingsError, match="Invalid pricing section"):
        load_settings_document(path)


def test_bad_prep_section_raises(tmp_path):
    path = write_json(tmp_path / 'pricing_settings.json', {"prepSettings": {"lbsPer20": {"Beef": "lots"}}})
    with pytest.raises(SettingsError, match="Invalid prepSettings"):
        load_settings_document(path)


def test_bad_employee_raises(tmp_path):
    path = write_json(tmp_path / 'pricing_settings.json', {"employees": [{"name": "No Id"}]})
    with pytest.raises(SettingsError, match="Invalid labor settings"):
        load_settings_document(path)


def test_non_object_document_raises(tmp_path):
    path = write_json(tmp_path / 'pricing_settings.json', [1, 2])
    with pytest.raises(OrderDeskError):
        load_settings_document(path)


def test_pricing_dict_round_trip():
    pricing = default_pricing()
    assert type(pricing).from_dict(pricing.to_dict()) == pricing


def test_get_settings_is_cached(active_settings):
    assert get_settings() is active_settings
    settings_module.reset_settings()
    assert settings_module._settings is None
