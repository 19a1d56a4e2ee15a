import sys
import os

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from order_desk.config import settings as settings_module
from order_desk.config.settings import Settings
from order_desk.engine.models import MenuSettings, PricingSettings, PricingTier, ProductPricing


@pytest.fixture
def pricing():
    """Mini 10-pack at $15 over a $1.75 base; full-size and salsas untiered."""
    return PricingSettings(
        mini=ProductPricing(base_price=1.75, tiers=(PricingTier(quantity=10, price=15.0),)),
        full=ProductPricing(base_price=3.0),
        salsa_small=2.0,
        salsa_large=4.0,
    )


@pytest.fixture
def menu():
    return MenuSettings(
        mini_flavors=("Beef", "Chicken", "Spinach"),
        full_flavors=("Beef", "Pulled Pork"),
    )


@pytest.fixture
def active_settings(tmp_path, pricing, menu):
    """Install known settings as the global instance for the test."""
    settings_module._settings = Settings(
        project_root=tmp_path,
        pricing_file=tmp_path / 'pricing_settings.json',
        pricing=pricing,
        menu=menu,
    )
    yield settings_module._settings
    settings_module.reset_settings()
