"""
Centralized settings and path configuration for the order desk.
"""
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..engine.models import Employee, MenuSettings, PrepSettings, PricingSettings, ProductPricing
from ..exceptions import SettingsError

logger = logging.getLogger(__name__)

PRICING_FILE_ENV = "ORDER_DESK_PRICING_FILE"

MINI_EMPANADA_PRICE = 1.75
FULL_SIZE_EMPANADA_PRICE = 3.00
SALSA_SMALL_PRICE = 2.00
SALSA_LARGE_PRICE = 4.00
LABOR_WAGE = 15.00


def default_pricing() -> PricingSettings:
    """Price list used when no settings file is present."""
    return PricingSettings(
        mini=ProductPricing(base_price=MINI_EMPANADA_PRICE),
        full=ProductPricing(base_price=FULL_SIZE_EMPANADA_PRICE),
        salsa_small=SALSA_SMALL_PRICE,
        salsa_large=SALSA_LARGE_PRICE,
    )


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pricing_settings.json').exists() or (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


def settings_file_path(root: Path) -> Path:
    """The settings JSON in use: $ORDER_DESK_PRICING_FILE, else pricing_settings.json under root."""
    override = os.environ.get(PRICING_FILE_ENV)
    return Path(override) if override else root / 'pricing_settings.json'


def _flavor_names(entries) -> tuple[str, ...]:
    """Flavors are stored as plain names or {"name", "visible"} objects."""
    names = []
    for entry in entries or []:
        if isinstance(entry, dict):
            if entry.get("name"):
                names.append(str(entry["name"]))
        elif entry:
            names.append(str(entry))
    return tuple(names)


@dataclass(frozen=True)
class SettingsDocument:
    """Everything read from one settings JSON file."""
    pricing: PricingSettings = field(default_factory=default_pricing)
    menu: MenuSettings = field(default_factory=MenuSettings)
    prep: PrepSettings = field(default_factory=PrepSettings)
    labor_wage: float = LABOR_WAGE
    employees: tuple[Employee, ...] = ()


def _prep_settings(data: Optional[dict]) -> PrepSettings:
    if not data:
        return PrepSettings()
    lbs_per_20 = {str(k): float(v or 0) for k, v in (data.get("lbsPer20") or {}).items()}
    # an unset or zero multiplier falls back to the default
    multiplier = float(data.get("fullSizeMultiplier") or 0) or PrepSettings.full_size_multiplier
    return PrepSettings(lbs_per_20=lbs_per_20, full_size_multiplier=multiplier)


def _employees(entries) -> tuple[Employee, ...]:
    return tuple(
        Employee(id=str(e["id"]), name=str(e.get("name") or ""), hourly_wage=float(e.get("hourlyWage") or 0))
        for e in entries or []
    )


def load_settings_document(path: Path) -> SettingsDocument:
    """
    Read pricing, menu, prep and labor settings from a JSON settings document.

    Raises:
        SettingsError: The file is not valid JSON or has the wrong shape
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SettingsError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise SettingsError(f"Settings document {path} must be a JSON object")

    pricing = default_pricing()
    if data.get("pricing") is not None:
        try:
            pricing = PricingSettings.from_dict(data["pricing"])
        except (KeyError, TypeError, ValueError) as e:
            raise SettingsError(f"Invalid pricing section in {path}: {e!r}") from e

    menu = MenuSettings(
        mini_flavors=_flavor_names(data.get("empanadaFlavors")),
        full_flavors=_flavor_names(data.get("fullSizeEmpanadaFlavors")),
    )

    try:
        prep = _prep_settings(data.get("prepSettings"))
    except (AttributeError, TypeError, ValueError) as e:
        raise SettingsError(f"Invalid prepSettings section in {path}: {e!r}") from e

    try:
        wage = data.get("laborWage")
        labor_wage = LABOR_WAGE if wage is None else float(wage)
        employees = _employees(data.get("employees"))
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise SettingsError(f"Invalid labor settings in {path}: {e!r}") from e

    return SettingsDocument(pricing=pricing, menu=menu, prep=prep, labor_wage=labor_wage, employees=employees)


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path
    pricing_file: Path

    # Loaded documents
    pricing: PricingSettings = field(default_factory=default_pricing)
    menu: MenuSettings = field(default_factory=MenuSettings)
    prep: PrepSettings = field(default_factory=PrepSettings)
    labor_wage: float = LABOR_WAGE
    employees: tuple[Employee, ...] = ()

    @classmethod
    def load(cls, project_root: Optional[Path] = None) -> 'Settings':
        """Load settings from the project structure."""
        root = project_root or get_project_root()
        pricing_file = settings_file_path(root)

        if not pricing_file.exists():
            logger.warning("Pricing settings not found at %s; using default prices", pricing_file)
            return cls(project_root=root, pricing_file=pricing_file)

        doc = load_settings_document(pricing_file)
        return cls(
            project_root=root,
            pricing_file=pricing_file,
            pricing=doc.pricing,
            menu=doc.menu,
            prep=doc.prep,
            labor_wage=doc.labor_wage,
            employees=doc.employees,
        )

    def find_employee(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self.employees if e.id == employee_id), None)


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings():
    """Drop the cached settings so the next call reloads from disk."""
    global _settings
    _settings = None
