"""
Data models for the order pricing engine.

Uses dataclasses for structured, type-safe data representation.
Records mirror the stored order/settings documents; the engine reads
them and never mutates them.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ProductCategory(Enum):
    """Pricing bucket an order line falls into."""
    MINI = "mini"
    FULL = "full"
    SALSA_SMALL = "salsa_small"
    SALSA_LARGE = "salsa_large"
    SALSA_UNSIZED = "salsa_unsized"
    UNCLASSIFIED = "unclassified"


class ApprovalStatus(str, Enum):
    PENDING = "Pending Approval"
    APPROVED = "Approved"
    DENIED = "Denied"


class FollowUpStatus(str, Enum):
    NEEDED = "Follow-up Needed"
    CONTACTED = "Contacted"
    COMPLETED = "Completed"


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"
    OVERDUE = "Overdue"


@dataclass(frozen=True)
class TraceStep:
    """A single step in the pricing resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class LineItem:
    """An order line. Category is encoded in the name text."""
    name: str
    quantity: Optional[int] = 0


@dataclass(frozen=True)
class PricingTier:
    """A package of `quantity` units sold for `price`."""
    quantity: int
    price: float


@dataclass(frozen=True)
class ProductPricing:
    """Base unit price and package tiers for one size class."""
    base_price: float
    tiers: tuple[PricingTier, ...] = ()


@dataclass(frozen=True)
class PricingSettings:
    """Complete price list used to total an order."""
    mini: ProductPricing
    full: ProductPricing
    salsa_small: float
    salsa_large: float

    def to_dict(self) -> dict:
        """Convert to the stored settings document layout."""
        return {
            "mini": _product_to_dict(self.mini),
            "full": _product_to_dict(self.full),
            "salsaSmall": self.salsa_small,
            "salsaLarge": self.salsa_large,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'PricingSettings':
        """Create from the stored settings document layout."""
        return cls(
            mini=_product_from_dict(data["mini"]),
            full=_product_from_dict(data["full"]),
            salsa_small=float(data["salsaSmall"]),
            salsa_large=float(data["salsaLarge"]),
        )


def _product_to_dict(product: ProductPricing) -> dict:
    return {
        "basePrice": product.base_price,
        "tiers": [{"quantity": t.quantity, "price": t.price} for t in product.tiers],
    }


def _product_from_dict(data: dict) -> ProductPricing:
    return ProductPricing(
        base_price=float(data["basePrice"]),
        tiers=tuple(
            PricingTier(quantity=int(t["quantity"]), price=float(t["price"]))
            for t in data.get("tiers") or []
        ),
    )


@dataclass(frozen=True)
class MenuSettings:
    """Known flavors, used to flag item names the classifier cannot place."""
    mini_flavors: tuple[str, ...] = ()
    full_flavors: tuple[str, ...] = ()


@dataclass(frozen=True)
class PackageSelection:
    """A package the customer picked, with the items it contains."""
    name: str
    items: tuple[LineItem, ...] = ()


@dataclass
class Order:
    """Read-only view of a stored order record."""
    id: str
    pickup_date: Optional[str]
    pickup_time: Optional[str]
    customer_name: str = ""
    items: list[LineItem] = field(default_factory=list)
    total_mini: int = 0
    total_full_size: int = 0
    amount_charged: float = 0.0
    delivery_fee: float = 0.0
    total_cost: Optional[float] = None
    follow_up_status: FollowUpStatus = FollowUpStatus.NEEDED
    payment_status: PaymentStatus = PaymentStatus.PENDING
    approval_status: ApprovalStatus = ApprovalStatus.PENDING
    packages: list[PackageSelection] = field(default_factory=list)


@dataclass
class Expense:
    """A fixed business expense (rent, supplies, labor)."""
    date: str  # YYYY-MM-DD
    amount: float
    category: str
    description: str = ""


@dataclass(frozen=True)
class PrepSettings:
    """Filling per flavor in pounds per 20 minis; full-size uses the multiplier."""
    lbs_per_20: dict[str, float] = field(default_factory=dict)
    full_size_multiplier: float = 2.0


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    hourly_wage: float = 0.0


@dataclass
class WorkShift:
    """A logged block of work; hours and pay are fixed when the shift is logged."""
    id: str
    employee_id: str
    employee_name: str
    date: str  # YYYY-MM-DD
    start_time: str  # HH:MM
    end_time: str
    hours: float = 0.0
    hourly_wage: float = 0.0
    total_pay: float = 0.0
    notes: str = ""


@dataclass
class OrderQuote:
    """Complete result of totaling an order."""
    total: float
    mini_quantity: int = 0
    full_quantity: int = 0
    small_salsa_quantity: int = 0
    large_salsa_quantity: int = 0
    mini_total: float = 0.0
    full_total: float = 0.0
    salsa_total: float = 0.0
    delivery_fee: float = 0.0
    warnings: list[str] = field(default_factory=list)
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the quote trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def add_warning(self, warning: str):
        """Add a warning, skipping duplicates."""
        if warning not in self.warnings:
            self.warnings.append(warning)

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)
