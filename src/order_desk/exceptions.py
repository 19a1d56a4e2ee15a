"""Package-level exceptions.

The pricing and scheduling functions never raise on malformed order data;
these cover configuration problems and rejected shift entries.
"""


class OrderDeskError(Exception):
    """Base class for all order desk errors."""


class SettingsError(OrderDeskError):
    """A settings file exists but could not be understood."""


class ShiftError(OrderDeskError):
    """A work shift cannot be logged because its times give no hours worked."""
