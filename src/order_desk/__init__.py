"""
Order Desk Package

Pricing and scheduling utilities for a small empanada order business.
Totals orders with package tier pricing and normalizes pickup date/time
strings into comparable instants for filtering, calendars and reports.
"""

__version__ = "1.0.0"
