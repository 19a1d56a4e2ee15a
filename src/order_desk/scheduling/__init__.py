"""Scheduling subpackage - pickup date/time parsing, formatting and holidays."""
from .date_parser import (
    INVALID,
    InvalidInstant,
    NormalizedInstant,
    ValidInstant,
    instant_sort_key,
    is_within,
    parse_instant,
    parse_order_instant,
)

__all__ = [
    'INVALID', 'InvalidInstant', 'NormalizedInstant', 'ValidInstant',
    'instant_sort_key', 'is_within', 'parse_instant', 'parse_order_instant',
]
