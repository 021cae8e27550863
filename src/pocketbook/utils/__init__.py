"""Utility functions for pocketbook."""

from pocketbook.utils.date_parser import parse_date, parse_summary_date
from pocketbook.utils.amount_parser import (
    parse_amount,
    convert_amount_to_miliunits,
    convert_amount_from_miliunits,
)

__all__ = [
    "parse_date",
    "parse_summary_date",
    "parse_amount",
    "convert_amount_to_miliunits",
    "convert_amount_from_miliunits",
]
