"""
Pagination Helpers

Lenient query parameter parsing and page arithmetic for list endpoints.
"""

import math
import re
from typing import Optional

# Leading integer, the way browsers' parseInt reads "3abc" as 3
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")

# Upper bound for page and page size; keeps (page - 1) * limit below 2**63
MAX_PAGE_VALUE = 2**31 - 1


def parse_positive_int(raw: Optional[str], default: int) -> int:
    """
    Parse a query parameter as a positive integer.

    Absent, non-numeric, non-positive and out-of-range values (above
    `MAX_PAGE_VALUE`) fall back to `default`; parsing never raises.

    Args:
        raw: Raw query string value
        default: Value used when parsing fails

    Returns:
        int: Parsed value or default
    """
    if raw is None:
        return default
    match = _INT_PREFIX.match(raw)
    if not match:
        return default
    digits = match.group(1).lstrip("+-").lstrip("0")
    # Avoids int() on arbitrarily long digit strings
    if len(digits) > len(str(MAX_PAGE_VALUE)):
        return default
    value = int(match.group(1))
    return value if 1 <= value <= MAX_PAGE_VALUE else default


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show `total` items, `limit` per page."""
    if limit <= 0:
        raise ValueError("limit must be positive")
    return math.ceil(total / limit)


def page_offset(page: int, limit: int) -> int:
    """Number of items skipped before `page` (1-based)."""
    return (page - 1) * limit
