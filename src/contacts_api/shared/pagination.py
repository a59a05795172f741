"""
Offset pagination primitives shared by list endpoints.
"""

import math
from dataclasses import dataclass

from contacts_api.shared.exceptions import ValidationError

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

# Largest value a signed 64-bit SQL integer (LIMIT, OFFSET, primary keys) holds.
MAX_SQL_INT = 2**63 - 1
MIN_SQL_INT = -(2**63)


@dataclass(frozen=True)
class PageRequest:
    """A validated 1-indexed page request.

    ``page_size`` has no business upper bound; both it and the derived
    offset only have to fit the database's integer range.
    """

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if not 1 <= self.page <= MAX_SQL_INT:
            raise ValidationError(
                f"page must be a positive integer, got {self.page}",
                details={"field": "page", "value": self.page},
            )
        if not 1 <= self.page_size <= MAX_SQL_INT:
            raise ValidationError(
                f"pageSize must be a positive integer, got {self.page_size}",
                details={"field": "pageSize", "value": self.page_size},
            )
        if self.offset > MAX_SQL_INT:
            raise ValidationError(
                f"page {self.page} with pageSize {self.page_size} is out of range",
                details={"field": "page", "value": self.page},
            )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


def total_pages(total_items: int, page_size: int) -> int:
    """Number of pages needed to hold ``total_items`` at ``page_size`` per page."""
    if total_items <= 0:
        return 0
    return math.ceil(total_items / page_size)
