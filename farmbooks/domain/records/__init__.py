"""Farm records domain module."""

from .enums import (
    Farm,
    ExpenseHead,
    VoucherType,
    UserRole,
)
from .buckets import (
    COGS_FIELDS,
    OPEX_FIELDS,
    COGS_HEADS,
    OPEX_HEADS,
    UNCATEGORIZED_HEADS,
)

__all__ = [
    "Farm",
    "ExpenseHead",
    "VoucherType",
    "UserRole",
    "COGS_FIELDS",
    "OPEX_FIELDS",
    "COGS_HEADS",
    "OPEX_HEADS",
    "UNCATEGORIZED_HEADS",
]
