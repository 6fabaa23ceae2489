"""Expense head to income-statement bucket mapping."""

from typing import Dict, Tuple

from .enums import ExpenseHead


# Cost of goods sold: direct production inputs.
COGS_FIELDS: Dict[ExpenseHead, str] = {
    ExpenseHead.CHICKEN: "chicken",
    ExpenseHead.FEED: "feed",
    ExpenseHead.MEDICINE: "medicine",
    ExpenseHead.VACCINE: "vaccine",
}

# Operating expenses: administrative and overhead.
OPEX_FIELDS: Dict[ExpenseHead, str] = {
    ExpenseHead.RENT: "rent",
    ExpenseHead.UTILITIES: "utilities",
    ExpenseHead.SALARIES_PAYMENTS: "salaries_payments",
    ExpenseHead.MESS: "mess",
    ExpenseHead.POWER_ELECTRIC: "power_electric",
    ExpenseHead.POL: "pol",
    ExpenseHead.PACKING_MATERIAL: "packing_material",
    ExpenseHead.REPAIR_MAINTENANCE: "repair_maintenance",
    ExpenseHead.OFFICE_EXPENSES: "office_expenses",
    ExpenseHead.MEETING_REFRESHMENT: "meeting_refreshment",
    ExpenseHead.TRAVELLING_LOGISTICS: "travelling_logistics",
    ExpenseHead.MISCELLANEOUS: "miscellaneous",
}

COGS_HEADS: Tuple[ExpenseHead, ...] = tuple(COGS_FIELDS)
OPEX_HEADS: Tuple[ExpenseHead, ...] = tuple(OPEX_FIELDS)

# Heads outside both buckets are left out of the income statement totals.
UNCATEGORIZED_HEADS: Tuple[ExpenseHead, ...] = tuple(
    head for head in ExpenseHead
    if head not in COGS_FIELDS and head not in OPEX_FIELDS
)
