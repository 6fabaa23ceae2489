"""Reporting service for the farm income statement."""

from decimal import Decimal
from typing import Dict, Iterable, Mapping, Tuple

import structlog

from farmbooks.domain.records.buckets import (
    COGS_FIELDS,
    OPEX_FIELDS,
    COGS_HEADS,
    OPEX_HEADS,
)
from farmbooks.domain.records.enums import ExpenseHead
from farmbooks.schemas.reporting import (
    CogsBreakdown,
    IncomeStatement,
    OperatingExpenseBreakdown,
    ReportPeriod,
)
from farmbooks.services.common import ServiceResponse, to_decimal
from farmbooks.services.record_store import HeadTotal, RecordStore

logger = structlog.get_logger()

ZERO = Decimal("0")

# No other revenue sources are tracked yet
OTHER_INCOME = ZERO

PROFITABLE = "Profitable"
LOSS = "Loss"


def fold_head_totals(
    groups: Iterable[HeadTotal],
    field_map: Mapping[ExpenseHead, str],
) -> Tuple[Dict[str, Decimal], Decimal]:
    """
    Fold per-head sums into named bucket fields.

    Args:
        groups: (head, summed cost) pairs as returned by the store
        field_map: Head to subfield name mapping of one bucket

    Returns:
        Tuple of (subfield amounts, total). Every subfield is present and
        defaults to 0. The total accumulates the group sums as returned.
    """
    amounts = {field: ZERO for field in field_map.values()}
    total = ZERO

    for head, cost in groups:
        cost = to_decimal(cost)
        field = field_map.get(head)
        if field is not None:
            amounts[field] = cost
        total += cost

    return amounts, total


def build_income_statement(
    period: ReportPeriod,
    gross_revenue: Decimal,
    cogs_groups: Iterable[HeadTotal],
    opex_groups: Iterable[HeadTotal],
) -> IncomeStatement:
    """
    Derive the income statement from raw aggregates.

    Args:
        period: Reporting window, used for the label
        gross_revenue: Summed egg sale amounts
        cogs_groups: Per-head expense sums for the COGS heads
        opex_groups: Per-head expense sums for the operating expense heads

    Returns:
        Fully populated IncomeStatement
    """
    gross_revenue = to_decimal(gross_revenue)
    total_revenue = gross_revenue + OTHER_INCOME

    cogs_amounts, cogs_total = fold_head_totals(cogs_groups, COGS_FIELDS)
    opex_amounts, opex_total = fold_head_totals(opex_groups, OPEX_FIELDS)

    total_expenses = cogs_total + opex_total
    net_income = total_revenue - total_expenses

    return IncomeStatement(
        period=period.label(),
        gross_revenue=gross_revenue,
        other_income=OTHER_INCOME,
        total_revenue=total_revenue,
        cogs=CogsBreakdown(**cogs_amounts, total=cogs_total),
        operating_expenses=OperatingExpenseBreakdown(**opex_amounts, total=opex_total),
        total_expenses=total_expenses,
        net_income=net_income,
        note=PROFITABLE if net_income >= 0 else LOSS,
    )


def get_income_statement(
    store: RecordStore,
    period: ReportPeriod,
) -> ServiceResponse[IncomeStatement]:
    """
    Generate the income statement for a period and optional farm.

    Issues the revenue sum and the two grouped expense sums, then folds them.
    Any store failure yields a 500 response without data.

    Args:
        store: Aggregate query source
        period: Month token or date range, plus farm

    Returns:
        ServiceResponse carrying the IncomeStatement, or None on failure
    """
    try:
        gross_revenue = store.sum_revenue(period)
        cogs_groups = store.sum_expenses_by_head(period, COGS_HEADS)
        opex_groups = store.sum_expenses_by_head(period, OPEX_HEADS)

        statement = build_income_statement(
            period=period,
            gross_revenue=gross_revenue,
            cogs_groups=cogs_groups,
            opex_groups=opex_groups,
        )
    except Exception as e:
        logger.error(
            "income_statement_failed",
            period=period.label(),
            farm=period.farm.value if period.farm else None,
            error=str(e),
        )
        return ServiceResponse(
            status_code=500,
            message="Failed to generate income statement",
            data=None,
        )

    logger.info(
        "income_statement_generated",
        period=statement.period,
        farm=period.farm.value if period.farm else None,
        net_income=str(statement.net_income),
    )

    return ServiceResponse(
        status_code=200,
        message="Income statement generated",
        data=statement,
    )
