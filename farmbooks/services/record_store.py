"""Read-only aggregate queries the income statement is built from."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Sequence, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from farmbooks.domain.records.enums import ExpenseHead
from farmbooks.models.records import EggSale, Expense
from farmbooks.schemas.reporting import ReportPeriod
from farmbooks.services.common import apply_record_filters, to_decimal

HeadTotal = Tuple[ExpenseHead, Decimal]


class RecordStore(ABC):
    """Aggregates over revenue and expense records."""

    @abstractmethod
    def sum_revenue(self, period: ReportPeriod) -> Decimal:
        """
        Sum of egg sale amounts matching the period and farm.

        Returns:
            Total, 0 when nothing matches
        """
        pass

    @abstractmethod
    def sum_expenses_by_head(
        self, period: ReportPeriod, heads: Sequence[ExpenseHead]
    ) -> List[HeadTotal]:
        """
        Expense cost summed per head, restricted to ``heads``.

        Heads without matching records are absent from the result.
        """
        pass


class SqlRecordStore(RecordStore):
    """RecordStore backed by the SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def sum_revenue(self, period: ReportPeriod) -> Decimal:
        query = self.db.query(func.sum(EggSale.amount_received))
        query = apply_record_filters(
            query,
            EggSale,
            EggSale.sale_date,
            farm=period.farm,
            month=period.month,
            start_date=period.start_date,
            end_date=period.end_date,
        )
        return to_decimal(query.scalar())

    def sum_expenses_by_head(
        self, period: ReportPeriod, heads: Sequence[ExpenseHead]
    ) -> List[HeadTotal]:
        query = (
            self.db.query(
                Expense.head,
                func.sum(Expense.expense_cost).label("expense_cost"),
            )
            .filter(Expense.head.in_(list(heads)))
        )
        query = apply_record_filters(
            query,
            Expense,
            Expense.expense_date,
            farm=period.farm,
            month=period.month,
            start_date=period.start_date,
            end_date=period.end_date,
        )
        rows = query.group_by(Expense.head).all()
        return [(row.head, to_decimal(row.expense_cost)) for row in rows]
