from .base import Base, TimestampMixin
from .user import User
from .records import (
    Expense,
    EggSale,
    EggProduction,
    FeedPurchase,
    Salary,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "Expense",
    "EggSale",
    "EggProduction",
    "FeedPurchase",
    "Salary",
]
