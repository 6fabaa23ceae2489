"""Farm record models."""

from .expense import Expense
from .egg_sale import EggSale
from .egg_production import EggProduction
from .feed_purchase import FeedPurchase
from .salary import Salary

__all__ = [
    "Expense",
    "EggSale",
    "EggProduction",
    "FeedPurchase",
    "Salary",
]
