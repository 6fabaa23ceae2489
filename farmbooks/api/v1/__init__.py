from fastapi import APIRouter

from .endpoints import (
    auth,
    users,
    expenses,
    egg_production,
    egg_sales,
    feed_purchases,
    salaries,
    reports,
    health,
)

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/user", tags=["user"])
api_router.include_router(expenses.router, prefix="/expenses", tags=["expenses"])
api_router.include_router(egg_production.router, prefix="/egg-productions", tags=["egg-productions"])
api_router.include_router(egg_sales.router, prefix="/egg-sales", tags=["egg-sales"])
api_router.include_router(feed_purchases.router, prefix="/feed-purchase", tags=["feed-purchase"])
api_router.include_router(salaries.router, prefix="/salaries", tags=["salaries"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
api_router.include_router(health.router, prefix="/health", tags=["health"])
