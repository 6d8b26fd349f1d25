from fastapi import APIRouter

from .auth import auth_router
from .budgets import budget_router
from .currencies import currency_router
from .dashboard import dashboard_router
from .logistics import logistics_router
from .preferences import preferences_router
from .reports import report_router
from .transactions import transaction_router

router = APIRouter()

router.include_router(auth_router, tags=["Auth"])
router.include_router(budget_router, tags=["Budgets"])
router.include_router(transaction_router, tags=["Transactions"])
router.include_router(logistics_router, tags=["Logistics"])
router.include_router(currency_router, tags=["Currencies"])
router.include_router(dashboard_router, tags=["Dashboard"])
router.include_router(report_router, tags=["Reports"])
router.include_router(preferences_router, tags=["Settings"])
