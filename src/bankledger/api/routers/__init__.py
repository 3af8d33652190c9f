"""API routers package."""

from bankledger.api.routers.accounts import router as accounts_router
from bankledger.api.routers.auth import router as auth_router
from bankledger.api.routers.transfers import router as transfers_router

__all__ = [
    "accounts_router",
    "auth_router",
    "transfers_router",
]
