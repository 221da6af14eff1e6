"""FastAPI routes for the admin pages."""

from gudang_admin.api.auth import router as auth_router
from gudang_admin.api.goods import router as goods_router
from gudang_admin.api.revenue import router as revenue_router
from gudang_admin.api.warehouses import router as warehouses_router

__all__ = ["auth_router", "goods_router", "revenue_router", "warehouses_router"]
