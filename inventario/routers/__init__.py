from inventario.routers.dashboard import router as dashboard_router
from inventario.routers.health import router as health_router
from inventario.routers.products import router as products_router
from inventario.routers.purchase_orders import router as purchase_orders_router
from inventario.routers.sales import router as sales_router
from inventario.routers.suppliers import router as suppliers_router

__all__ = [
    "dashboard_router",
    "health_router",
    "products_router",
    "purchase_orders_router",
    "sales_router",
    "suppliers_router",
]
