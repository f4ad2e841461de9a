from inventario.services.dashboard_service import subcategory_month_report
from inventario.services.product_service import (
    create_product,
    delete_product,
    list_products,
    update_product,
)
from inventario.services.sale_service import (
    list_sales,
    register_sale,
    sale_detail,
    sales_summary,
)
from inventario.services.supplier_service import (
    create_purchase_order,
    create_supplier,
    delete_supplier,
    list_suppliers,
    purchase_order_detail,
)

__all__ = [
    "create_product",
    "create_purchase_order",
    "create_supplier",
    "delete_product",
    "delete_supplier",
    "list_products",
    "list_sales",
    "list_suppliers",
    "purchase_order_detail",
    "register_sale",
    "sale_detail",
    "sales_summary",
    "subcategory_month_report",
    "update_product",
]
