from inventario.models.product import Product
from inventario.models.purchase_order import PurchaseOrder
from inventario.models.sales import Sale, SaleLineItem
from inventario.models.supplier import Supplier

__all__ = [
    "Product",
    "PurchaseOrder",
    "Sale",
    "SaleLineItem",
    "Supplier",
]
