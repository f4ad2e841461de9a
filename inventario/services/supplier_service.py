import logging
from typing import cast

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from inventario.core.dates import normalize_timestamp
from inventario.core.errors import InvalidRequest, NotFound, store_errors
from inventario.models.product import Product
from inventario.models.purchase_order import PurchaseOrder
from inventario.models.supplier import Supplier
from inventario.schemas.supplier import (
    PurchaseOrderCreate,
    PurchaseOrderDetail,
    SupplierCreate,
)

logger = logging.getLogger(__name__)


def create_supplier(db: Session, payload: SupplierCreate) -> int:
    name = (payload.name or "").strip()
    if not name:
        raise InvalidRequest("El nombre del proveedor es obligatorio")

    supplier = Supplier(name=name, phone=payload.phone, email=payload.email)
    with store_errors("Error al crear proveedor", db):
        db.add(supplier)
        db.commit()
    return supplier.id


def list_suppliers(db: Session) -> list[Supplier]:
    with store_errors("Error al obtener proveedores"):
        suppliers = db.execute(select(Supplier).order_by(Supplier.id)).scalars().all()
    return cast(list[Supplier], list(suppliers))


def delete_supplier(db: Session, supplier_id: int) -> int:
    """Unlike products, deleting a missing supplier is reported as NotFound."""
    with store_errors("Error al eliminar proveedor", db):
        result = db.execute(delete(Supplier).where(Supplier.id == supplier_id))
        db.commit()
    if result.rowcount == 0:
        raise NotFound("Proveedor no encontrado")
    logger.info("Deleted supplier %s", supplier_id)
    return result.rowcount


def create_purchase_order(db: Session, payload: PurchaseOrderCreate) -> int:
    if not payload.product_id or not payload.supplier_id or not payload.quantity:
        raise InvalidRequest("Datos incompletos")

    order = PurchaseOrder(
        ordered_at=normalize_timestamp(payload.ordered_at),
        purchase_price=payload.purchase_price,
        sale_price=payload.sale_price,
        product_id=payload.product_id,
        supplier_id=payload.supplier_id,
        quantity=payload.quantity,
    )
    # Stock is not touched here; only sales move product quantity.
    with store_errors("Error al registrar pedido", db):
        db.add(order)
        db.commit()
    logger.info(
        "Recorded purchase order %s: product %s x%s from supplier %s",
        order.id,
        order.product_id,
        order.quantity,
        order.supplier_id,
    )
    return order.id


def purchase_order_detail(db: Session) -> list[PurchaseOrderDetail]:
    stmt = (
        select(
            PurchaseOrder.id.label("id"),
            PurchaseOrder.ordered_at.label("ordered_at"),
            Product.name.label("product_name"),
            Supplier.name.label("supplier_name"),
            PurchaseOrder.quantity.label("quantity"),
            PurchaseOrder.purchase_price.label("purchase_price"),
        )
        .outerjoin(Product, Product.id == PurchaseOrder.product_id)
        .outerjoin(Supplier, Supplier.id == PurchaseOrder.supplier_id)
        .order_by(PurchaseOrder.id.desc())
    )
    with store_errors("Error al obtener pedidos"):
        rows = db.execute(stmt).mappings().all()
    return [PurchaseOrderDetail(**row) for row in rows]
