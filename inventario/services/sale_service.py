import logging
from typing import cast

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from inventario.core.dates import normalize_timestamp
from inventario.core.errors import InvalidRequest, store_errors
from inventario.models.product import Product
from inventario.models.sales import Sale, SaleLineItem
from inventario.schemas.sales import SaleCreate, SaleDetailLine, SaleSummary

logger = logging.getLogger(__name__)

INCOMPLETE_SALE_MESSAGE = "Datos incompletos"


def validate_sale(payload: SaleCreate) -> None:
    if payload.customer is None or not payload.line_items:
        raise InvalidRequest(INCOMPLETE_SALE_MESSAGE)


def register_sale(db: Session, payload: SaleCreate) -> int:
    """Insert the sale header, its line items and decrement stock.

    Everything runs in one transaction: a store failure part way through the
    line items rolls the whole sale back. Stock is allowed to go negative.
    """
    validate_sale(payload)
    customer = payload.customer

    with store_errors("Error interno al registrar venta", db):
        sale = Sale(
            sold_at=normalize_timestamp(payload.sold_at),
            customer_name=customer.name,
            customer_surname=customer.surname,
            customer_document=customer.document,
            customer_address=customer.address,
            total=payload.total,
        )
        db.add(sale)
        db.flush()

        for item in payload.line_items:
            product_name = db.execute(
                select(Product.name).where(Product.id == item.product_id)
            ).scalar_one_or_none()
            db.add(
                SaleLineItem(
                    sale_id=sale.id,
                    product_id=item.product_id,
                    product_name=product_name,
                    unit_price=item.unit_price,
                    quantity=item.quantity,
                    subtotal=item.subtotal,
                )
            )
            db.flush()
            db.execute(
                update(Product)
                .where(Product.id == item.product_id)
                .values(quantity=Product.quantity - item.quantity)
                .execution_options(synchronize_session=False)
            )

        db.commit()

    logger.info(
        "Registered sale %s with %d line item(s)",
        sale.id,
        len(payload.line_items),
        extra={"sale_id": sale.id, "line_items": len(payload.line_items)},
    )
    return sale.id


def list_sales(db: Session) -> list[Sale]:
    with store_errors("Error al obtener ventas"):
        sales = db.execute(select(Sale).order_by(Sale.id.desc())).scalars().all()
    return cast(list[Sale], list(sales))


def _display_name(name, surname):
    return "{} {}".format(name or "", surname or "").strip()


def sales_summary(db: Session) -> list[SaleSummary]:
    stmt = select(
        Sale.id.label("id"),
        Sale.customer_name.label("customer_name"),
        Sale.customer_surname.label("customer_surname"),
        Sale.total.label("total"),
        Sale.sold_at.label("sold_at"),
    ).order_by(Sale.id.desc())
    with store_errors("Error al obtener resumen de ventas"):
        rows = db.execute(stmt).all()
    return [
        SaleSummary(
            id=row.id,
            customer=_display_name(row.customer_name, row.customer_surname),
            total=row.total,
            sold_at=row.sold_at,
        )
        for row in rows
    ]


def sale_detail(db: Session, sale_id: int) -> list[SaleDetailLine]:
    # Outer join: lines keep their snapshot name after a product is deleted.
    stmt = (
        select(SaleLineItem, Product.sku, Product.name)
        .outerjoin(Product, Product.id == SaleLineItem.product_id)
        .where(SaleLineItem.sale_id == sale_id)
        .order_by(SaleLineItem.id)
    )
    with store_errors("Error al obtener detalle de venta"):
        rows = db.execute(stmt).all()

    results = []
    for line, sku, name in rows:
        results.append(
            SaleDetailLine(
                id=line.id,
                sale_id=line.sale_id,
                product_id=line.product_id,
                sku=sku,
                name=name,
                product_name=line.product_name,
                unit_price=line.unit_price,
                quantity=line.quantity,
                subtotal=line.subtotal,
            )
        )
    return results
