from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import text
from sqlalchemy.orm import Session

from inventario.core.constants import MONTH_NAMES
from inventario.core.errors import store_errors
from inventario.schemas.dashboard import SubcategoryMonthRow

_CENTS = Decimal("0.01")

# Months and years come back zero-padded, so string order is calendar order.
# noinspection SqlNoDataSourceInspection
_SUBCATEGORY_MONTH_SQL = text(
    """
    SELECT
        p.subcategoria AS producto,
        strftime('%m', v.fecha) AS mes_num,
        strftime('%Y', v.fecha) AS anio,
        SUM(d.cantidad) AS ventas_totales,
        AVG(d.precio) AS precio_promedio_venta,
        AVG(p.precioCompra) AS precio_promedio_compra
    FROM ventas_detalles d
    JOIN productos p ON d.productoId = p.id
    JOIN ventas v ON d.ventaId = v.id
    GROUP BY p.subcategoria, mes_num, anio
    ORDER BY anio, mes_num
    """
)


def round_money(value):
    if value is None:
        return None
    return float(Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))


def month_label(month_number):
    """Spanish month name for "01".."12"; anything else has no label."""
    return MONTH_NAMES.get(month_number)


def build_report_row(row):
    units_sold = row.get("ventas_totales")
    avg_sale_price = row.get("precio_promedio_venta")
    avg_purchase_price = row.get("precio_promedio_compra")

    profit = None
    if None not in (units_sold, avg_sale_price, avg_purchase_price):
        unit_profit = avg_sale_price - avg_purchase_price
        profit = unit_profit * units_sold

    return SubcategoryMonthRow(
        subcategory=row.get("producto"),
        month=month_label(row.get("mes_num")),
        year=row.get("anio"),
        units_sold=units_sold,
        avg_sale_price=round_money(avg_sale_price),
        profit=round_money(profit),
    )


def subcategory_month_report(db: Session) -> list[SubcategoryMonthRow]:
    with store_errors("Error generando datos del dashboard"):
        rows = db.execute(_SUBCATEGORY_MONTH_SQL).mappings().all()
    return [build_report_row(row) for row in rows]
