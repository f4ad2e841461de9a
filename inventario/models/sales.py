from sqlalchemy import Column, Float, ForeignKey, Integer, String, text
from sqlalchemy.orm import relationship

from inventario.database.base import Base


class Sale(Base):
    __tablename__ = "ventas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Text so strftime() can group on it; same layout as CURRENT_TIMESTAMP.
    sold_at = Column("fecha", String, server_default=text("CURRENT_TIMESTAMP"))

    customer_name = Column("nombreCliente", String)
    customer_surname = Column("apellidosCliente", String)
    customer_document = Column("cedulaCliente", String)
    customer_address = Column("direccionCliente", String)

    total = Column(Float)

    line_items = relationship(
        "SaleLineItem",
        back_populates="sale",
        order_by="SaleLineItem.id",
    )


class SaleLineItem(Base):
    __tablename__ = "ventas_detalles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sale_id = Column("ventaId", Integer, ForeignKey("ventas.id"))
    product_id = Column("productoId", Integer, ForeignKey("productos.id"))

    product_name = Column("nombreProducto", String)
    unit_price = Column("precio", Float)
    quantity = Column("cantidad", Integer)
    subtotal = Column(Float)

    sale = relationship("Sale", back_populates="line_items")


__all__ = ["Sale", "SaleLineItem"]
