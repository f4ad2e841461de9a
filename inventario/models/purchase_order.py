from sqlalchemy import Column, Float, ForeignKey, Integer, String, text

from inventario.database.base import Base


class PurchaseOrder(Base):
    """Recorded purchase from a supplier. Does not move product stock."""

    __tablename__ = "pedidos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    ordered_at = Column("fecha", String, server_default=text("CURRENT_TIMESTAMP"))

    purchase_price = Column("precioCompra", Float)
    sale_price = Column("precioVenta", Float)

    product_id = Column("productoId", Integer, ForeignKey("productos.id"), nullable=False, index=True)
    supplier_id = Column("proveedorId", Integer, ForeignKey("proveedores.id"), nullable=False, index=True)
    quantity = Column("cantidad", Integer, nullable=False)


__all__ = ["PurchaseOrder"]
