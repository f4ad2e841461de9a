from sqlalchemy import Column, Float, Integer, String

from inventario.database.base import Base


class Product(Base):
    __tablename__ = "productos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sku = Column(String)
    name = Column("nombre", String)
    category = Column("categoria", String)
    subcategory = Column("subcategoria", String)

    purchase_price = Column("precioCompra", Float)
    sale_price = Column("precioVenta", Float)
    # No floor: sales may push stock below zero.
    quantity = Column("cantidad", Integer)

    color = Column(String)
    brand = Column("marca", String)
    description = Column("descripcion", String)


__all__ = ["Product"]
