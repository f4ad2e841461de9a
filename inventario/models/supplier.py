from sqlalchemy import Column, Integer, String

from inventario.database.base import Base


class Supplier(Base):
    __tablename__ = "proveedores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column("nombre", String, nullable=False)
    phone = Column("telefono", String)
    email = Column(String)


__all__ = ["Supplier"]
