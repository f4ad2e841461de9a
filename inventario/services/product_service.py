import logging
from typing import cast

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from inventario.core.errors import store_errors
from inventario.models.product import Product
from inventario.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


def create_product(db: Session, payload: ProductCreate) -> int:
    product = Product(**payload.model_dump())
    with store_errors("Error al crear producto", db):
        db.add(product)
        db.commit()
    return product.id


def list_products(db: Session) -> list[Product]:
    with store_errors("Error cargando productos"):
        products = db.execute(select(Product).order_by(Product.id)).scalars().all()
    return cast(list[Product], list(products))


def update_product(db: Session, product_id: int, payload: ProductUpdate) -> int:
    """Overwrite both prices and the stock; keys missing from the body become NULL.

    Returns the number of rows touched; zero is not an error.
    """
    values = payload.model_dump()
    with store_errors("Error al actualizar producto", db):
        result = db.execute(
            update(Product).where(Product.id == product_id).values(**values)
        )
        db.commit()
    return result.rowcount


def delete_product(db: Session, product_id: int) -> int:
    with store_errors("Error al eliminar producto", db):
        result = db.execute(delete(Product).where(Product.id == product_id))
        db.commit()
    logger.info("Deleted %s product row(s) for id %s", result.rowcount, product_id)
    return result.rowcount
