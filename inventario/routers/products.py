from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventario.core.constants import API_PREFIX
from inventario.core.errors import InternalStoreError
from inventario.dependencies import get_db
from inventario.schemas.product import ProductCreate, ProductRead, ProductUpdate
from inventario.services.product_service import (
    create_product,
    delete_product,
    list_products,
    update_product,
)

router = APIRouter(prefix=API_PREFIX, tags=["Productos"])


@router.post("/productos")
def create_product_endpoint(payload: ProductCreate, db: Session = Depends(get_db)):
    product_id = create_product(db, payload)
    return {"success": True, "id": product_id}


@router.get("/productos", response_model=List[ProductRead])
def list_products_endpoint(db: Session = Depends(get_db)):
    return list_products(db)


@router.put("/productos/{product_id}")
def update_product_endpoint(
    product_id: int,
    payload: ProductUpdate,
    db: Session = Depends(get_db),
):
    update_product(db, product_id, payload)
    return {"success": True}


@router.delete("/productos/{product_id}")
def delete_product_endpoint(product_id: int, db: Session = Depends(get_db)):
    deleted = delete_product(db, product_id)
    return {"success": True, "deleted": deleted}


@router.get("/inventario", response_model=List[ProductRead])
def inventory_endpoint(db: Session = Depends(get_db)):
    try:
        return list_products(db)
    except InternalStoreError as exc:
        raise InternalStoreError("Error cargando inventario") from exc


__all__ = ["router"]
