from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventario.core.constants import API_PREFIX
from inventario.dependencies import get_db
from inventario.schemas.supplier import PurchaseOrderCreate, PurchaseOrderDetail
from inventario.services.supplier_service import (
    create_purchase_order,
    purchase_order_detail,
)

router = APIRouter(prefix=API_PREFIX, tags=["Pedidos"])


@router.post("/pedidos")
def create_purchase_order_endpoint(
    payload: PurchaseOrderCreate,
    db: Session = Depends(get_db),
):
    order_id = create_purchase_order(db, payload)
    return {"success": True, "id": order_id}


@router.get("/pedidos-detalle", response_model=List[PurchaseOrderDetail])
def purchase_order_detail_endpoint(db: Session = Depends(get_db)):
    return purchase_order_detail(db)


__all__ = ["router"]
