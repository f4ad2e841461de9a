from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventario.core.constants import API_PREFIX
from inventario.dependencies import get_db
from inventario.schemas.sales import (
    SaleCreate,
    SaleDetailLine,
    SaleRead,
    SaleRegistered,
    SaleSummary,
)
from inventario.services.sale_service import (
    list_sales,
    register_sale,
    sale_detail,
    sales_summary,
)

router = APIRouter(prefix=API_PREFIX, tags=["Ventas"])


@router.post("/ventas", response_model=SaleRegistered)
def register_sale_endpoint(payload: SaleCreate, db: Session = Depends(get_db)):
    sale_id = register_sale(db, payload)
    return SaleRegistered(sale_id=sale_id)


@router.get("/ventas", response_model=List[SaleRead])
def list_sales_endpoint(db: Session = Depends(get_db)):
    return list_sales(db)


@router.get("/ventas-resumen", response_model=List[SaleSummary])
def sales_summary_endpoint(db: Session = Depends(get_db)):
    return sales_summary(db)


@router.get("/ventas-detalle/{sale_id}", response_model=List[SaleDetailLine])
def sale_detail_endpoint(sale_id: int, db: Session = Depends(get_db)):
    return sale_detail(db, sale_id)


__all__ = ["router"]
