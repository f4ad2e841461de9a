from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventario.core.constants import API_PREFIX
from inventario.dependencies import get_db
from inventario.schemas.dashboard import SubcategoryMonthRow
from inventario.services.dashboard_service import subcategory_month_report

router = APIRouter(prefix=API_PREFIX, tags=["Dashboard"])


@router.get("/dashboard-subcategorias", response_model=List[SubcategoryMonthRow])
def subcategory_dashboard(db: Session = Depends(get_db)):
    return subcategory_month_report(db)


__all__ = ["router"]
