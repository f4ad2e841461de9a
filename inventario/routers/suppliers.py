from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventario.core.constants import API_PREFIX
from inventario.dependencies import get_db
from inventario.schemas.supplier import SupplierCreate, SupplierRead
from inventario.services.supplier_service import (
    create_supplier,
    delete_supplier,
    list_suppliers,
)

router = APIRouter(prefix=API_PREFIX, tags=["Proveedores"])


@router.post("/proveedores")
def create_supplier_endpoint(payload: SupplierCreate, db: Session = Depends(get_db)):
    supplier_id = create_supplier(db, payload)
    return {"success": True, "id": supplier_id}


@router.get("/proveedores", response_model=List[SupplierRead])
def list_suppliers_endpoint(db: Session = Depends(get_db)):
    return list_suppliers(db)


@router.delete("/proveedores/{supplier_id}")
def delete_supplier_endpoint(supplier_id: int, db: Session = Depends(get_db)):
    deleted = delete_supplier(db, supplier_id)
    return {"success": True, "deleted": deleted}


__all__ = ["router"]
