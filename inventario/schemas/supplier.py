from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SupplierCreate(BaseModel):
    name: Optional[str] = Field(None, alias="nombre")
    phone: Optional[str] = Field(None, alias="telefono")
    email: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class SupplierRead(SupplierCreate):
    id: int

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class PurchaseOrderCreate(BaseModel):
    product_id: Optional[int] = Field(None, alias="productoId")
    supplier_id: Optional[int] = Field(None, alias="proveedorId")
    quantity: Optional[int] = Field(None, alias="cantidad")
    purchase_price: Optional[float] = Field(None, alias="precioCompra")
    sale_price: Optional[float] = Field(None, alias="precioVenta")
    ordered_at: Optional[str] = Field(None, alias="fecha")

    model_config = ConfigDict(populate_by_name=True)


class PurchaseOrderDetail(BaseModel):
    id: int
    ordered_at: Optional[str] = Field(None, alias="fecha")
    product_name: Optional[str] = Field(None, alias="producto")
    supplier_name: Optional[str] = Field(None, alias="proveedor")
    quantity: Optional[int] = Field(None, alias="cantidad")
    purchase_price: Optional[float] = Field(None, alias="precioCompra")

    model_config = ConfigDict(populate_by_name=True)
