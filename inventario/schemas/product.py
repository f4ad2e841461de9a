from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductBase(BaseModel):
    sku: Optional[str] = None
    name: Optional[str] = Field(None, alias="nombre")
    category: Optional[str] = Field(None, alias="categoria")
    subcategory: Optional[str] = Field(None, alias="subcategoria")
    purchase_price: Optional[float] = Field(None, alias="precioCompra")
    sale_price: Optional[float] = Field(None, alias="precioVenta")
    quantity: Optional[int] = Field(None, alias="cantidad")
    color: Optional[str] = None
    brand: Optional[str] = Field(None, alias="marca")
    description: Optional[str] = Field(None, alias="descripcion")

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class ProductCreate(ProductBase):
    pass


class ProductRead(ProductBase):
    id: int

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class ProductUpdate(BaseModel):
    """Only prices and stock can change after creation."""

    purchase_price: Optional[float] = Field(None, alias="precioCompra")
    sale_price: Optional[float] = Field(None, alias="precioVenta")
    quantity: Optional[int] = Field(None, alias="cantidad")

    model_config = ConfigDict(populate_by_name=True)
