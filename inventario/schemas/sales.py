from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CustomerIn(BaseModel):
    name: Optional[str] = Field(None, alias="nombre")
    surname: Optional[str] = Field(None, alias="apellidos")
    document: Optional[str] = Field(None, alias="cedula")
    address: Optional[str] = Field(None, alias="direccion")

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class SaleLineItemIn(BaseModel):
    # Older clients send the product id as "id".
    product_id: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("productoId", "id", "product_id"),
    )
    quantity: Optional[int] = Field(None, alias="cantidad")
    unit_price: Optional[float] = Field(None, alias="precio")
    subtotal: Optional[float] = None

    model_config = ConfigDict(populate_by_name=True)


class SaleCreate(BaseModel):
    customer: Optional[CustomerIn] = Field(None, alias="cliente")
    line_items: Optional[List[SaleLineItemIn]] = Field(None, alias="detalles")
    total: Optional[float] = None
    sold_at: Optional[str] = Field(None, alias="fecha")

    model_config = ConfigDict(populate_by_name=True)


class SaleRead(BaseModel):
    id: int
    sold_at: Optional[str] = Field(None, alias="fecha")
    customer_name: Optional[str] = Field(None, alias="nombreCliente")
    customer_surname: Optional[str] = Field(None, alias="apellidosCliente")
    customer_document: Optional[str] = Field(None, alias="cedulaCliente")
    customer_address: Optional[str] = Field(None, alias="direccionCliente")
    total: Optional[float] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class SaleSummary(BaseModel):
    id: int
    customer: str = Field("", alias="cliente")
    total: Optional[float] = None
    sold_at: Optional[str] = Field(None, alias="fecha")

    model_config = ConfigDict(populate_by_name=True)


class SaleDetailLine(BaseModel):
    id: int
    sale_id: Optional[int] = Field(None, alias="ventaId")
    product_id: Optional[int] = Field(None, alias="productoId")
    sku: Optional[str] = None
    name: Optional[str] = Field(None, alias="nombre")
    product_name: Optional[str] = Field(None, alias="nombreProducto")
    unit_price: Optional[float] = Field(None, alias="precio")
    quantity: Optional[int] = Field(None, alias="cantidad")
    subtotal: Optional[float] = None

    model_config = ConfigDict(populate_by_name=True)


class SaleRegistered(BaseModel):
    message: str = Field("Venta registrada", alias="mensaje")
    sale_id: int = Field(alias="ventaId")

    model_config = ConfigDict(populate_by_name=True)
