from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class SubcategoryMonthRow(BaseModel):
    subcategory: Optional[str] = Field(None, alias="producto")
    month: Optional[str] = Field(None, alias="mes")
    year: Optional[str] = Field(None, alias="anio")
    units_sold: Optional[int] = Field(None, alias="ventas")
    avg_sale_price: Optional[float] = Field(None, alias="precio")
    profit: Optional[float] = Field(None, alias="ingresos")

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_unknown_month(self, handler):
        # Month numbers outside the name table produce no "mes" key at all.
        data = handler(self)
        if self.month is None:
            data.pop("mes", None)
            data.pop("month", None)
        return data
