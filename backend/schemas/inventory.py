from pydantic import ConfigDict, Field, computed_field
from datetime import date, datetime
from typing import Optional
from schemas.base import SCamelModel, Campus




class SInventoryItemCreate(SCamelModel):
    item_name: str = Field(examples=["PT shirt (M)"])
    category: str = Field(examples=["uniforms", "equipment", "supplies", "academic"])
    description: Optional[str] = None
    quantity: int = Field(0, ge=0)
    min_quantity: int = Field(10, ge=0)
    max_quantity: int = Field(100, ge=0)
    unit_cost: Optional[float] = Field(None, ge=0)
    location: Optional[str] = None
    campus: Optional[Campus] = None
    supplier: Optional[str] = None
    last_restocked: Optional[date] = None
    notes: Optional[str] = None


class SInventoryItemUpdate(SCamelModel):
    item_name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0)
    min_quantity: Optional[int] = Field(None, ge=0)
    max_quantity: Optional[int] = Field(None, ge=0)
    unit_cost: Optional[float] = Field(None, ge=0)
    location: Optional[str] = None
    campus: Optional[Campus] = None
    supplier: Optional[str] = None
    last_restocked: Optional[date] = None
    notes: Optional[str] = None


class SInventoryItem(SInventoryItemCreate):
    id: int
    campus: str
    min_quantity: Optional[int] = None
    max_quantity: Optional[int] = None
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @computed_field(alias="lowStock")
    @property
    def low_stock(self) -> bool:
        return self.min_quantity is not None and self.quantity <= self.min_quantity

    @computed_field(alias="totalValue")
    @property
    def total_value(self) -> Optional[float]:
        if self.unit_cost is None:
            return None
        return round(self.quantity * self.unit_cost, 2)
