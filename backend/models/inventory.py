from datetime import date, datetime
from sqlalchemy import DateTime, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column
from database import Model
from models.auth import utc_now




class InventoryItemOrm(Model):
    __tablename__ = "inventory"
    
    id: Mapped[int] = mapped_column(primary_key=True)
    item_name: Mapped[str] = mapped_column(nullable=False)
    category: Mapped[str] = mapped_column(nullable=False)  # uniforms, equipment, supplies, academic
    description: Mapped[str] = mapped_column(Text, nullable=True)
    quantity: Mapped[int] = mapped_column(nullable=False, default=0)
    min_quantity: Mapped[int] = mapped_column(nullable=True, default=10)
    max_quantity: Mapped[int] = mapped_column(nullable=True, default=100)
    unit_cost: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=True)
    location: Mapped[str] = mapped_column(nullable=True)
    campus: Mapped[str] = mapped_column(nullable=False)
    supplier: Mapped[str] = mapped_column(nullable=True)
    last_restocked: Mapped[date] = mapped_column(nullable=True)
    notes: Mapped[str] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now, onupdate=utc_now)
