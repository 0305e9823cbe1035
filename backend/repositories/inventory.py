from typing import Optional
from database import new_session
from models.inventory import InventoryItemOrm
from schemas.inventory import SInventoryItemCreate, SInventoryItemUpdate
from sqlalchemy import select, update, and_




CLEARABLE_FIELDS = {"description", "unit_cost", "location", "supplier", "last_restocked", "notes"}


class InventoryRepository:
    @classmethod
    async def get_inventory(cls, campus: Optional[str] = None, category: Optional[str] = None, low_stock: Optional[bool] = None):
        """Inventory ordered by item name"""
        async with new_session() as session:
            conditions = []
            if campus:
                conditions.append(InventoryItemOrm.campus == campus)
            if category:
                conditions.append(InventoryItemOrm.category == category)
            if low_stock is True:
                conditions.append(InventoryItemOrm.quantity <= InventoryItemOrm.min_quantity)
            elif low_stock is False:
                conditions.append(InventoryItemOrm.quantity > InventoryItemOrm.min_quantity)
            
            query = select(InventoryItemOrm).order_by(InventoryItemOrm.item_name, InventoryItemOrm.id)
            if conditions:
                query = query.where(and_(*conditions))
            
            result = await session.execute(query)
            return result.scalars().all()
    
    
    @classmethod
    async def get_item_by_id(cls, item_id: int):
        """Get inventory item by ID"""
        async with new_session() as session:
            query = select(InventoryItemOrm).where(InventoryItemOrm.id == item_id)
            result = await session.execute(query)
            return result.scalars().first()
    
    
    @classmethod
    async def create_item(cls, item_data: SInventoryItemCreate, campus: str):
        """Add an inventory item"""
        async with new_session() as session:
            fields = item_data.model_dump()
            fields["campus"] = item_data.campus or campus
            item = InventoryItemOrm(**fields)
            session.add(item)
            await session.commit()
            await session.refresh(item)
            return item
    
    
    @classmethod
    async def update_item(cls, item_id: int, item_data: SInventoryItemUpdate):
        """Partial update, None if the item does not exist"""
        async with new_session() as session:
            update_data = {
                field: value
                for field, value in item_data.model_dump(exclude_unset=True).items()
                if value is not None or field in CLEARABLE_FIELDS
            }
            
            if update_data:
                stmt = (
                    update(InventoryItemOrm)
                    .where(InventoryItemOrm.id == item_id)
                    .values(**update_data)
                )
                result = await session.execute(stmt)
                await session.commit()
                if result.rowcount == 0:
                    return None
            
            return await cls.get_item_by_id(item_id)
