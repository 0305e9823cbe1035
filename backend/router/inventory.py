import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Query
from repositories.inventory import InventoryRepository
from schemas.base import Campus
from schemas.inventory import SInventoryItem, SInventoryItemCreate, SInventoryItemUpdate
from models.auth import StaffOrm
from utils.security import get_current_staff




logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/inventory",
    tags=["Inventory"]
)


@router.get("", response_model=list[SInventoryItem])
async def get_inventory(
    campus: Optional[Campus] = Query(None),
    category: Optional[str] = Query(None),
    low_stock: Optional[bool] = Query(None, alias="lowStock"),
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Inventory ordered by item name"""
    try:
        return await InventoryRepository.get_inventory(campus or current_staff.campus, category, low_stock)
    except Exception:
        logger.exception("Failed to fetch inventory")
        raise HTTPException(status_code=500, detail="Failed to fetch inventory")


@router.post("", response_model=SInventoryItem, status_code=201)
async def create_inventory_item(
    item_data: SInventoryItemCreate,
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Add an inventory item"""
    try:
        return await InventoryRepository.create_item(item_data, current_staff.campus)
    except Exception:
        logger.exception("Failed to create inventory item")
        raise HTTPException(status_code=500, detail="Failed to create inventory item")


@router.patch("/{item_id}", response_model=SInventoryItem)
async def update_inventory_item(
    item_id: int,
    item_data: SInventoryItemUpdate,
    current_staff: StaffOrm = Depends(get_current_staff)
):
    """Partial update of an inventory item"""
    try:
        item = await InventoryRepository.update_item(item_id, item_data)
    except Exception:
        logger.exception("Failed to update inventory item %s", item_id)
        raise HTTPException(status_code=500, detail="Failed to update inventory item")
    
    if not item:
        raise HTTPException(status_code=404, detail="Inventory item not found")
    return item
