import logging
from datetime import date, datetime, timedelta
from database import new_session
from models.auth import StaffOrm
from models.cadet import CadetOrm
from models.event import EventOrm
from models.inventory import InventoryItemOrm
from sqlalchemy import select




logger = logging.getLogger(__name__)


async def init_staff():
    """Demo staff accounts, one per campus"""
    async with new_session() as session:
        existing_staff = await session.execute(select(StaffOrm))
        if existing_staff.scalars().first():
            return
        
        staff = [
            StaffOrm(subject="demo-oahu", email="oahu@example.org", first_name="Kainoa", last_name="Akana", role="admin", campus="oahu"),
            StaffOrm(subject="demo-hilo", email="hilo@example.org", first_name="Leilani", last_name="Kahale", role="instructor", campus="hilo"),
        ]
        
        session.add_all(staff)
        await session.commit()


async def init_cadets():
    """Demo cadets across both campuses"""
    async with new_session() as session:
        existing_cadets = await session.execute(select(CadetOrm))
        if existing_cadets.scalars().first():
            return
        
        start = date.today() - timedelta(weeks=8)
        cadets = [
            CadetOrm(
                first_name="Makoa", last_name="Kealoha", date_of_birth=date(2008, 3, 14),
                emergency_contact_name="Noelani Kealoha", emergency_contact_phone="808-555-0101",
                emergency_contact_relation="Mother", campus="oahu", class_number=61, start_date=start,
                academic_progress=72, fitness_progress=85, leadership_progress=64, service_hours=18,
            ),
            CadetOrm(
                first_name="Iolana", last_name="Palakiko", date_of_birth=date(2007, 11, 2),
                emergency_contact_name="Keoni Palakiko", emergency_contact_phone="808-555-0102",
                emergency_contact_relation="Father", campus="oahu", class_number=61, start_date=start,
                academic_progress=88, fitness_progress=70, leadership_progress=81, service_hours=42,
            ),
            CadetOrm(
                first_name="Kekoa", last_name="Mahoe", date_of_birth=date(2008, 6, 21),
                emergency_contact_name="Pua Mahoe", emergency_contact_phone="808-555-0103",
                emergency_contact_relation="Grandmother", campus="hilo", class_number=61, start_date=start,
                academic_progress=55, fitness_progress=62, leadership_progress=47, service_hours=9,
            ),
        ]
        
        session.add_all(cadets)
        await session.commit()


async def init_events():
    """Demo events for the current week"""
    async with new_session() as session:
        existing_events = await session.execute(select(EventOrm))
        if existing_events.scalars().first():
            return
        
        staff = (await session.execute(select(StaffOrm).where(StaffOrm.campus == "oahu"))).scalars().first()
        morning = datetime.combine(date.today(), datetime.min.time()).replace(hour=8)
        events = [
            EventOrm(
                title="Morning PT", event_type="training", start_time=morning,
                end_time=morning + timedelta(hours=1), location="Field", campus="oahu",
                is_required=True, created_by=staff.id,
            ),
            EventOrm(
                title="Beach cleanup", event_type="community_service", start_time=morning + timedelta(days=2),
                end_time=morning + timedelta(days=2, hours=3), location="Kailua Beach", campus="oahu",
                max_participants=40, created_by=staff.id,
            ),
        ]
        
        session.add_all(events)
        await session.commit()


async def init_inventory():
    """Demo inventory, one item below its minimum"""
    async with new_session() as session:
        existing_items = await session.execute(select(InventoryItemOrm))
        if existing_items.scalars().first():
            return
        
        items = [
            InventoryItemOrm(item_name="Duty uniform", category="uniforms", quantity=120, min_quantity=50, unit_cost=45.5, campus="oahu"),
            InventoryItemOrm(item_name="PT shoes", category="equipment", quantity=8, min_quantity=20, unit_cost=60, campus="oahu"),
            InventoryItemOrm(item_name="Notebooks", category="academic", quantity=300, campus="hilo"),
        ]
        
        session.add_all(items)
        await session.commit()


async def init_all_test_data():
    """Seed demo data into an empty database"""
    await init_staff()
    await init_cadets()
    await init_events()
    await init_inventory()
    logger.info("Test data created")
