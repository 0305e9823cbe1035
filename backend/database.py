from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from config import get_settings




engine = create_async_engine(get_settings().database_url)

new_session = async_sessionmaker(engine, expire_on_commit=False)


class Model(DeclarativeBase):
    pass


async def create_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Model.metadata.create_all)


async def delete_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Model.metadata.drop_all)


async def ping_database():
    """Return True when a trivial query succeeds"""
    async with engine.connect() as conn:
        await conn.exec_driver_sql("SELECT 1")
    return True
