import logging
import uvicorn
from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from config import get_settings
from database import create_tables, delete_tables
from router.auth import router as auth_router
from router.dashboard import router as dashboard_router
from router.cadet import router as cadet_router
from router.application import router as application_router
from router.event import router as event_router
from router.mentorship import router as mentorship_router
from router.inventory import router as inventory_router
from router.health import router as health_router
from init_test_data import init_all_test_data




settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.reset_database:
        await delete_tables()
        logger.info("Database cleared")
    await create_tables()
    logger.info("Database ready")
    if settings.seed_test_data:
        await init_all_test_data()
    yield
    logger.info("Shutting down")


PUBLIC_PATHS = {
    ("/auth/login", "post"),
    ("/applications", "post"),
    ("/health", "get"),
}


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Cadet Admin API",
        version="1.0.0",
        description="Staff back-office for a residential youth academy",
        routes=app.routes,
    )
    openapi_schema.setdefault("components", {})["securitySchemes"] = {
        "Bearer": {
            "type": "http",
            "scheme": "bearer",
        }
    }
    
    for path, operations in openapi_schema["paths"].items():
        for method, operation in operations.items():
            if (path, method) not in PUBLIC_PATHS:
                operation["security"] = [{"Bearer": []}]
    
    app.openapi_schema = openapi_schema
    return app.openapi_schema


app = FastAPI(lifespan=lifespan)
app.openapi = custom_openapi

app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(cadet_router)
app.include_router(application_router)
app.include_router(event_router)
app.include_router(mentorship_router)
app.include_router(inventory_router)
app.include_router(health_router)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)



if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        reload=True,
        port=settings.port,
        host=settings.host
    )
