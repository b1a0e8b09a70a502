from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, estate_engine
from shared.core.log_config import setup_logging
from shared.helpers.exception_handler import setup_exception_handlers
from shared.wrappers.response_wrapper import JsonResponseMiddleware

from .models import parties, payments, properties, property_links, rent_agreements, requirements
from .router import (
    brokers_router,
    dashboard_router,
    owners_router,
    payments_router,
    properties_router,
    rent_agreements_router,
    requirements_router,
    tenants_router,
)

setup_logging()

app = FastAPI(title=settings.PROJECT_NAME)

# Create all tables
Base.metadata.create_all(bind=estate_engine)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(JsonResponseMiddleware)

setup_exception_handlers(app)

# Include routers
app.include_router(dashboard_router.router)
app.include_router(properties_router.router)
app.include_router(owners_router.router)
app.include_router(brokers_router.router)
app.include_router(tenants_router.router)
app.include_router(rent_agreements_router.router)
app.include_router(payments_router.router)
app.include_router(requirements_router.router)


@app.get("/health")
def health():
    return {"service": settings.PROJECT_NAME, "healthy": True}
