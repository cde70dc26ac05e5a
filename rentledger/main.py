import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from rentledger.core.config import settings
from rentledger.core.database import SessionLocal
from rentledger.core.store import StoreError
from rentledger.api.routes.buildings import router as buildings_router
from rentledger.api.routes.units import router as units_router
from rentledger.api.routes.tenants import router as tenants_router
from rentledger.api.routes.bills import router as bills_router
from rentledger.api.routes.dashboard import router as dashboard_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# 1) Create the app FIRST
app = FastAPI(title="RentLedger Backend")

# 2) Add CORS Middleware BEFORE routes
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 3) Include routers AFTER app is created
app.include_router(buildings_router)
app.include_router(units_router)
app.include_router(tenants_router)
app.include_router(bills_router)
app.include_router(dashboard_router)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    # Nothing was written; the client shows this as a notification
    logger.error("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": str(exc)})


# 4) Health check endpoints
@app.get("/health")
def health():
    return {"ok": True, "service": "rentledger"}

@app.get("/db-health")
def db_health():
    db = SessionLocal()
    try:
        db.execute(text("select 1"))
        return {"ok": True, "db": "connected"}
    finally:
        db.close()
