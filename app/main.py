import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.http_hardening import install_http_hardening
from app.core.log_setup import configure_logging
from app.api.router import router as api_router
from app.services.record_store import RecordStoreError, get_record_store

configure_logging(settings.LOG_LEVEL)
_LOG = logging.getLogger("app.startup")


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = get_record_store()
    try:
        employees = store.employees()
    except RecordStoreError:
        _LOG.error("Data file %s unavailable; record endpoints will answer 503 until it exists", store.path)
    else:
        _LOG.info("Loaded %s employees from %s", len(employees), store.path)
    yield


app = FastAPI(title=settings.APP_NAME, version="0.1.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
)
install_http_hardening(app)

app.include_router(api_router, prefix="/api")

@app.get("/", include_in_schema=False)
def landing():
    return JSONResponse({"service": settings.APP_NAME, "status": "ok"})

@app.get("/health")
def health():
    return {"status": "ok"}
