from fastapi import APIRouter
from app.api import records, presets

router = APIRouter()
router.include_router(records.router, prefix="/records", tags=["Records"])
router.include_router(presets.router, prefix="/presets", tags=["Presets"])
