from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import TypeAdapter, ValidationError

from app.core.config import settings
from app.schemas.employee import EMPLOYEE_FIELDS, FieldInfo
from app.schemas.query import Dir, FilterCondition, Logic, PageWindow, RecordQuery, SortSpec
from app.services.query_engine import run_query
from app.services.record_store import JsonRecordStore, RecordStoreError, get_record_store

router = APIRouter()

_FILTER_LIST = TypeAdapter(List[FilterCondition])


def _decode_filters(raw: Optional[str]) -> List[FilterCondition]:
    text = str(raw or "").strip()
    if not text:
        return []
    try:
        return _FILTER_LIST.validate_json(text)
    except ValidationError as exc:
        errors = "; ".join(f'{".".join(str(p) for p in e["loc"]) or "filters"}: {e["msg"]}' for e in exc.errors())
        raise HTTPException(status_code=400, detail=f"Malformed filters parameter: {errors}")


@router.get("")
def query_records(
    page: int = Query(0, ge=0),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
    sort_field: Optional[str] = Query(None, alias="sortField"),
    sort_order: Dir = Query("asc", alias="sortOrder"),
    filters: Optional[str] = Query(None),
    logic: Logic = Query("AND"),
    store: JsonRecordStore = Depends(get_record_store),
):
    query = RecordQuery(
        filters=_decode_filters(filters),
        logic=logic,
        sort=SortSpec(field=sort_field, dir=sort_order) if sort_field else None,
        window=PageWindow(page=page, size=limit),
    )
    try:
        records = store.employees()
    except RecordStoreError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    return run_query(records, query).model_dump(by_alias=True)


@router.get("/fields", response_model=List[FieldInfo])
def list_fields():
    return [FieldInfo(name=name, kind=kind) for name, kind in EMPLOYEE_FIELDS.items()]
