from fastapi import APIRouter, Depends, HTTPException

from app.schemas.preset import PresetCreate
from app.services.record_store import (
    JsonRecordStore,
    PresetNotFoundError,
    RecordStoreError,
    get_record_store,
)

router = APIRouter()


def _store_unavailable(exc: RecordStoreError) -> HTTPException:
    return HTTPException(status_code=503, detail=str(exc))


@router.get("")
def list_presets(store: JsonRecordStore = Depends(get_record_store)):
    try:
        presets = store.list_presets()
    except RecordStoreError as exc:
        raise _store_unavailable(exc) from exc
    return [p.model_dump(by_alias=True) for p in presets]


@router.post("", status_code=201)
def create_preset(payload: PresetCreate, store: JsonRecordStore = Depends(get_record_store)):
    try:
        preset = store.create_preset(payload)
    except RecordStoreError as exc:
        raise _store_unavailable(exc) from exc
    return preset.model_dump(by_alias=True)


@router.put("/{preset_id}/default")
def set_default_preset(preset_id: int, store: JsonRecordStore = Depends(get_record_store)):
    try:
        store.set_default_preset(preset_id)
    except PresetNotFoundError:
        raise HTTPException(status_code=404, detail="Preset not found")
    except RecordStoreError as exc:
        raise _store_unavailable(exc) from exc
    return {"success": True}


@router.delete("/{preset_id}")
def delete_preset(preset_id: int, store: JsonRecordStore = Depends(get_record_store)):
    try:
        store.delete_preset(preset_id)
    except PresetNotFoundError:
        raise HTTPException(status_code=404, detail="Preset not found")
    except RecordStoreError as exc:
        raise _store_unavailable(exc) from exc
    return {"success": True}
