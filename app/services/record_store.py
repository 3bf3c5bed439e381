from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from threading import Lock
from typing import Any

from pydantic import ValidationError

from app.core.config import settings
from app.schemas.preset import Preset, PresetCreate

_LOG = logging.getLogger("app.store")


class RecordStoreError(RuntimeError):
    pass


class PresetNotFoundError(LookupError):
    def __init__(self, preset_id: int):
        super().__init__(f"preset {preset_id} not found")
        self.preset_id = preset_id


def _preset_id(item: dict[str, Any]) -> int:
    value = item.get("id")
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return 0


class JsonRecordStore:
    """Employees and presets kept in one JSON document on disk.

    Every read goes back to the file, so callers always get a fresh
    snapshot. Writes from this process are serialised; other processes
    writing the same file are not coordinated with.
    """

    def __init__(self, path: str | os.PathLike[str]):
        self.path = Path(path)
        self._lock = Lock()

    def load(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            _LOG.error("Cannot read data file %s: %s", self.path, exc)
            raise RecordStoreError(f"cannot read data file {self.path}") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            _LOG.error("Data file %s is not valid JSON: %s", self.path, exc)
            raise RecordStoreError(f"data file {self.path} is not valid JSON") from exc
        if not isinstance(data, dict):
            raise RecordStoreError(f"data file {self.path} must contain a JSON object")
        for key in ("employees", "presets"):
            rows = data.setdefault(key, [])
            if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
                _LOG.error("Data file %s: \"%s\" must be a list of objects", self.path, key)
                raise RecordStoreError(f"data file {self.path}: \"{key}\" must be a list of objects")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
        fd, tmp_name = tempfile.mkstemp(prefix=".data-", suffix=".json", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            _LOG.error("Cannot write data file %s: %s", self.path, exc)
            raise RecordStoreError(f"cannot write data file {self.path}") from exc

    def employees(self) -> list[dict[str, Any]]:
        return list(self.load()["employees"])

    def list_presets(self) -> list[Preset]:
        presets = []
        for item in self.load()["presets"]:
            try:
                presets.append(Preset.model_validate(item))
            except ValidationError as exc:
                _LOG.warning("Skipping malformed preset id=%r in %s: %s", item.get("id"), self.path, exc)
        return presets

    def create_preset(self, payload: PresetCreate) -> Preset:
        with self._lock:
            data = self.load()
            existing_ids = [_preset_id(item) for item in data["presets"]]
            new_id = max(existing_ids) + 1 if existing_ids else 1
            preset = Preset(id=new_id, **payload.model_dump())
            data["presets"].append(preset.model_dump(by_alias=True))
            self._write(data)
        _LOG.info("Preset created id=%s name=%s", preset.id, preset.name)
        return preset

    def set_default_preset(self, preset_id: int) -> None:
        with self._lock:
            data = self.load()
            if not any(item.get("id") == preset_id for item in data["presets"]):
                raise PresetNotFoundError(preset_id)
            for item in data["presets"]:
                item["isDefault"] = item.get("id") == preset_id
            self._write(data)
        _LOG.info("Preset id=%s set as default", preset_id)

    def delete_preset(self, preset_id: int) -> None:
        with self._lock:
            data = self.load()
            remaining = [item for item in data["presets"] if item.get("id") != preset_id]
            if len(remaining) == len(data["presets"]):
                raise PresetNotFoundError(preset_id)
            data["presets"] = remaining
            self._write(data)
        _LOG.info("Preset id=%s deleted", preset_id)


_cached_store: JsonRecordStore | None = None


def get_record_store() -> JsonRecordStore:
    global _cached_store
    if _cached_store is None:
        _cached_store = JsonRecordStore(settings.DATA_FILE_PATH)
    return _cached_store


def reset_record_store_for_tests() -> None:
    global _cached_store
    _cached_store = None
