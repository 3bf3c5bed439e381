import json
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from app.main import app
from app.services.record_store import JsonRecordStore, get_record_store


EMPLOYEES = [
    {
        "id": 1, "firstName": "Bob", "lastName": "Brooks", "email": "bob@example.com",
        "department": "Sales", "position": "Sales Manager", "salary": 72000, "age": 30,
        "status": "Active", "city": "Berlin", "hireDate": "2019-04-01", "performanceScore": 3.9,
    },
    {
        "id": 2, "firstName": "Amy", "lastName": "Chen", "email": "amy@example.com",
        "department": "Engineering", "position": "Engineer", "salary": 95000, "age": 25,
        "status": "Active", "city": "Austin", "hireDate": "2021-09-15", "performanceScore": 4.6,
    },
    {
        "id": 3, "firstName": "Cid", "lastName": "Diaz", "email": "cid@example.com",
        "department": "Engineering", "position": "Staff Engineer", "salary": 150000, "age": 25,
        "status": "On Leave", "city": "Lisbon", "hireDate": "2015-02-20", "performanceScore": 4.1,
    },
    {
        "id": 4, "firstName": "Dana", "lastName": "Evans", "email": "dana@example.com",
        "department": "Finance", "position": "Controller", "salary": 120000, "age": 47,
        "status": "Inactive", "city": "London", "hireDate": "2012-06-11", "performanceScore": 3.2,
    },
]


class ApiTestBase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.data_path = Path(self._tmp.name) / "data.json"
        self.data_path.write_text(json.dumps({"employees": EMPLOYEES, "presets": []}), encoding="utf-8")
        self.store = JsonRecordStore(self.data_path)
        app.dependency_overrides[get_record_store] = lambda: self.store
        self.client = TestClient(app)

    def tearDown(self):
        self.client.close()
        app.dependency_overrides.clear()
        self._tmp.cleanup()

    def read_data_file(self) -> dict:
        return json.loads(self.data_path.read_text(encoding="utf-8"))
