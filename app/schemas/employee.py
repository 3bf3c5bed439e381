from __future__ import annotations

from enum import Enum
from typing import Mapping

from pydantic import BaseModel


class FieldKind(str, Enum):
    TEXT = "text"
    NUMBER = "number"


class Employee(BaseModel):
    id: int
    firstName: str
    lastName: str
    email: str
    department: str
    position: str
    salary: float
    age: int
    status: str
    city: str
    hireDate: str
    performanceScore: float


# Every field a filter or sort may address. Names outside this table are
# treated as absent on every record.
EMPLOYEE_FIELDS: Mapping[str, FieldKind] = {
    "id": FieldKind.NUMBER,
    "firstName": FieldKind.TEXT,
    "lastName": FieldKind.TEXT,
    "email": FieldKind.TEXT,
    "department": FieldKind.TEXT,
    "position": FieldKind.TEXT,
    "salary": FieldKind.NUMBER,
    "age": FieldKind.NUMBER,
    "status": FieldKind.TEXT,
    "city": FieldKind.TEXT,
    "hireDate": FieldKind.TEXT,
    "performanceScore": FieldKind.NUMBER,
}


class FieldInfo(BaseModel):
    name: str
    kind: FieldKind
