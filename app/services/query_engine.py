"""Filter / sort / paginate pipeline over an in-memory record snapshot.

Every function here is pure: records are read through the field schema,
never mutated, and the caller's list is left untouched. Callers pass a
point-in-time copy of the data, so a query never observes a live view.
"""

from __future__ import annotations

import logging
import math
import re
from functools import cmp_to_key
from typing import Any, Callable, Mapping, Sequence

from app.schemas.employee import EMPLOYEE_FIELDS, FieldKind
from app.schemas.query import FilterCondition, QueryResult, RecordQuery, SortSpec

_LOG = logging.getLogger("app.query")

FieldSchema = Mapping[str, FieldKind]


def _field_value(record: Mapping[str, Any], field: str, fields: FieldSchema) -> Any:
    if field not in fields:
        return None
    return record.get(field)


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX_RE = re.compile(r"0([xXoObB])([0-9A-Za-z]+)")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}
_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def _to_number(value: Any) -> float:
    """Decimal text, 0x/0o/0b integers and signed ``Infinity``; anything else is NaN."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    if not text:
        return 0.0
    if text in _INFINITIES:
        return _INFINITIES[text]
    radix = _RADIX_RE.fullmatch(text)
    if radix is not None:
        try:
            return float(int(radix.group(2), _RADIX_BASES[radix.group(1).lower()]))
        except ValueError:
            return math.nan
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    return math.nan


_TEXT_TESTS: dict[str, Callable[[str, str], bool]] = {
    "equals": lambda left, right: left == right,
    "contains": lambda left, right: right in left,
    "startsWith": lambda left, right: left.startswith(right),
    "endsWith": lambda left, right: left.endswith(right),
}

# NaN on either side makes all of these false.
_NUMBER_TESTS: dict[str, Callable[[float, float], bool]] = {
    ">": lambda left, right: left > right,
    "<": lambda left, right: left < right,
    ">=": lambda left, right: left >= right,
    "<=": lambda left, right: left <= right,
}


def evaluate_condition(
    record: Mapping[str, Any],
    condition: FilterCondition,
    fields: FieldSchema = EMPLOYEE_FIELDS,
) -> bool:
    value = _field_value(record, condition.field, fields)
    if value is None:
        return False
    text_test = _TEXT_TESTS.get(condition.operator)
    if text_test is not None:
        return text_test(_to_text(value).lower(), _to_text(condition.value).lower())
    number_test = _NUMBER_TESTS.get(condition.operator)
    if number_test is not None:
        return number_test(_to_number(value), _to_number(condition.value))
    return False


def matches_filter_set(
    record: Mapping[str, Any],
    conditions: Sequence[FilterCondition],
    logic: str = "AND",
    fields: FieldSchema = EMPLOYEE_FIELDS,
) -> bool:
    results = [evaluate_condition(record, condition, fields) for condition in conditions]
    if logic == "OR":
        return any(results)
    return all(results)


def apply_filters(
    records: Sequence[Mapping[str, Any]],
    conditions: Sequence[FilterCondition],
    logic: str = "AND",
    fields: FieldSchema = EMPLOYEE_FIELDS,
) -> list[Mapping[str, Any]]:
    # No conditions means no filtering, not a vacuous AND/OR.
    if not conditions:
        return list(records)
    return [record for record in records if matches_filter_set(record, conditions, logic, fields)]


def _sort_key(value: Any, kind: FieldKind | None) -> tuple | None:
    """Ascending sort key, or None for a missing value."""
    if value is None or kind is None:
        return None
    if kind is FieldKind.NUMBER:
        number = _to_number(value)
        return None if math.isnan(number) else (number,)
    text = _to_text(value)
    # Lowercase ahead of uppercase when the letters tie.
    return (text.casefold(), text.swapcase())


def compare_records(
    left: Mapping[str, Any],
    right: Mapping[str, Any],
    sort: SortSpec,
    fields: FieldSchema = EMPLOYEE_FIELDS,
) -> int:
    """Three-way comparison of two records on one field.

    The branch is chosen by the field's declared kind. Missing values sort
    before every present value in ascending order; two missing values tie.
    """
    kind = fields.get(sort.field)
    left_key = _sort_key(_field_value(left, sort.field, fields), kind)
    right_key = _sort_key(_field_value(right, sort.field, fields), kind)
    if left_key is None or right_key is None:
        comparison = (left_key is not None) - (right_key is not None)
    else:
        comparison = (left_key > right_key) - (left_key < right_key)
    return -comparison if sort.dir == "desc" else comparison


def apply_sort(
    records: Sequence[Mapping[str, Any]],
    sort: SortSpec | None,
    fields: FieldSchema = EMPLOYEE_FIELDS,
) -> list[Mapping[str, Any]]:
    if sort is None or not sort.field:
        return list(records)
    # sorted() is stable, so ties keep their input order in both directions.
    return sorted(records, key=cmp_to_key(lambda a, b: compare_records(a, b, sort, fields)))


def paginate(records: Sequence[Mapping[str, Any]], page: int, size: int) -> QueryResult:
    total = len(records)
    if page < 0 or size < 1:
        return QueryResult(data=[], total=total, has_more=False)
    start = page * size
    end = start + size
    return QueryResult(data=[dict(r) for r in records[start:end]], total=total, has_more=end < total)


def run_query(
    records: Sequence[Mapping[str, Any]],
    query: RecordQuery,
    fields: FieldSchema = EMPLOYEE_FIELDS,
) -> QueryResult:
    matched = apply_filters(records, query.filters, query.logic, fields)
    ordered = apply_sort(matched, query.sort, fields)
    result = paginate(ordered, query.window.page, query.window.size)
    _LOG.debug(
        "query filters=%s logic=%s sort=%s matched=%s page=%s size=%s returned=%s",
        len(query.filters),
        query.logic,
        query.sort.field if query.sort else None,
        result.total,
        query.window.page,
        query.window.size,
        len(result.data),
    )
    return result
