from __future__ import annotations

import argparse
import json
import random
from datetime import date, timedelta
from pathlib import Path

from app.core.config import settings

FIRST_NAMES = [
    "Amy", "Bob", "Cid", "Dana", "Eli", "Fay", "Gus", "Hana", "Ivan", "Jill",
    "Kai", "Lena", "Milo", "Nora", "Omar", "Pia", "Quinn", "Rosa", "Sam", "Tara",
]
LAST_NAMES = [
    "Anders", "Brooks", "Chen", "Diaz", "Evans", "Fischer", "Garcia", "Hughes",
    "Ito", "Jensen", "Khan", "Lopez", "Meyer", "Novak", "Olsen", "Patel",
]
DEPARTMENTS = {
    "Engineering": ["Engineer", "Senior Engineer", "Staff Engineer", "Engineering Manager"],
    "Sales": ["Account Executive", "Sales Manager", "Sales Representative"],
    "Marketing": ["Marketing Specialist", "Content Lead", "Marketing Manager"],
    "Finance": ["Accountant", "Financial Analyst", "Controller"],
    "Support": ["Support Agent", "Support Lead"],
    "HR": ["Recruiter", "HR Partner"],
}
STATUSES = ["Active", "Active", "Active", "On Leave", "Inactive"]
CITIES = ["Austin", "Berlin", "Chicago", "Denver", "Lisbon", "London", "New York", "Seattle", "Toronto"]


def build_employees(count: int, seed: int) -> list[dict]:
    rng = random.Random(seed)
    start = date(2012, 1, 1)
    employees = []
    for index in range(1, count + 1):
        first = rng.choice(FIRST_NAMES)
        last = rng.choice(LAST_NAMES)
        department = rng.choice(sorted(DEPARTMENTS))
        employees.append(
            {
                "id": index,
                "firstName": first,
                "lastName": last,
                "email": f"{first}.{last}{index}@example.com".lower(),
                "department": department,
                "position": rng.choice(DEPARTMENTS[department]),
                "salary": rng.randrange(40_000, 180_001, 500),
                "age": rng.randint(21, 65),
                "status": rng.choice(STATUSES),
                "city": rng.choice(CITIES),
                "hireDate": (start + timedelta(days=rng.randint(0, 4800))).isoformat(),
                "performanceScore": round(rng.uniform(1.0, 5.0), 1),
            }
        )
    return employees


def write_data_file(path: Path, employees: list[dict]) -> None:
    path.write_text(json.dumps({"employees": employees, "presets": []}, indent=2), encoding="utf-8")


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a demo employee data file")
    parser.add_argument("--count", type=int, default=1000, help="Number of employees to generate")
    parser.add_argument("--seed", type=int, default=42, help="Random seed, same seed gives the same file")
    parser.add_argument("--path", default=settings.DATA_FILE_PATH, help="Output data file")
    args = parser.parse_args()

    employees = build_employees(max(args.count, 0), args.seed)
    write_data_file(Path(args.path), employees)
    print(f"employees seed done: count={len(employees)}, path={args.path}")


if __name__ == "__main__":
    main()
