"""In-memory fake repositories shared by the unit tests."""

import copy

import pytest

from app.application.interfaces import (
    AppSettingsRepository,
    AssemblyRecordRepository,
    EmployeeRepository,
    LocationRepository,
)
from app.domain.entities import AppSettings, AssemblyRecord, Employee, Location


class FakeEmployeeRepository(EmployeeRepository):
    def __init__(self):
        self._employees: dict[str, Employee] = {}

    async def get_by_id(self, employee_id: str) -> Employee | None:
        return self._employees.get(employee_id)

    async def get_all(self) -> list[Employee]:
        return list(self._employees.values())

    async def create(self, employee: Employee) -> Employee:
        self._employees[employee.id] = employee
        return employee

    async def update(self, employee: Employee) -> Employee:
        if employee.id not in self._employees:
            raise ValueError(f"Employee {employee.id} not found")
        self._employees[employee.id] = employee
        return employee

    async def delete(self, employee_id: str) -> bool:
        return self._employees.pop(employee_id, None) is not None


class FakeLocationRepository(LocationRepository):
    def __init__(self):
        self._locations: dict[str, Location] = {}

    async def get_by_id(self, location_id: str) -> Location | None:
        return self._locations.get(location_id)

    async def get_all(self) -> list[Location]:
        return list(self._locations.values())

    async def create(self, location: Location) -> Location:
        self._locations[location.id] = location
        return location

    async def update(self, location: Location) -> Location:
        if location.id not in self._locations:
            raise ValueError(f"Location {location.id} not found")
        self._locations[location.id] = location
        return location

    async def delete(self, location_id: str) -> bool:
        return self._locations.pop(location_id, None) is not None


class FakeAssemblyRecordRepository(AssemblyRecordRepository):
    """Rejects duplicate ids the way the primary key constraint would."""

    def __init__(self):
        self._records: dict[str, AssemblyRecord] = {}

    async def get_by_id(self, record_id: str) -> AssemblyRecord | None:
        return self._records.get(record_id)

    async def get_all(self, *, employee_id: str | None = None) -> list[AssemblyRecord]:
        return [
            r for r in self._records.values()
            if employee_id is None or r.employee_id == employee_id
        ]

    async def create(self, record: AssemblyRecord) -> AssemblyRecord:
        if record.id in self._records:
            raise ValueError(f"duplicate id {record.id}")
        self._records[record.id] = record
        return record

    async def create_many(self, records: list[AssemblyRecord]) -> list[AssemblyRecord]:
        staged = dict(self._records)
        for record in records:
            if record.id in staged:
                raise ValueError(f"duplicate id {record.id}")
            staged[record.id] = record
        self._records = staged
        return records

    async def update(self, record: AssemblyRecord) -> AssemblyRecord:
        if record.id not in self._records:
            raise ValueError(f"AssemblyRecord {record.id} not found")
        self._records[record.id] = record
        return record

    async def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None


class FakeAppSettingsRepository(AppSettingsRepository):
    """Stores a copy so callers cannot mutate the saved row in place."""

    def __init__(self):
        self._settings: AppSettings | None = None
        self.saves = 0

    async def get(self) -> AppSettings | None:
        return copy.copy(self._settings) if self._settings else None

    async def save(self, settings: AppSettings) -> AppSettings:
        self.saves += 1
        self._settings = copy.copy(settings)
        return copy.copy(settings)


@pytest.fixture
def employee_repo() -> FakeEmployeeRepository:
    return FakeEmployeeRepository()


@pytest.fixture
def location_repo() -> FakeLocationRepository:
    return FakeLocationRepository()


@pytest.fixture
def record_repo() -> FakeAssemblyRecordRepository:
    return FakeAssemblyRecordRepository()


@pytest.fixture
def settings_repo() -> FakeAppSettingsRepository:
    return FakeAppSettingsRepository()
