"""Store actions.

Each action awaits the API and returns a reducer ``AppState -> AppState``
that the store applies to whatever state is current when the response
arrives. Nothing is changed before the server confirms.
"""

import asyncio
from collections.abc import Callable
from dataclasses import replace

from app.application.schemas import (
    AppSettingsUpdate,
    AssemblyRecordCreate,
    AssemblyRecordUpdate,
    EmployeeCreate,
    EmployeeUpdate,
    LocationCreate,
    LocationUpdate,
)
from app.client.api_client import ApiClient
from app.client.state import AppState

Reducer = Callable[[AppState], AppState]


def _replace_by_id(items: tuple, updated) -> tuple:
    return tuple(updated if item.id == updated.id else item for item in items)


def _without_id(items: tuple, entity_id: str) -> tuple:
    return tuple(item for item in items if item.id != entity_id)


async def load_all(api: ApiClient) -> Reducer:
    """Fetch employees, records and locations together; install all three or none."""
    employees, records, locations = await asyncio.gather(
        api.fetch_employees(),
        api.fetch_assembly_records(),
        api.fetch_locations(),
    )

    def reducer(state: AppState) -> AppState:
        return replace(
            state,
            employees=tuple(employees),
            assembly_records=tuple(records),
            locations=tuple(locations),
        )

    return reducer


async def load_settings(api: ApiClient) -> Reducer:
    settings = await api.fetch_settings()
    return lambda state: replace(state, settings=settings)


async def update_settings(api: ApiClient, data: AppSettingsUpdate) -> Reducer:
    settings = await api.update_settings(data)
    return lambda state: replace(state, settings=settings)


# ── Employees ────────────────────────────────────────────────────────


async def add_employee(api: ApiClient, data: EmployeeCreate) -> Reducer:
    employee = await api.add_employee(data)
    return lambda state: replace(state, employees=state.employees + (employee,))


async def update_employee(api: ApiClient, employee_id: str, data: EmployeeUpdate) -> Reducer:
    employee = await api.update_employee(employee_id, data)
    return lambda state: replace(state, employees=_replace_by_id(state.employees, employee))


async def delete_employee(api: ApiClient, employee_id: str) -> Reducer:
    await api.delete_employee(employee_id)
    return lambda state: replace(state, employees=_without_id(state.employees, employee_id))


# ── Locations ────────────────────────────────────────────────────────


async def add_location(api: ApiClient, data: LocationCreate) -> Reducer:
    location = await api.add_location(data)
    return lambda state: replace(state, locations=state.locations + (location,))


async def update_location(api: ApiClient, location_id: str, data: LocationUpdate) -> Reducer:
    location = await api.update_location(location_id, data)
    return lambda state: replace(state, locations=_replace_by_id(state.locations, location))


async def delete_location(api: ApiClient, location_id: str) -> Reducer:
    await api.delete_location(location_id)
    return lambda state: replace(state, locations=_without_id(state.locations, location_id))


# ── Assembly records ─────────────────────────────────────────────────


async def add_assembly_record(api: ApiClient, data: AssemblyRecordCreate) -> Reducer:
    record = await api.add_assembly_record(data)
    return lambda state: replace(
        state, assembly_records=state.assembly_records + (record,)
    )


async def add_assembly_records(
    api: ApiClient, records: list[AssemblyRecordCreate]
) -> Reducer:
    """Batch variant: either every record is appended or none is."""
    created = await api.add_assembly_records(records)
    return lambda state: replace(
        state, assembly_records=state.assembly_records + tuple(created)
    )


async def update_assembly_record(
    api: ApiClient, record_id: str, data: AssemblyRecordUpdate
) -> Reducer:
    record = await api.update_assembly_record(record_id, data)
    return lambda state: replace(
        state, assembly_records=_replace_by_id(state.assembly_records, record)
    )


async def delete_assembly_record(api: ApiClient, record_id: str) -> Reducer:
    await api.delete_assembly_record(record_id)
    return lambda state: replace(
        state, assembly_records=_without_id(state.assembly_records, record_id)
    )
