"""HTTP client for the FurniTrack REST API.

One coroutine per endpoint. Request bodies are the same pydantic DTOs the
server validates, responses are parsed back into the ``*Response`` schemas.
Ids of new entities are generated here, so the caller knows them before
the server confirms the write.
"""

import logging
from typing import Any
from uuid import uuid4

import httpx
from pydantic import BaseModel

from app.application.schemas import (
    AppSettingsResponse,
    AppSettingsUpdate,
    AssemblyRecordCreate,
    AssemblyRecordResponse,
    AssemblyRecordUpdate,
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    LocationCreate,
    LocationResponse,
    LocationUpdate,
)

logger = logging.getLogger(__name__)

_NETWORK_ERROR_MESSAGE = "Could not reach the server. Please try again."


class ApiError(Exception):
    """Raised for any failed API call.

    ``status_code`` is ``None`` when no HTTP response was received.
    """

    def __init__(self, status_code: int | None, message: str):
        self.status_code = status_code
        self.message = message
        prefix = status_code if status_code is not None else "network"
        super().__init__(f"[{prefix}] {message}")


def _with_id(data: BaseModel) -> BaseModel:
    """Assign a fresh UUID unless the caller already chose one."""
    if getattr(data, "id", None):
        return data
    return data.model_copy(update={"id": str(uuid4())})


def _body(data: BaseModel) -> dict[str, Any]:
    return data.model_dump(mode="json", by_alias=True)


class ApiClient:
    """Async client over httpx.

    Pass ``http_client`` to share a connection pool or to inject a
    ``httpx.MockTransport`` in tests; otherwise a short-lived client is
    opened per call.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000/api",
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client
        self._timeout = timeout

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self._base_url}{path}"
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.request(method, url, json=json, params=params)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError(None, _NETWORK_ERROR_MESSAGE) from exc
        finally:
            if should_close:
                await client.aclose()

        if not response.is_success:
            self._raise_api_error(response)
        return response.json()

    @staticmethod
    def _raise_api_error(response: httpx.Response) -> None:
        """Raise ApiError using the server's ``error``/``message`` field."""
        try:
            data = response.json()
        except ValueError:
            data = None
        message = None
        if isinstance(data, dict):
            message = data.get("error") or data.get("message")
        message = message or response.text or f"HTTP {response.status_code}"

        raise ApiError(status_code=response.status_code, message=str(message))

    # ── Employees ────────────────────────────────────────────────────

    async def fetch_employees(self) -> list[EmployeeResponse]:
        data = await self._request("GET", "/employees")
        return [EmployeeResponse.model_validate(e) for e in data]

    async def add_employee(self, data: EmployeeCreate) -> EmployeeResponse:
        payload = _body(_with_id(data))
        return EmployeeResponse.model_validate(
            await self._request("POST", "/employees", json=payload)
        )

    async def update_employee(
        self, employee_id: str, data: EmployeeUpdate
    ) -> EmployeeResponse:
        return EmployeeResponse.model_validate(
            await self._request("PUT", f"/employees/{employee_id}", json=_body(data))
        )

    async def delete_employee(self, employee_id: str) -> str:
        data = await self._request("DELETE", f"/employees/{employee_id}")
        return data["message"]

    # ── Locations ────────────────────────────────────────────────────

    async def fetch_locations(self) -> list[LocationResponse]:
        data = await self._request("GET", "/locations")
        return [LocationResponse.model_validate(loc) for loc in data]

    async def add_location(self, data: LocationCreate) -> LocationResponse:
        payload = _body(_with_id(data))
        return LocationResponse.model_validate(
            await self._request("POST", "/locations", json=payload)
        )

    async def update_location(
        self, location_id: str, data: LocationUpdate
    ) -> LocationResponse:
        return LocationResponse.model_validate(
            await self._request("PUT", f"/locations/{location_id}", json=_body(data))
        )

    async def delete_location(self, location_id: str) -> str:
        data = await self._request("DELETE", f"/locations/{location_id}")
        return data["message"]

    # ── Assembly records ─────────────────────────────────────────────

    async def fetch_assembly_records(
        self, employee_id: str | None = None
    ) -> list[AssemblyRecordResponse]:
        params = {"employeeId": employee_id} if employee_id else None
        data = await self._request("GET", "/assembly-records", params=params)
        return [AssemblyRecordResponse.model_validate(r) for r in data]

    async def add_assembly_record(
        self, data: AssemblyRecordCreate
    ) -> AssemblyRecordResponse:
        payload = _body(_with_id(data))
        return AssemblyRecordResponse.model_validate(
            await self._request("POST", "/assembly-records", json=payload)
        )

    async def add_assembly_records(
        self, records: list[AssemblyRecordCreate]
    ) -> list[AssemblyRecordResponse]:
        """Create several records atomically through the batch endpoint."""
        payload = [_body(_with_id(r)) for r in records]
        data = await self._request("POST", "/assembly-records/batch", json=payload)
        return [AssemblyRecordResponse.model_validate(r) for r in data]

    async def update_assembly_record(
        self, record_id: str, data: AssemblyRecordUpdate
    ) -> AssemblyRecordResponse:
        return AssemblyRecordResponse.model_validate(
            await self._request(
                "PUT", f"/assembly-records/{record_id}", json=_body(data)
            )
        )

    async def delete_assembly_record(self, record_id: str) -> str:
        data = await self._request("DELETE", f"/assembly-records/{record_id}")
        return data["message"]

    # ── Settings ─────────────────────────────────────────────────────

    async def fetch_settings(self) -> AppSettingsResponse:
        return AppSettingsResponse.model_validate(
            await self._request("GET", "/settings")
        )

    async def update_settings(self, data: AppSettingsUpdate) -> AppSettingsResponse:
        return AppSettingsResponse.model_validate(
            await self._request("PUT", "/settings", json=_body(data))
        )
