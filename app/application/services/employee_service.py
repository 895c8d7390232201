"""Application service (use case) for Employee operations."""

import logging

from app.application.interfaces import AssemblyRecordRepository, EmployeeRepository
from app.application.schemas import EmployeeCreate, EmployeeUpdate
from app.domain.entities import Employee
from app.domain.exceptions import EntityNotFoundError
from app.domain.pricing import EmployeeAggregate, aggregate_by_employee

logger = logging.getLogger(__name__)


class EmployeeService:
    """Orchestrates employee CRUD logic. Depends on the repository ports (DI)."""

    def __init__(
        self,
        repository: EmployeeRepository,
        record_repository: AssemblyRecordRepository,
    ):
        self._repository = repository
        self._record_repository = record_repository

    async def get_employee(self, employee_id: str) -> Employee:
        employee = await self._repository.get_by_id(employee_id)
        if employee is None:
            raise EntityNotFoundError("Employee", employee_id)
        return employee

    async def list_employees(self) -> list[Employee]:
        return await self._repository.get_all()

    async def create_employee(self, data: EmployeeCreate) -> Employee:
        employee = Employee(
            name=data.name,
            position=data.position,
            rate=data.rate,
            hire_date=data.hire_date,
            contact_info=data.contact_info,
        )
        if data.id:
            employee.id = data.id
        created = await self._repository.create(employee)
        logger.info("Employee created: %s", created.id)
        return created

    async def update_employee(self, employee_id: str, data: EmployeeUpdate) -> Employee:
        employee = await self.get_employee(employee_id)
        employee.replace_fields(
            name=data.name,
            position=data.position,
            rate=data.rate,
            hire_date=data.hire_date,
            contact_info=data.contact_info,
        )
        updated = await self._repository.update(employee)
        logger.info("Employee updated: %s", employee_id)
        return updated

    async def delete_employee(self, employee_id: str) -> bool:
        """Delete an employee. Their assembly records are left untouched."""
        deleted = await self._repository.delete(employee_id)
        if not deleted:
            raise EntityNotFoundError("Employee", employee_id)
        logger.info("Employee deleted: %s", employee_id)
        return deleted

    async def summarize_employee(self, employee_id: str) -> EmployeeAggregate:
        """Total earnings and units over every record of one employee."""
        await self.get_employee(employee_id)
        records = await self._record_repository.get_all(employee_id=employee_id)
        return aggregate_by_employee(records, employee_id)
