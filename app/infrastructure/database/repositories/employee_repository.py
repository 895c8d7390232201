"""Concrete repository implementation for Employee backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import EmployeeRepository
from app.domain.entities import Employee
from app.infrastructure.database.errors import storage_errors
from app.infrastructure.database.models import EmployeeModel


class SQLAlchemyEmployeeRepository(EmployeeRepository):
    """Implements the EmployeeRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: EmployeeModel) -> Employee:
        """Map ORM model → domain entity."""
        return Employee(
            id=model.id,
            name=model.name,
            position=model.position,
            rate=model.rate,
            hire_date=model.hire_date,
            contact_info=model.contact_info,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Employee) -> EmployeeModel:
        """Map domain entity → ORM model (for creation)."""
        return EmployeeModel(
            id=entity.id,
            name=entity.name,
            position=entity.position,
            rate=entity.rate,
            hire_date=entity.hire_date,
            contact_info=entity.contact_info,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, employee_id: str) -> Employee | None:
        result = await self._session.get(EmployeeModel, employee_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Employee]:
        stmt = select(EmployeeModel).order_by(EmployeeModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, employee: Employee) -> Employee:
        model = self._to_model(employee)
        with storage_errors("Insert employee"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def update(self, employee: Employee) -> Employee:
        model = await self._session.get(EmployeeModel, employee.id)
        if model is None:
            raise ValueError(f"Employee {employee.id} not found in database")
        model.name = employee.name
        model.position = employee.position
        model.rate = employee.rate
        model.hire_date = employee.hire_date
        model.contact_info = employee.contact_info
        model.updated_at = employee.updated_at
        with storage_errors("Update employee"):
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, employee_id: str) -> bool:
        model = await self._session.get(EmployeeModel, employee_id)
        if model is None:
            return False
        with storage_errors("Delete employee"):
            await self._session.delete(model)
            await self._session.flush()
        return True
