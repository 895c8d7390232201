"""Abstract repository interface (port) for Employee persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import Employee


class EmployeeRepository(ABC):
    """Port for employee persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, employee_id: str) -> Employee | None:
        """Retrieve a single employee by id."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Employee]:
        """Retrieve every employee."""
        ...

    @abstractmethod
    async def create(self, employee: Employee) -> Employee:
        """Persist a new employee and return it."""
        ...

    @abstractmethod
    async def update(self, employee: Employee) -> Employee:
        """Overwrite an existing employee."""
        ...

    @abstractmethod
    async def delete(self, employee_id: str) -> bool:
        """Delete an employee. Returns True if deleted, False if not found."""
        ...
