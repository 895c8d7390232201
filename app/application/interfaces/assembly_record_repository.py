"""Abstract repository interface (port) for AssemblyRecord persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import AssemblyRecord


class AssemblyRecordRepository(ABC):
    """Port for assembly record persistence — implemented in the infrastructure layer.

    Implementations store ``items`` as a serialized blob and must hand
    back a list of ``AssemblyRecordItem`` on every read.
    """

    @abstractmethod
    async def get_by_id(self, record_id: str) -> AssemblyRecord | None:
        """Retrieve a single record by id."""
        ...

    @abstractmethod
    async def get_all(self, *, employee_id: str | None = None) -> list[AssemblyRecord]:
        """Retrieve all records, optionally only those of one employee."""
        ...

    @abstractmethod
    async def create(self, record: AssemblyRecord) -> AssemblyRecord:
        """Persist a new record and return it."""
        ...

    @abstractmethod
    async def create_many(self, records: list[AssemblyRecord]) -> list[AssemblyRecord]:
        """Persist all records atomically: either every row is stored or none."""
        ...

    @abstractmethod
    async def update(self, record: AssemblyRecord) -> AssemblyRecord:
        """Overwrite an existing record."""
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...
