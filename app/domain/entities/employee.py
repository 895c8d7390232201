"""Domain entity — a person who assembles furniture."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import uuid4


@dataclass
class Employee:
    """Core domain entity for an assembly worker.

    Identity is normally assigned by the client before creation; the
    default factory only covers callers that omit it.
    """

    name: str
    position: str | None = None
    rate: float | None = None
    hire_date: date | None = None
    contact_info: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def replace_fields(
        self,
        *,
        name: str,
        position: str | None,
        rate: float | None,
        hire_date: date | None,
        contact_info: str | None,
    ) -> None:
        """Full-record replace of the mutable fields; refreshes updated_at."""
        self.name = name
        self.position = position
        self.rate = rate
        self.hire_date = hire_date
        self.contact_info = contact_info
        self.updated_at = datetime.now(timezone.utc)
