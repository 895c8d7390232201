"""Domain entity — a job site where furniture gets assembled."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Location:
    """Core domain entity for a job location."""

    name: str
    address: str
    contact_person: str | None = None
    contact_info: str | None = None
    notes: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def replace_fields(
        self,
        *,
        name: str,
        address: str,
        contact_person: str | None,
        contact_info: str | None,
        notes: str | None,
    ) -> None:
        """Full-record replace of the mutable fields; refreshes updated_at."""
        self.name = name
        self.address = address
        self.contact_person = contact_person
        self.contact_info = contact_info
        self.notes = notes
        self.updated_at = datetime.now(timezone.utc)
