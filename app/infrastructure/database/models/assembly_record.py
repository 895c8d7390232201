"""SQLAlchemy ORM model for the AssemblyRecord entity."""

import datetime as dt

from sqlalchemy import Date, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base, TimestampMixin


class AssemblyRecordModel(Base, TimestampMixin):
    """ORM model — maps to the 'assembly_records' table.

    ``items`` holds the JSON-serialized line items. ``employee_id`` and
    ``location_id`` carry no foreign-key constraint: deleting an employee
    or location leaves its records in place.
    """

    __tablename__ = "assembly_records"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    employee_id: Mapped[str] = mapped_column(String(64), nullable=False)
    location_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    items: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    __table_args__ = (
        Index("ix_assembly_records_employee", "employee_id"),
        Index("ix_assembly_records_date", "date"),
    )

    def __repr__(self) -> str:
        return (
            f"<AssemblyRecordModel(id={self.id}, "
            f"employee='{self.employee_id}', date={self.date})>"
        )
