"""SQLAlchemy ORM model for the Employee entity."""

from datetime import date

from sqlalchemy import Date, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base, TimestampMixin


class EmployeeModel(Base, TimestampMixin):
    """ORM model — maps to the 'employees' table."""

    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[str | None] = mapped_column(String(255), nullable=True)
    rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    hire_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    contact_info: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<EmployeeModel(id={self.id}, name='{self.name}')>"
