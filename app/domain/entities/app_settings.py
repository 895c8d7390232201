"""Domain entity — the application-wide settings singleton."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

SINGLETON_ID = 1


@dataclass
class AppSettings:
    """Company name and the percentage deducted from item prices.

    Exactly one row exists; it is created on first boot and only ever
    updated in place.
    """

    company_name: str
    default_percentage: float
    id: int = SINGLETON_ID
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
