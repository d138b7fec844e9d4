"""
Route plan committed domain event.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional
from uuid import UUID


@dataclass
class RoutePlanCommitted:
    """Event raised when a route plan has been written to the job store."""

    lead_tech_id: UUID
    assigned_count: int
    committed_at: datetime
    dates: List[date] = field(default_factory=list)
    assistant_tech_id: Optional[UUID] = None

    def to_log_fields(self) -> dict:
        return {
            "lead_tech_id": str(self.lead_tech_id),
            "assistant_tech_id": str(self.assistant_tech_id)
            if self.assistant_tech_id
            else None,
            "assigned_count": self.assigned_count,
            "first_date": self.dates[0].isoformat() if self.dates else None,
            "last_date": self.dates[-1].isoformat() if self.dates else None,
            "days": len(self.dates),
        }
