"""
Table data models.
"""

from enum import Enum
from pydantic import BaseModel, Field


class TableStatus(str, Enum):
    """Table availability status."""
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    RESERVED = "reserved"
    MAINTENANCE = "maintenance"


class Table(BaseModel):
    """A dining table."""

    id: int = Field(..., description="Table number")
    capacity: int = Field(..., gt=0, description="Number of seats")
    status: TableStatus = Field(TableStatus.AVAILABLE, description="Current availability")

    @property
    def is_available(self) -> bool:
        return self.status == TableStatus.AVAILABLE

    def to_line(self) -> str:
        return f"Table #{self.id} - Capacity: {self.capacity} - Status: {self.status.value}"
