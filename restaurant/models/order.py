"""
Order data models for managing table orders.
"""

from typing import Optional, List, Dict, Any
from enum import Enum
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(str, Enum):
    """Order status types."""
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    SERVED = "served"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        """Completed and cancelled orders release their table."""
        return self in (OrderStatus.COMPLETED, OrderStatus.CANCELLED)


class OrderLine(BaseModel):
    """Represents a single item in an order."""

    model_config = ConfigDict(populate_by_name=True)

    menu_item_id: int = Field(..., alias="menuItemId", description="ID of the menu item")
    quantity: int = Field(..., gt=0, description="Quantity ordered")


class OrderDraft(BaseModel):
    """Caller-supplied fields for a new order."""

    model_config = ConfigDict(populate_by_name=True)

    table_id: int = Field(..., alias="tableId", description="Table the order is served to")
    items: List[OrderLine] = Field(default_factory=list, description="Items in the order")
    notes: str = Field("", description="Additional order notes")


class Order(OrderDraft):
    """Represents a persisted order."""

    id: int = Field(..., description="Sequential order number")
    status: OrderStatus = Field(OrderStatus.PENDING, description="Current order status")
    timestamp: datetime = Field(default_factory=utc_now, description="Creation instant")
    last_updated: Optional[datetime] = Field(
        None,
        alias="lastUpdated",
        description="Instant of the last status change"
    )

    def to_summary(self) -> str:
        """Generate a short text summary of the order."""
        summary = f"Order #{self.id} - {self.timestamp.isoformat()}\n"
        summary += f"Status: {self.status.value}\n"
        summary += f"Table: {self.table_id}\n"

        if not self.items:
            summary += "No items in order\n"
            return summary

        summary += "Items:\n"
        for line in self.items:
            summary += f"- {line.quantity}x menu item #{line.menu_item_id}\n"

        if self.notes:
            summary += f"Notes: {self.notes}\n"

        return summary

    def to_dict(self) -> Dict[str, Any]:
        """Convert order to the dictionary stored on disk."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
