"""
Menu data models for restaurant items and categories.
"""

from typing import Optional, List
from pydantic import BaseModel, Field


class MenuItemDraft(BaseModel):
    """Caller-supplied fields for a new or replaced menu item."""

    name: str = Field(..., min_length=1, description="Name of the menu item")
    price: float = Field(..., gt=0, description="Price in dollars")
    description: str = Field("", description="Detailed description of the item")


class MenuItem(MenuItemDraft):
    """Represents a single menu item."""

    id: int = Field(..., description="Identifier, unique within its category")

    def to_line(self) -> str:
        """One-line listing used by the console."""
        line = f"#{self.id} {self.name} - ${self.price:.2f}"
        if self.description:
            line += f": {self.description}"
        return line


class MenuCategory(BaseModel):
    """Represents a category of menu items."""

    id: int = Field(..., description="Unique identifier for the category")
    name: str = Field(..., description="Category name")
    items: List[MenuItem] = Field(default_factory=list, description="Items in this category")

    def find_item(self, item_id: int) -> Optional[MenuItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def next_item_id(self) -> int:
        """Next id for this category: the category's max item id plus one."""
        return max((item.id for item in self.items), default=0) + 1


class Menu(BaseModel):
    """The whole menu document."""

    categories: List[MenuCategory] = Field(
        default_factory=list,
        description="Menu categories in file order"
    )

    def get_category(self, category_id: int) -> Optional[MenuCategory]:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def find_item(self, item_id: int) -> Optional[MenuItem]:
        """
        Find an item by id across all categories.

        Item ids are only unique per category, so the first match in file
        order wins.
        """
        for category in self.categories:
            item = category.find_item(item_id)
            if item is not None:
                return item
        return None

    def to_summary(self) -> str:
        """Generate a text summary of the menu."""
        summary = ""
        for category in self.categories:
            summary += f"{category.name} (category #{category.id})\n"
            summary += "-" * len(category.name) + "\n"

            if not category.items:
                summary += "  No items\n"
            for item in category.items:
                summary += f"  {item.to_line()}\n"

            summary += "\n"

        return summary
