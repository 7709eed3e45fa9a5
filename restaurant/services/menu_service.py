"""
Menu management: categories and the items inside them.
"""

from typing import List, Optional, Union

from pydantic import ValidationError

from restaurant.errors import NotFoundError, PersistenceError, RestaurantError
from restaurant.models.menu import Menu, MenuCategory, MenuItem, MenuItemDraft
from restaurant.models.results import OperationResult
from restaurant.services.base import CollectionService, coerce_draft
from restaurant.storage.json_store import JsonStore
from monitoring.logger import get_logger

logger = get_logger(__name__)


class MenuService(CollectionService):
    """Reads and edits the menu document."""

    collection_name = "menu"

    def __init__(self, store: JsonStore):
        self.store = store

    def read_menu(self) -> Menu:
        """
        Parse the stored menu.

        Raises:
            PersistenceError: the file cannot be read or is malformed
        """
        return self._parse(Menu, self.store.load())

    def _write(self, menu: Menu) -> None:
        self.store.save(menu.model_dump(mode="json"))

    def load_menu(self) -> Optional[Menu]:
        """The whole menu document, or None if it cannot be read."""
        try:
            return self.read_menu()
        except PersistenceError as e:
            logger.error(f"Error reading menu: {e}", exc_info=True)
            return None

    def list_categories(self) -> List[MenuCategory]:
        """All categories in file order."""
        menu = self.load_menu()
        return menu.categories if menu else []

    def get_category(self, category_id: int) -> Optional[MenuCategory]:
        menu = self.load_menu()
        return menu.get_category(category_id) if menu else None

    def find_item_by_id(self, item_id: int) -> Optional[MenuItem]:
        """First item with this id across all categories, in file order."""
        menu = self.load_menu()
        return menu.find_item(item_id) if menu else None

    def add_item(self, category_id: int, draft: Union[MenuItemDraft, dict]) -> OperationResult:
        """
        Add an item to a category.

        The new id is the category's highest item id plus one, so two
        categories may hold items with the same id.

        Args:
            category_id: Category receiving the item
            draft: Name, price and description of the item

        Returns:
            Result carrying the created MenuItem
        """
        try:
            draft = coerce_draft(MenuItemDraft, draft)

            with self.store.lock:
                menu = self.read_menu()
                category = menu.get_category(category_id)
                if category is None:
                    raise NotFoundError(f"Menu category {category_id} does not exist")

                item = MenuItem(id=category.next_item_id(), **draft.model_dump())
                category.items.append(item)
                self._write(menu)

        except (RestaurantError, ValidationError) as e:
            return self._failure(e, "adding menu item")

        logger.info(
            f"Added menu item {item.id} to category {category_id}: {item.name}",
            extra={"category_id": category_id, "item_id": item.id}
        )
        return OperationResult.ok(item, f"Added {item.name} to {category.name}")

    def update_item(self, item_id: int, draft: Union[MenuItemDraft, dict]) -> OperationResult:
        """Replace every mutable field of an item, keeping its id."""
        try:
            draft = coerce_draft(MenuItemDraft, draft)

            with self.store.lock:
                menu = self.read_menu()
                updated = None
                for category in menu.categories:
                    for index, existing in enumerate(category.items):
                        if existing.id == item_id:
                            updated = MenuItem(id=item_id, **draft.model_dump())
                            category.items[index] = updated
                            break
                    if updated is not None:
                        break

                if updated is None:
                    raise NotFoundError(f"Menu item {item_id} does not exist")

                self._write(menu)

        except (RestaurantError, ValidationError) as e:
            return self._failure(e, "updating menu item")

        logger.info(f"Updated menu item {item_id}", extra={"item_id": item_id})
        return OperationResult.ok(updated, f"Menu item {item_id} updated")

    def delete_item(self, item_id: int) -> OperationResult:
        """Remove the first item with this id."""
        try:
            with self.store.lock:
                menu = self.read_menu()
                removed = None
                for category in menu.categories:
                    item = category.find_item(item_id)
                    if item is not None:
                        category.items.remove(item)
                        removed = item
                        break

                if removed is None:
                    raise NotFoundError(f"Menu item {item_id} does not exist")

                self._write(menu)

        except RestaurantError as e:
            return self._failure(e, "deleting menu item")

        logger.info(f"Deleted menu item {item_id}: {removed.name}", extra={"item_id": item_id})
        return OperationResult.ok(removed, f"Menu item {item_id} deleted")
