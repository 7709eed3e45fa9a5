"""
Order management: orders reference tables and menu items.

Moving an order to a terminal status (completed or cancelled) releases
its table in the same locked operation. Operations touching both
collections take the orders lock before the tables lock.
"""

from typing import Dict, List, Optional, Union

from pydantic import ValidationError

from restaurant.errors import InvalidInputError, NotFoundError, PersistenceError, RestaurantError
from restaurant.models.order import Order, OrderDraft, OrderLine, OrderStatus, utc_now
from restaurant.models.results import OperationResult
from restaurant.models.table import Table, TableStatus
from restaurant.services.base import CollectionService, coerce_draft, next_id
from restaurant.services.menu_service import MenuService
from restaurant.services.table_service import TableService
from restaurant.storage.json_store import JsonStore
from monitoring.logger import get_logger

logger = get_logger(__name__)


def parse_order_status(status: Union[OrderStatus, str]) -> OrderStatus:
    try:
        return OrderStatus(status)
    except ValueError:
        options = ", ".join(s.value for s in OrderStatus)
        raise InvalidInputError(f"Invalid order status '{status}'. Available options: {options}")


def _find_table(tables: List[Table], table_id: int) -> Optional[Table]:
    return next((t for t in tables if t.id == table_id), None)


def merge_lines(lines: List[OrderLine]) -> List[OrderLine]:
    """Combine lines for the same menu item, summing quantities in first-seen order."""
    merged: Dict[int, OrderLine] = {}
    for line in lines:
        if line.menu_item_id in merged:
            merged[line.menu_item_id].quantity += line.quantity
        else:
            merged[line.menu_item_id] = line.model_copy()
    return list(merged.values())


class OrderService(CollectionService):
    """Reads and edits the orders document."""

    collection_name = "orders"

    def __init__(
        self,
        store: JsonStore,
        tables: TableService,
        menu: Optional[MenuService] = None,
    ):
        """
        Args:
            store: Orders document store
            tables: Service owning the tables referenced by orders
            menu: Service used to price orders (optional)
        """
        self.store = store
        self.tables = tables
        self.menu = menu

    def _read(self) -> List[Order]:
        return self._parse_list(Order, self.store.load())

    def _write(self, orders: List[Order]) -> None:
        self.store.save([order.to_dict() for order in orders])

    def _check_menu_items(self, lines: List[OrderLine]) -> None:
        """Raise NotFoundError for any line whose menu item does not exist."""
        if self.menu is None or not lines:
            return

        menu = self.menu.read_menu()
        missing = [line.menu_item_id for line in lines if menu.find_item(line.menu_item_id) is None]
        if missing:
            ids = ", ".join(str(item_id) for item_id in missing)
            raise NotFoundError(f"Menu item(s) {ids} do not exist")

    def list_orders(self) -> List[Order]:
        try:
            return self._read()
        except PersistenceError as e:
            logger.error(f"Error reading orders: {e}", exc_info=True)
            return []

    def find_by_id(self, order_id: int) -> Optional[Order]:
        for order in self.list_orders():
            if order.id == order_id:
                return order
        return None

    def create(self, draft: Union[OrderDraft, dict]) -> OperationResult:
        """
        Create a pending order.

        The referenced table is not checked or touched; use ``place`` to
        also mark the table occupied. Lines naming the same menu item are merged.

        Returns:
            Result carrying the created Order
        """
        try:
            draft = coerce_draft(OrderDraft, draft)
            draft = draft.model_copy(update={"items": merge_lines(draft.items)})

            with self.store.lock:
                orders = self._read()
                order = Order(id=next_id(orders), **draft.model_dump())
                orders.append(order)
                self._write(orders)

        except (RestaurantError, ValidationError) as e:
            return self._failure(e, "creating order")

        logger.info(
            f"Created order {order.id} for table {order.table_id}",
            extra={"order_id": order.id, "table_id": order.table_id, "item_count": len(order.items)}
        )
        return OperationResult.ok(order, f"Order #{order.id} created")

    def place(self, draft: Union[OrderDraft, dict]) -> OperationResult:
        """
        Create a pending order and mark its table occupied.

        Fails if the table does not exist or is not available, or if a line
        names a menu item that is not on the menu. Lines naming the same
        menu item are merged.

        Returns:
            Result carrying the created Order
        """
        try:
            draft = coerce_draft(OrderDraft, draft)
            draft = draft.model_copy(update={"items": merge_lines(draft.items)})
            self._check_menu_items(draft.items)

            with self.store.lock, self.tables.store.lock:
                tables = self.tables.read_tables()
                table = _find_table(tables, draft.table_id)
                if table is None:
                    raise NotFoundError(f"Table {draft.table_id} does not exist")
                if not table.is_available:
                    raise InvalidInputError(
                        f"Table {table.id} is not available (status: {table.status.value})"
                    )

                orders = self._read()
                order = Order(id=next_id(orders), **draft.model_dump())
                orders.append(order)
                self._write(orders)

                table.status = TableStatus.OCCUPIED
                self.tables.write_tables(tables)

        except (RestaurantError, ValidationError) as e:
            return self._failure(e, "placing order")

        logger.info(
            f"Placed order {order.id}, table {order.table_id} occupied",
            extra={"order_id": order.id, "table_id": order.table_id}
        )
        return OperationResult.ok(order, f"Order #{order.id} created for table {order.table_id}")

    def set_status(self, order_id: int, status: Union[OrderStatus, str]) -> OperationResult:
        """
        Change an order's status and stamp ``lastUpdated``.

        A terminal status also sets the order's table to available. A
        missing table is logged and does not block the status change.
        """
        try:
            new_status = parse_order_status(status)

            with self.store.lock, self.tables.store.lock:
                orders = self._read()
                order = next((o for o in orders if o.id == order_id), None)
                if order is None:
                    raise NotFoundError(f"Order {order_id} does not exist")

                order.status = new_status
                order.last_updated = utc_now()

                table = None
                if new_status.is_terminal:
                    tables = self.tables.read_tables()
                    table = _find_table(tables, order.table_id)
                    if table is None:
                        logger.warning(
                            f"Order {order_id} references missing table {order.table_id}",
                            extra={"order_id": order_id, "table_id": order.table_id}
                        )

                self._write(orders)

                if table is not None:
                    table.status = TableStatus.AVAILABLE
                    try:
                        self.tables.write_tables(tables)
                    except PersistenceError as e:
                        raise PersistenceError(
                            f"Order {order_id} status saved as {new_status.value}, "
                            f"but table {table.id} could not be released: {e}"
                        ) from e

        except (RestaurantError, ValidationError) as e:
            return self._failure(e, "updating order status")

        logger.info(
            f"Order {order_id} status set to {new_status.value}",
            extra={"order_id": order_id, "status": new_status.value, "table_released": table is not None}
        )
        return OperationResult.ok(order, f"Order #{order_id} status updated to \"{new_status.value}\"")

    def delete(self, order_id: int) -> OperationResult:
        """
        Delete an order.

        An order that never reached a terminal status still holds its
        table, so the table is set back to available.
        """
        try:
            with self.store.lock, self.tables.store.lock:
                orders = self._read()
                order = next((o for o in orders if o.id == order_id), None)
                if order is None:
                    raise NotFoundError(f"Order {order_id} does not exist")

                table = None
                if not order.status.is_terminal:
                    tables = self.tables.read_tables()
                    table = _find_table(tables, order.table_id)

                orders.remove(order)
                self._write(orders)

                if table is not None:
                    table.status = TableStatus.AVAILABLE
                    self.tables.write_tables(tables)

        except RestaurantError as e:
            return self._failure(e, "deleting order")

        logger.info(f"Deleted order {order_id}", extra={"order_id": order_id})
        return OperationResult.ok(order, f"Order #{order_id} deleted")

    def calculate_total(self, order_id: int) -> Optional[float]:
        """
        Price an order with current menu prices.

        Lines whose menu item no longer exists are skipped.

        Returns:
            The total, or None if the order or the menu cannot be found
        """
        order = self.find_by_id(order_id)
        if order is None or self.menu is None:
            return None

        menu = self.menu.load_menu()
        if menu is None:
            return None

        total = 0.0
        for line in order.items:
            item = menu.find_item(line.menu_item_id)
            if item is None:
                logger.warning(
                    f"Order {order_id} references missing menu item {line.menu_item_id}",
                    extra={"order_id": order_id, "menu_item_id": line.menu_item_id}
                )
                continue
            total += item.price * line.quantity

        return round(total, 2)
