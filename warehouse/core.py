from datetime import date
from typing import Mapping

from .dal.base import CustomerDao, InventoryDao, OrderDao, ProductDao
from .exceptions import InvalidArgumentError, UnsupportedOperationError
from .reports import daily_revenue_report
from .schemas import Customer, Order, Product, Report, ReportType


class Warehouse:
    """
    The single entry point to products, customers, stock and orders.
    Every rule that spans more than one store is enforced here; the stores
    themselves are injected so the backing storage can be swapped freely.
    Errors are raised to the caller, never logged.
    """

    def __init__(
        self,
        product_dao: ProductDao,
        customer_dao: CustomerDao,
        inventory_dao: InventoryDao,
        order_dao: OrderDao,
    ):
        self.product_dao = product_dao
        self.customer_dao = customer_dao
        self.inventory_dao = inventory_dao
        self.order_dao = order_dao

    def get_products(self) -> tuple[Product, ...]:
        return tuple(sorted(self.product_dao.get_products(), key=lambda p: p.id))

    def get_customers(self) -> tuple[Customer, ...]:
        return tuple(sorted(self.customer_dao.get_customers(), key=lambda c: c.id))

    def get_orders(self) -> tuple[Order, ...]:
        """Orders by date, then by id."""
        return tuple(sorted(self.order_dao.get_orders()))

    def get_inventory(self) -> dict[int, int]:
        return dict(sorted(self.inventory_dao.get_inventory().items()))

    def add_product(self, name: str, price: int) -> Product:
        if price < 0:
            raise InvalidArgumentError("The product's price cannot be negative.")
        return self.product_dao.add_product(name, price)

    def add_order(self, customer_id: int, quantities: Mapping[int, int]) -> Order:
        """
        Places a fulfilled order dated today.
        quantities maps product ids to ordered quantities. Everything is
        validated before anything is stored, and stock is only taken once
        the order itself is stored, so a rejected order leaves no trace.
        """
        if not quantities:
            raise InvalidArgumentError("There has to be items in the order, it cannot be empty.")

        customer = self.customer_dao.get_customer(customer_id)
        if customer is None:
            raise InvalidArgumentError(f"Unknown customer ID: {customer_id}")

        line_items: dict[Product, int] = {}
        for product_id, quantity in quantities.items():
            product = self.product_dao.get_product(product_id)
            if product is None:
                raise InvalidArgumentError(f"Unknown product ID: {product_id}")
            if quantity < 1:
                raise InvalidArgumentError("Ordered quantity must be greater than 0.")
            line_items[product] = quantity

        order = self.order_dao.add_order(customer, line_items, date.today(), pending=False)
        self.inventory_dao.update_stock(line_items)
        return order

    def generate_report(self, report_type: ReportType) -> Report:
        if report_type == ReportType.DAILY_REVENUE:
            return daily_revenue_report(self.order_dao.get_orders())
        raise UnsupportedOperationError(f"Report type: {report_type} not yet implemented.")
