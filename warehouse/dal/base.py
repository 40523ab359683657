from abc import ABC, abstractmethod
from datetime import date
from typing import Mapping, Optional

from warehouse.schemas import Customer, Order, Product


class ProductDao(ABC):
    """
    Storage contract for products.
    Lookups return None for unknown ids; absence is a normal answer, not an error.
    """

    @abstractmethod
    def get_product(self, product_id: int) -> Optional[Product]:
        pass

    @abstractmethod
    def get_products(self) -> list[Product]:
        pass

    @abstractmethod
    def add_product(self, name: str, price: int) -> Product:
        """Creates a product with a store-assigned id, stores it and returns it."""
        pass


class CustomerDao(ABC):
    @abstractmethod
    def get_customer(self, customer_id: int) -> Optional[Customer]:
        pass

    @abstractmethod
    def get_customers(self) -> list[Customer]:
        pass


class InventoryDao(ABC):
    """Storage contract for stock levels, keyed by product id."""

    @abstractmethod
    def get_stock(self, product_id: int) -> Optional[int]:
        pass

    @abstractmethod
    def get_inventory(self) -> dict[int, int]:
        pass

    @abstractmethod
    def update_stock(self, quantities: Mapping[Product, int]) -> None:
        """Takes the ordered quantities out of stock."""
        pass


class OrderDao(ABC):
    @abstractmethod
    def get_order(self, order_id: int) -> Optional[Order]:
        pass

    @abstractmethod
    def get_orders(self) -> list[Order]:
        pass

    @abstractmethod
    def add_order(
        self,
        customer: Customer,
        line_items: Mapping[Product, int],
        order_date: date,
        pending: bool = False,
    ) -> Order:
        """Creates an order with a store-assigned id, stores it and returns it."""
        pass
