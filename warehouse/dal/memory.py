import logging
from datetime import date
from typing import Iterable, Mapping, NamedTuple, Optional

from warehouse.dal.base import CustomerDao, InventoryDao, OrderDao, ProductDao
from warehouse.schemas import Customer, Order, Product

logger = logging.getLogger(__name__)


def _next_id(ids: Iterable[int]) -> int:
    return max(ids, default=0) + 1


class MemoryProductDao(ProductDao):
    def __init__(self, products: Iterable[Product] = ()):
        self._products: dict[int, Product] = {p.id: p for p in products}

    def get_product(self, product_id: int) -> Optional[Product]:
        return self._products.get(product_id)

    def get_products(self) -> list[Product]:
        return list(self._products.values())

    def add_product(self, name: str, price: int) -> Product:
        product = Product(id=_next_id(self._products), name=name, price=price)
        self._products[product.id] = product
        logger.debug(f"Stored product {product.id} ({product.name}).")
        return product


class MemoryCustomerDao(CustomerDao):
    def __init__(self, customers: Iterable[Customer] = ()):
        self._customers: dict[int, Customer] = {c.id: c for c in customers}

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        return self._customers.get(customer_id)

    def get_customers(self) -> list[Customer]:
        return list(self._customers.values())


class MemoryInventoryDao(InventoryDao):
    def __init__(self, stock: Optional[Mapping[int, int]] = None):
        self._stock: dict[int, int] = dict(stock or {})

    def get_stock(self, product_id: int) -> Optional[int]:
        return self._stock.get(product_id)

    def get_inventory(self) -> dict[int, int]:
        return dict(self._stock)

    def update_stock(self, quantities: Mapping[Product, int]) -> None:
        # Products without a stock entry start from zero.
        for product, quantity in quantities.items():
            self._stock[product.id] = self._stock.get(product.id, 0) - quantity
            logger.debug(f"Stock of product {product.id} is now {self._stock[product.id]}.")


class MemoryOrderDao(OrderDao):
    def __init__(self, orders: Iterable[Order] = ()):
        self._orders: dict[int, Order] = {o.id: o for o in orders}

    def get_order(self, order_id: int) -> Optional[Order]:
        return self._orders.get(order_id)

    def get_orders(self) -> list[Order]:
        return list(self._orders.values())

    def add_order(
        self,
        customer: Customer,
        line_items: Mapping[Product, int],
        order_date: date,
        pending: bool = False,
    ) -> Order:
        order = Order(
            id=_next_id(self._orders),
            customer=customer,
            date=order_date,
            line_items=dict(line_items),
            pending=pending,
        )
        self._orders[order.id] = order
        logger.debug(f"Stored order {order.id} for customer {customer.id}.")
        return order


class WarehouseData(NamedTuple):
    """The four stores a Warehouse is built from."""

    products: ProductDao
    customers: CustomerDao
    inventory: InventoryDao
    orders: OrderDao


# --- Demo Data ---
# What the "memory" data source starts with.
DEMO_PRODUCTS = [
    Product(id=1, name="Bolt M8", price=2),
    Product(id=2, name="Hex nut M8", price=1),
    Product(id=3, name="Washer 8mm", price=1),
    Product(id=4, name="Hammer", price=25),
    Product(id=5, name="Cordless drill", price=120),
]

DEMO_CUSTOMERS = [
    Customer(id=1, name="Acme Construction"),
    Customer(id=2, name="Bob's Repairs"),
    Customer(id=3, name="City Maintenance"),
]

DEMO_STOCK = {1: 500, 2: 800, 3: 800, 4: 30, 5: 8}


def _demo_orders() -> list[Order]:
    products = {p.id: p for p in DEMO_PRODUCTS}
    customers = {c.id: c for c in DEMO_CUSTOMERS}
    rows = [
        # id, customer id, date, pending, {product id: quantity}
        (1, 1, date(2024, 3, 1), False, {1: 100, 2: 100}),
        (2, 2, date(2024, 3, 1), False, {4: 1}),
        (3, 3, date(2024, 3, 2), False, {5: 2, 3: 50}),
        (4, 1, date(2024, 3, 4), True, {4: 3}),
        (5, 2, date(2024, 3, 4), False, {1: 10, 2: 10, 3: 10}),
    ]
    return [
        Order(
            id=order_id,
            customer=customers[customer_id],
            date=order_date,
            line_items={products[pid]: qty for pid, qty in items.items()},
            pending=pending,
        )
        for order_id, customer_id, order_date, pending, items in rows
    ]


def seed_memory_daos() -> WarehouseData:
    """Returns fresh memory-backed stores filled with the demo data."""
    return WarehouseData(
        products=MemoryProductDao(DEMO_PRODUCTS),
        customers=MemoryCustomerDao(DEMO_CUSTOMERS),
        inventory=MemoryInventoryDao(DEMO_STOCK),
        orders=MemoryOrderDao(_demo_orders()),
    )
