import logging
from pathlib import Path

from . import settings
from .dal.memory import (
    MemoryCustomerDao,
    MemoryInventoryDao,
    MemoryOrderDao,
    MemoryProductDao,
    WarehouseData,
)
from .exceptions import LoadError
from .schemas import Customer, Order, Product
from .utils import dataframe_rows, load_csv, load_rows, parse_bool, parse_date, parse_int

logger = logging.getLogger(__name__)


def _require_fields(row: list[str], count: int, what: str) -> None:
    if len(row) < count:
        raise LoadError(f"expected at least {count} fields per {what}, got {len(row)}.")


def parse_products(file_path: Path) -> dict[int, Product]:
    """Reads products.csv rows: id,name,price."""
    products: dict[int, Product] = {}
    for line_no, row in dataframe_rows(load_csv(file_path)):
        try:
            _require_fields(row, 3, "product")
            product_id = parse_int(row[0], "product ID")
            price = parse_int(row[2], "price")
            if price < 0:
                raise LoadError(f"invalid price '{price}', cannot be negative.")
            if product_id in products:
                raise LoadError(f"duplicate product ID {product_id}.")
        except LoadError as e:
            raise LoadError(f"Failed to read products (line {line_no}): {e}") from e
        products[product_id] = Product(id=product_id, name=row[1], price=price)

    logger.info(f"✅ Parsed {len(products)} products from {file_path.name}.")
    return products


def parse_inventory(file_path: Path, products: dict[int, Product]) -> dict[int, int]:
    """Reads inventory.csv rows: productId,quantity. Every product must already be known."""
    stock: dict[int, int] = {}
    for line_no, row in dataframe_rows(load_csv(file_path)):
        try:
            _require_fields(row, 2, "inventory row")
            product_id = parse_int(row[0], "product ID")
            if product_id not in products:
                raise LoadError(f"unknown product ID {product_id}.")
            quantity = parse_int(row[1], "quantity")
        except LoadError as e:
            raise LoadError(f"Failed to read inventory (line {line_no}): {e}") from e
        stock[product_id] = quantity

    logger.info(f"✅ Parsed stock levels of {len(stock)} products from {file_path.name}.")
    return stock


def parse_customers(file_path: Path) -> dict[int, Customer]:
    """Reads customers.csv rows: id,name."""
    customers: dict[int, Customer] = {}
    for line_no, row in dataframe_rows(load_csv(file_path)):
        try:
            _require_fields(row, 2, "customer")
            customer_id = parse_int(row[0], "customer ID")
            if customer_id in customers:
                raise LoadError(f"duplicate customer ID {customer_id}.")
        except LoadError as e:
            raise LoadError(f"Failed to read customers (line {line_no}): {e}") from e
        customers[customer_id] = Customer(id=customer_id, name=row[1])

    logger.info(f"✅ Parsed {len(customers)} customers from {file_path.name}.")
    return customers


def parse_line_item(token: str, products: dict[int, Product]) -> tuple[Product, int]:
    """Turns a '<product id>x<quantity>' token into its product and quantity."""
    product_id_str, sep, quantity_str = token.partition(settings.LINE_ITEM_SEPARATOR)
    if not sep:
        raise LoadError(
            f"invalid line item '{token}', format must be "
            f"<product ID>{settings.LINE_ITEM_SEPARATOR}<quantity>."
        )
    product_id = parse_int(product_id_str, "product ID")
    product = products.get(product_id)
    if product is None:
        raise LoadError(f"unknown product ID {product_id}.")
    quantity = parse_int(quantity_str, "quantity")
    return product, quantity


def parse_orders(
    file_path: Path, products: dict[int, Product], customers: dict[int, Customer]
) -> list[Order]:
    """
    Reads orders.csv rows: id,customerId,date,pending, followed by any number
    of line item tokens such as '3x12'.
    """
    orders: list[Order] = []
    seen_ids: set[int] = set()
    for line_no, row in load_rows(file_path):
        try:
            _require_fields(row, 4, "order")
            order_id = parse_int(row[0], "order ID")
            if order_id in seen_ids:
                raise LoadError(f"duplicate order ID {order_id}.")
            customer_id = parse_int(row[1], "customer ID")
            customer = customers.get(customer_id)
            if customer is None:
                raise LoadError(f"unknown customer ID {customer_id}.")
            order_date = parse_date(row[2])
            pending = parse_bool(row[3])

            line_items: dict[Product, int] = {}
            for token in row[4:]:
                if not token:
                    continue
                product, quantity = parse_line_item(token, products)
                line_items[product] = quantity
        except LoadError as e:
            raise LoadError(f"Failed to read orders (line {line_no}): {e}") from e

        seen_ids.add(order_id)
        orders.append(
            Order(
                id=order_id,
                customer=customer,
                date=order_date,
                line_items=line_items,
                pending=pending,
            )
        )

    logger.info(f"✅ Parsed {len(orders)} orders from {file_path.name}.")
    return orders


def load_warehouse_data(input_dir: Path) -> WarehouseData:
    """
    Loads products, inventory, customers and orders from input_dir into
    memory-backed stores. Any bad row aborts the whole load with a LoadError.
    """
    logger.info(f"--- Loading warehouse data from {input_dir} ---")

    products = parse_products(input_dir / settings.PRODUCTS_FILENAME)
    stock = parse_inventory(input_dir / settings.INVENTORY_FILENAME, products)
    customers = parse_customers(input_dir / settings.CUSTOMERS_FILENAME)
    orders = parse_orders(input_dir / settings.ORDERS_FILENAME, products, customers)

    return WarehouseData(
        products=MemoryProductDao(products.values()),
        customers=MemoryCustomerDao(customers.values()),
        inventory=MemoryInventoryDao(stock),
        orders=MemoryOrderDao(orders),
    )
