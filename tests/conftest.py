from datetime import date
from pathlib import Path

import pytest

from warehouse.core import Warehouse
from warehouse.dal.memory import (
    MemoryCustomerDao,
    MemoryInventoryDao,
    MemoryOrderDao,
    MemoryProductDao,
    seed_memory_daos,
)
from warehouse.schemas import Customer, Order, Product


@pytest.fixture
def product_a():
    return Product(id=1, name="Product A", price=10)


@pytest.fixture
def product_b():
    return Product(id=2, name="Product B", price=3)


@pytest.fixture
def customer():
    return Customer(id=1, name="Alice")


@pytest.fixture
def orders(product_a, product_b, customer):
    """Two fulfilled days plus one pending order, inserted out of date order."""
    return [
        Order(id=3, customer=customer, date=date(2024, 1, 2), line_items={product_b: 4}),
        Order(id=1, customer=customer, date=date(2024, 1, 1), line_items={product_a: 2}),
        Order(id=2, customer=customer, date=date(2024, 1, 1), line_items={product_a: 5}, pending=True),
        Order(id=4, customer=customer, date=date(2024, 1, 1), line_items={product_a: 1, product_b: 1}),
    ]


@pytest.fixture
def warehouse(product_a, product_b, customer, orders):
    return Warehouse(
        MemoryProductDao([product_a, product_b]),
        MemoryCustomerDao([customer]),
        MemoryInventoryDao({1: 100, 2: 50}),
        MemoryOrderDao(orders),
    )


@pytest.fixture
def demo_warehouse():
    data = seed_memory_daos()
    return Warehouse(data.products, data.customers, data.inventory, data.orders)


@pytest.fixture
def write_data_files(tmp_path):
    """Writes the four data files into tmp_path; pass None to skip a file."""

    def _write(
        products="1,Product A,10\n2,Product B,3\n",
        inventory="1,100\n2,50\n",
        customers="1,Alice\n2,Bob\n",
        orders="1,1,2024-01-01,false,1x2\n2,2,2024-01-01,true,1x5,2x1\n3,2,2024-01-02,false,2x4\n",
    ) -> Path:
        files = {
            "products.csv": products,
            "inventory.csv": inventory,
            "customers.csv": customers,
            "orders.csv": orders,
        }
        for name, content in files.items():
            if content is not None:
                (tmp_path / name).write_text(content, encoding="utf-8")
        return tmp_path

    return _write
