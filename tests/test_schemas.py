"""
Tests for the entity and report models.
"""

from datetime import date

import pytest
from pydantic import ValidationError

from warehouse.schemas import Customer, Order, Product, Report


class TestProduct:
    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Product(id=1, name="Broken", price=-1)

    def test_identity_is_the_id(self):
        assert Product(id=7, name="A", price=1) == Product(id=7, name="A (renamed)", price=2)
        assert hash(Product(id=7, name="A", price=1)) == hash(Product(id=7, name="B", price=3))

    def test_is_immutable(self, product_a):
        with pytest.raises(ValidationError):
            product_a.price = 99


class TestOrder:
    def test_total_price(self, product_a, product_b, customer):
        order = Order(
            id=1,
            customer=customer,
            date=date(2024, 1, 1),
            line_items={product_a: 2, product_b: 3},
        )
        assert order.total_price == 10 * 2 + 3 * 3

    def test_defaults_to_fulfilled(self, product_a, customer):
        order = Order(id=1, customer=customer, date=date(2024, 1, 1), line_items={product_a: 1})
        assert order.pending is False

    def test_sorts_by_date_then_id(self, orders):
        assert [o.id for o in sorted(orders)] == [1, 2, 4, 3]

    def test_line_items_are_read_only(self, product_a, product_b, customer):
        line_items = {product_a: 2}
        order = Order(id=1, customer=customer, date=date(2024, 1, 1), line_items=line_items)

        with pytest.raises(TypeError):
            order.line_items[product_a] = 99
        with pytest.raises(TypeError):
            order.line_items[product_b] = 1

        line_items[product_b] = 5
        assert order.line_items == {product_a: 2}
        assert order.total_price == 20

    def test_line_items_keep_product_instances(self, product_a, customer):
        order = Order(id=1, customer=customer, date=date(2024, 1, 1), line_items={product_a: 1})
        assert list(order.line_items) == [product_a]
        assert isinstance(order.customer, Customer)


class TestReport:
    def test_records_align_with_labels(self):
        report = Report()
        report.add_label("Date")
        report.add_label("Total revenue")
        report.add_record([date(2024, 1, 1), 20])

        assert report.labels == ["Date", "Total revenue"]
        assert report.records == [(date(2024, 1, 1), 20)]

    def test_misaligned_record_rejected(self):
        report = Report(labels=["Date", "Total revenue"])
        with pytest.raises(ValueError):
            report.add_record((date(2024, 1, 1),))

    def test_to_dataframe(self):
        report = Report(labels=["Date", "Total revenue"], records=[(date(2024, 1, 1), 20)])
        df = report.to_dataframe()

        assert list(df.columns) == ["Date", "Total revenue"]
        assert df.iloc[0]["Total revenue"] == 20
