from datetime import date

from warehouse.reports import daily_revenue_report
from warehouse.schemas import Order


class TestDailyRevenueReport:
    def test_pending_orders_excluded(self, product_a, customer):
        orders = [
            Order(id=1, customer=customer, date=date(2024, 1, 1), line_items={product_a: 2}),
            Order(id=2, customer=customer, date=date(2024, 1, 1), line_items={product_a: 5}, pending=True),
        ]
        report = daily_revenue_report(orders)

        assert report.labels == ["Date", "Total revenue"]
        assert report.records == [(date(2024, 1, 1), 20)]

    def test_one_row_per_date_in_ascending_order(self, orders):
        report = daily_revenue_report(orders)
        assert [record[0] for record in report.records] == [date(2024, 1, 1), date(2024, 1, 2)]

    def test_input_order_does_not_matter(self, orders):
        assert daily_revenue_report(orders).records == daily_revenue_report(reversed(orders)).records

    def test_revenue_is_a_plain_int(self, orders):
        for _, revenue in daily_revenue_report(orders).records:
            assert type(revenue) is int

    def test_no_orders(self):
        report = daily_revenue_report([])
        assert report.labels == ["Date", "Total revenue"]
        assert report.records == []

    def test_only_pending_orders(self, product_a, customer):
        orders = [Order(id=1, customer=customer, date=date(2024, 1, 1), line_items={product_a: 1}, pending=True)]
        assert daily_revenue_report(orders).records == []
