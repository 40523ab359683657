from typing import Iterable

import pandas as pd

from .schemas import Order, Report

DATE_LABEL = "Date"
TOTAL_REVENUE_LABEL = "Total revenue"


def daily_revenue_report(orders: Iterable[Order]) -> Report:
    """
    Sums the total price of every fulfilled order per order date.
    Pending orders are left out. One record per date, oldest date first.
    """
    report = Report()
    report.add_label(DATE_LABEL)
    report.add_label(TOTAL_REVENUE_LABEL)

    # Sorting first makes the group order (first-seen, sort=False) ascending by date.
    fulfilled = sorted(o for o in orders if not o.pending)
    if not fulfilled:
        return report

    df = pd.DataFrame(
        {
            "date": [o.date for o in fulfilled],
            "revenue": [o.total_price for o in fulfilled],
        }
    )
    totals = df.groupby("date", sort=False)["revenue"].sum()

    for order_date, total_revenue in totals.items():
        report.add_record((order_date, int(total_revenue)))
    return report
