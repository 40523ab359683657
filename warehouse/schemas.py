from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Product(BaseModel):
    """A sellable item. Two products are the same product when their ids match."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: int = Field(..., ge=0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class Customer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class Order(BaseModel):
    """
    A customer's order of one or more products.
    Orders sort by date first and id second, which is the order the daily
    revenue report and every listing rely on.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    customer: Customer
    date: date
    line_items: Mapping[Product, int]
    pending: bool = False

    @field_validator("line_items", mode="after")
    @classmethod
    def freeze_line_items(cls, value: Mapping[Product, int]) -> Mapping[Product, int]:
        return MappingProxyType(dict(value))

    @property
    def total_price(self) -> int:
        return sum(product.price * quantity for product, quantity in self.line_items.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: "Order") -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return (self.date, self.id) < (other.date, other.id)


class ReportType(str, Enum):
    DAILY_REVENUE = "DAILY_REVENUE"


class Report(BaseModel):
    """
    Defines the data contract handed to exporters and plotters:
    ordered column labels plus ordered records, each record aligned to the labels.
    """

    labels: list[str] = Field(default_factory=list)
    records: list[tuple[Any, ...]] = Field(default_factory=list)

    def add_label(self, label: str) -> None:
        self.labels.append(label)

    def add_record(self, record: tuple[Any, ...] | list[Any]) -> None:
        if len(record) != len(self.labels):
            raise ValueError(
                f"Record has {len(record)} values but the report has {len(self.labels)} labels."
            )
        self.records.append(tuple(record))

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self.records, columns=self.labels)
