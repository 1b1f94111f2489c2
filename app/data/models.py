from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Literal, Optional


InvoiceStatus = Literal["pending", "paid"]


@dataclass(frozen=True)
class Revenue:
    month: str
    revenue: float


@dataclass(frozen=True)
class LatestInvoice:
    id: str
    name: str
    email: str
    image_url: str
    amount: str  # formatted currency


@dataclass(frozen=True)
class CardSummary:
    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: str
    total_pending_invoices: str


@dataclass(frozen=True)
class InvoiceRow:
    """One row of the invoices search table; amount stays in minor units."""
    id: str
    name: str
    email: str
    image_url: str
    date: date
    amount: int
    status: InvoiceStatus


@dataclass(frozen=True)
class InvoiceForm:
    """Invoice prepared for an edit form; amount in major units."""
    id: str
    customer_id: str
    amount: float
    status: InvoiceStatus


@dataclass(frozen=True)
class CustomerField:
    id: str
    name: str


@dataclass(frozen=True)
class CustomerRow:
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str


@dataclass(frozen=True)
class QueryResult:
    """
    Outcome of one query operation.

    `error` is None on success; otherwise it names the exception and `data`
    is meaningless. Lets callers tell "no rows" apart from "query failed".
    """
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: Any) -> Any:
        return self.data if self.ok else default
