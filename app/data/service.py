from __future__ import annotations

import logging
import math
import uuid
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional

import pandas as pd

from data import queries
from data.connection import SqlClient
from data.formatting import format_currency, to_major_units
from data.models import (
    CardSummary,
    CustomerField,
    CustomerRow,
    InvoiceForm,
    InvoiceRow,
    LatestInvoice,
    QueryResult,
    Revenue,
)


logger = logging.getLogger(__name__)


def _guard(operation: str, fn: Callable[[], Any]) -> QueryResult:
    try:
        return QueryResult(data=fn())
    except Exception as e:
        logger.exception("Database error (%s): %s", operation, e)
        return QueryResult(error=f"{type(e).__name__}: {e}")


def _records(df: pd.DataFrame) -> list[dict[str, Any]]:
    return df.to_dict(orient="records")


def _scalar(df: pd.DataFrame, column: str) -> Any:
    if df.empty or column not in df.columns:
        return None
    value = df[column].iloc[0]
    return None if pd.isna(value) else value


def _count(value: Any) -> int:
    return int(value) if value is not None and not pd.isna(value) else 0


def _amount(value: Any) -> float:
    return float(value) if value is not None and not pd.isna(value) else 0.0


def empty_card_summary() -> CardSummary:
    return CardSummary(
        number_of_invoices=0,
        number_of_customers=0,
        total_paid_invoices=format_currency(0),
        total_pending_invoices=format_currency(0),
    )


# --- revenue ---

def query_revenue(client: SqlClient) -> QueryResult:
    def run() -> list[Revenue]:
        df = client.query(queries.q_revenue(client.cfg))
        return [Revenue(month=str(r["month"]), revenue=_amount(r["revenue"])) for r in _records(df)]

    return _guard("fetch_revenue", run)


def fetch_revenue(client: SqlClient) -> list[Revenue]:
    return query_revenue(client).unwrap_or([])


# --- latest invoices ---

def query_latest_invoices(client: SqlClient) -> QueryResult:
    def run() -> list[LatestInvoice]:
        df = client.query(queries.q_latest_invoices(client.cfg))
        return [
            LatestInvoice(
                id=str(r["id"]),
                name=r["name"],
                email=r["email"],
                image_url=r["image_url"],
                amount=format_currency(r["amount"]),
            )
            for r in _records(df)
        ]

    return _guard("fetch_latest_invoices", run)


def fetch_latest_invoices(client: SqlClient) -> list[LatestInvoice]:
    return query_latest_invoices(client).unwrap_or([])


# --- KPI cards ---

def query_card_data(client: SqlClient) -> QueryResult:
    """Three independent aggregates fetched concurrently; any failure fails the whole summary."""

    def run() -> CardSummary:
        statements = [
            queries.q_invoice_count(client.cfg),
            queries.q_customer_count(client.cfg),
            queries.q_invoice_status_totals(client.cfg),
        ]
        with ThreadPoolExecutor(max_workers=len(statements)) as pool:
            futures = [pool.submit(client.query, sql) for sql in statements]
            invoice_count, customer_count, totals = [f.result() for f in futures]

        return CardSummary(
            number_of_invoices=_count(_scalar(invoice_count, "count")),
            number_of_customers=_count(_scalar(customer_count, "count")),
            total_paid_invoices=format_currency(_scalar(totals, "paid") or 0),
            total_pending_invoices=format_currency(_scalar(totals, "pending") or 0),
        )

    return _guard("fetch_card_data", run)


def fetch_card_data(client: SqlClient) -> CardSummary:
    return query_card_data(client).unwrap_or(empty_card_summary())


# --- invoice search ---

def query_filtered_invoices(client: SqlClient, query: str, current_page: int) -> QueryResult:
    def run() -> list[InvoiceRow]:
        sql, params = queries.q_filtered_invoices(client.cfg, query, current_page)
        df = client.query(sql, params)
        return [
            InvoiceRow(
                id=str(r["id"]),
                name=r["name"],
                email=r["email"],
                image_url=r["image_url"],
                date=r["date"],
                amount=int(r["amount"]),
                status=r["status"],
            )
            for r in _records(df)
        ]

    return _guard("fetch_filtered_invoices", run)


def fetch_filtered_invoices(client: SqlClient, query: str, current_page: int) -> list[InvoiceRow]:
    return query_filtered_invoices(client, query, current_page).unwrap_or([])


def query_invoices_pages(client: SqlClient, query: str) -> QueryResult:
    def run() -> int:
        sql, params = queries.q_invoices_count(client.cfg, query)
        total = _count(_scalar(client.query(sql, params), "count"))
        return max(1, math.ceil(total / queries.ITEMS_PER_PAGE))

    return _guard("fetch_invoices_pages", run)


def fetch_invoices_pages(client: SqlClient, query: str) -> int:
    return query_invoices_pages(client, query).unwrap_or(1)


# --- single invoice ---

def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


def query_invoice_by_id(client: SqlClient, invoice_id: str) -> QueryResult:
    def run() -> Optional[InvoiceForm]:
        # A malformed id can't match the uuid key; skip the round trip
        if not _is_uuid(invoice_id):
            return None
        sql, params = queries.q_invoice_by_id(client.cfg, invoice_id)
        rows = _records(client.query(sql, params))
        if not rows:
            return None
        r = rows[0]
        return InvoiceForm(
            id=str(r["id"]),
            customer_id=str(r["customer_id"]),
            amount=to_major_units(r["amount"]),
            status=r["status"],
        )

    return _guard("fetch_invoice_by_id", run)


def fetch_invoice_by_id(client: SqlClient, invoice_id: str) -> Optional[InvoiceForm]:
    return query_invoice_by_id(client, invoice_id).unwrap_or(None)


# --- customers ---

def query_customers(client: SqlClient) -> QueryResult:
    def run() -> list[CustomerField]:
        df = client.query(queries.q_customers(client.cfg))
        return [CustomerField(id=str(r["id"]), name=r["name"]) for r in _records(df)]

    return _guard("fetch_customers", run)


def fetch_customers(client: SqlClient) -> list[CustomerField]:
    return query_customers(client).unwrap_or([])


def query_filtered_customers(client: SqlClient, query: str) -> QueryResult:
    def run() -> list[CustomerRow]:
        sql, params = queries.q_filtered_customers(client.cfg, query)
        df = client.query(sql, params)
        return [
            CustomerRow(
                id=str(r["id"]),
                name=r["name"],
                email=r["email"],
                image_url=r["image_url"],
                total_invoices=_count(r["total_invoices"]),
                total_pending=format_currency(r["total_pending"]),
                total_paid=format_currency(r["total_paid"]),
            )
            for r in _records(df)
        ]

    return _guard("fetch_filtered_customers", run)


def fetch_filtered_customers(client: SqlClient, query: str) -> list[CustomerRow]:
    return query_filtered_customers(client, query).unwrap_or([])
