"""
End-to-end checks against a real PostgreSQL.

Skipped unless TEST_POSTGRES_URL is set. Each fixture seeds a throwaway
schema and drops it afterwards.
"""

import math
import os
import uuid
from datetime import date

import pandas as pd
import pytest

from conftest import make_config
from data import mock_data, seed, service
from data.connection import close_pool, get_sql_client, open_pool

TEST_POSTGRES_URL = os.getenv("TEST_POSTGRES_URL")

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not TEST_POSTGRES_URL, reason="TEST_POSTGRES_URL not set"),
]


@pytest.fixture
def seeded():
    """Factory: seeded(customers, invoices, revenue) -> SqlClient over a fresh schema."""
    opened = []

    def build(customers, invoices, revenue=None):
        cfg = make_config(postgres_url=TEST_POSTGRES_URL, postgres_schema=f"test_{uuid.uuid4().hex[:10]}", pool_max_size=4)
        pool = open_pool(cfg)
        opened.append((cfg, pool))
        with pool.connection() as conn:
            seed.create_tables(conn, cfg.fq_schema)
            seed.load(conn, cfg.fq_schema, customers, invoices, revenue if revenue is not None else mock_data.revenue_mock())
        return get_sql_client(cfg, pool)

    yield build

    for cfg, pool in opened:
        with pool.connection() as conn:
            conn.execute(f"DROP SCHEMA IF EXISTS {cfg.fq_schema} CASCADE")
        close_pool(pool)


@pytest.fixture
def client(seeded):
    customers = mock_data.customers_mock(10)
    invoices = mock_data.invoices_mock(customers, 100, end=date(2024, 12, 31))
    return seeded(customers, invoices)


def _expected_matches(client, query):
    sql = f"""
    SELECT invoices.id
    FROM {client.cfg.fq_schema}.invoices
    JOIN {client.cfg.fq_schema}.customers ON invoices.customer_id = customers.id
    WHERE customers.name ILIKE %(p)s OR customers.email ILIKE %(p)s OR invoices.amount::text ILIKE %(p)s
       OR invoices.date::text ILIKE %(p)s OR invoices.status ILIKE %(p)s
    """
    return set(client.query(sql, {"p": f"%{query}%"})["id"].astype(str))


@pytest.mark.parametrize("query", ["", "pend", "PAID", "2024-0", "@", "no-such-thing"])
def test_pages_cover_every_match_exactly_once(client, query):
    pages = service.fetch_invoices_pages(client, query)
    expected = _expected_matches(client, query)

    assert pages == max(1, math.ceil(len(expected) / 6))

    rows = []
    for page in range(1, pages + 1):
        rows.extend(service.fetch_filtered_invoices(client, query, page))

    ids = [r.id for r in rows]
    assert len(ids) == len(set(ids))
    assert set(ids) == expected
    dates = [r.date for r in rows]
    assert dates == sorted(dates, reverse=True)


def test_search_is_case_insensitive_substring(client):
    rows = service.fetch_filtered_invoices(client, "pEnD", 1)
    assert rows
    assert any(r.status == "pending" for r in rows)
    assert {r.id for r in rows} <= _expected_matches(client, "pend")


def test_no_match_gives_empty_page_and_one_page(client):
    assert service.fetch_filtered_invoices(client, "zzz-nothing-zzz", 1) == []
    assert service.fetch_invoices_pages(client, "zzz-nothing-zzz") == 1


def test_page_past_the_end_is_empty(client):
    pages = service.fetch_invoices_pages(client, "")
    assert service.fetch_filtered_invoices(client, "", pages + 1) == []


def test_latest_invoices(client):
    latest = service.fetch_latest_invoices(client)

    newest = client.query(
        f"""
        SELECT invoices.id, invoices.date
        FROM {client.cfg.fq_schema}.invoices
        JOIN {client.cfg.fq_schema}.customers ON invoices.customer_id = customers.id
        ORDER BY invoices.date DESC, invoices.id DESC
        LIMIT 5
        """
    )

    assert len(latest) == 5
    assert [i.id for i in latest] == newest["id"].astype(str).tolist()
    dates = newest["date"].tolist()
    assert dates == sorted(dates, reverse=True)
    assert all(i.amount.startswith("₱") for i in latest)


def test_invoice_by_id_divides_amount(seeded):
    customers = mock_data.customers_mock(1)
    invoice_id = str(uuid.uuid4())
    invoices = pd.DataFrame(
        [{"id": invoice_id, "customer_id": customers["id"][0], "amount": 100000, "status": "paid", "date": date(2024, 1, 2)}]
    )
    client = seeded(customers, invoices)

    invoice = service.fetch_invoice_by_id(client, invoice_id)

    assert invoice.amount == 1000
    assert invoice.customer_id == customers["id"][0]
    assert service.fetch_invoice_by_id(client, "not-a-uuid") is None


def test_card_data_on_empty_invoices_table(seeded):
    customers = mock_data.customers_mock(3)
    client = seeded(customers, mock_data.invoices_mock(customers.iloc[0:0], 0))

    cards = service.fetch_card_data(client)

    assert cards.number_of_invoices == 0
    assert cards.number_of_customers == 3
    assert cards.total_paid_invoices == "₱0.00"
    assert cards.total_pending_invoices == "₱0.00"


def test_customer_without_invoices_is_listed(seeded):
    customers = mock_data.customers_mock(3)
    invoices = mock_data.invoices_mock(customers.iloc[0:1], 4)
    client = seeded(customers, invoices)

    rows = service.fetch_filtered_customers(client, "")
    by_id = {r.id: r for r in rows}

    assert len(rows) == 3
    assert by_id[customers["id"][0]].total_invoices == 4
    for customer_id in customers["id"][1:]:
        assert by_id[customer_id].total_invoices == 0
        assert by_id[customer_id].total_pending == "₱0.00"
        assert by_id[customer_id].total_paid == "₱0.00"


def test_revenue_and_customers(client):
    assert len(service.fetch_revenue(client)) == 12
    customers = service.fetch_customers(client)
    assert len(customers) == 10
    assert len({c.id for c in customers}) == 10
