"""Tests for SQL builders, focused on the shared invoice search predicate."""

from conftest import make_config
from data import queries


def test_filtered_invoices_and_count_share_predicate(cfg):
    page_sql, page_params = queries.q_filtered_invoices(cfg, "pend", 1)
    count_sql, count_params = queries.q_invoices_count(cfg, "pend")

    predicate = queries.invoice_search_predicate()
    assert predicate in page_sql
    assert predicate in count_sql
    assert page_params["pattern"] == count_params["pattern"] == "%pend%"


def test_predicate_searches_every_field_with_or():
    predicate = queries.invoice_search_predicate()
    for column in [
        "customers.name ILIKE",
        "customers.email ILIKE",
        "invoices.amount::text ILIKE",
        "invoices.date::text ILIKE",
        "invoices.status ILIKE",
    ]:
        assert column in predicate
    assert predicate.count(" OR") == 4
    assert " AND " not in predicate


def test_pagination_offsets(cfg):
    _, first = queries.q_filtered_invoices(cfg, "", 1)
    _, third = queries.q_filtered_invoices(cfg, "", 3)

    assert first["limit"] == third["limit"] == queries.ITEMS_PER_PAGE == 6
    assert first["offset"] == 0
    assert third["offset"] == 12


def test_out_of_range_page_is_not_clamped(cfg):
    _, params = queries.q_filtered_invoices(cfg, "", 500)
    assert params["offset"] == 499 * 6


def test_empty_query_matches_everything(cfg):
    _, params = queries.q_invoices_count(cfg, "")
    assert params["pattern"] == "%%"


def test_like_wildcards_are_escaped():
    assert queries.escape_like("50%_off\\") == "50\\%\\_off\\\\"
    assert queries.search_pattern("a_b") == "%a\\_b%"


def test_filtered_invoices_ordering_is_stable(cfg):
    sql, _ = queries.q_filtered_invoices(cfg, "", 1)
    assert "ORDER BY invoices.date DESC, invoices.id DESC" in sql


def test_latest_invoices_limited_to_five(cfg):
    sql = queries.q_latest_invoices(cfg)
    assert "ORDER BY invoices.date DESC" in sql
    assert "LIMIT 5" in sql


def test_filtered_customers_keeps_customers_without_invoices(cfg):
    sql, params = queries.q_filtered_customers(cfg, "Lee")
    assert "LEFT JOIN" in sql
    assert "GROUP BY customers.id" in sql
    assert "ORDER BY customers.name ASC" in sql
    assert params == {"pattern": "%Lee%"}


def test_tables_are_schema_qualified():
    cfg = make_config(postgres_schema="billing")
    assert '"billing".revenue' in queries.q_revenue(cfg)
    assert '"billing".customers' in queries.q_customers(cfg)
    sql, _ = queries.q_invoice_by_id(cfg, "abc")
    assert '"billing".invoices' in sql


def test_invoice_by_id_compares_against_the_uuid_key(cfg):
    # The bare column keeps the primary-key index usable
    sql, params = queries.q_invoice_by_id(cfg, "3958dc9e-712f-4377-85e9-fec4b6a6442a")
    assert "WHERE id = %(id)s::uuid" in sql
    assert "id::text" not in sql
    assert params == {"id": "3958dc9e-712f-4377-85e9-fec4b6a6442a"}
