from __future__ import annotations

from typing import Any

from config import AppConfig


ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5


def q_revenue(cfg: AppConfig) -> str:
    return f"""
    SELECT month, revenue
    FROM {cfg.fq_schema}.revenue
    ORDER BY month ASC
    """


def q_latest_invoices(cfg: AppConfig) -> str:
    return f"""
    SELECT
      invoices.amount,
      customers.name,
      customers.image_url,
      customers.email,
      invoices.id
    FROM {cfg.fq_schema}.invoices
    JOIN {cfg.fq_schema}.customers ON invoices.customer_id = customers.id
    ORDER BY invoices.date DESC, invoices.id DESC
    LIMIT {LATEST_INVOICES_LIMIT}
    """


def q_invoice_count(cfg: AppConfig) -> str:
    return f"SELECT COUNT(*) AS count FROM {cfg.fq_schema}.invoices"


def q_customer_count(cfg: AppConfig) -> str:
    return f"SELECT COUNT(*) AS count FROM {cfg.fq_schema}.customers"


def q_invoice_status_totals(cfg: AppConfig) -> str:
    # SUM over zero rows is NULL; the service coalesces
    return f"""
    SELECT
      SUM(CASE WHEN status = 'paid' THEN amount ELSE 0 END) AS paid,
      SUM(CASE WHEN status = 'pending' THEN amount ELSE 0 END) AS pending
    FROM {cfg.fq_schema}.invoices
    """


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so user input is matched literally."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def search_pattern(query: str) -> str:
    return f"%{escape_like(query or '')}%"


def invoice_search_predicate() -> str:
    """
    WHERE predicate for invoice search (any field may match).

    Both the filtered page query and the page count use this, so counts and
    contents always agree.
    """
    return """
      customers.name ILIKE %(pattern)s OR
      customers.email ILIKE %(pattern)s OR
      invoices.amount::text ILIKE %(pattern)s OR
      invoices.date::text ILIKE %(pattern)s OR
      invoices.status ILIKE %(pattern)s
    """


def q_filtered_invoices(cfg: AppConfig, query: str, current_page: int) -> tuple[str, dict[str, Any]]:
    """One page of invoices matching `query`; out-of-range pages return no rows."""
    offset = (current_page - 1) * ITEMS_PER_PAGE
    sql = f"""
    SELECT
      invoices.id,
      invoices.amount,
      invoices.date,
      invoices.status,
      customers.name,
      customers.email,
      customers.image_url
    FROM {cfg.fq_schema}.invoices
    JOIN {cfg.fq_schema}.customers ON invoices.customer_id = customers.id
    WHERE ({invoice_search_predicate()})
    ORDER BY invoices.date DESC, invoices.id DESC
    LIMIT %(limit)s OFFSET %(offset)s
    """
    return sql, {"pattern": search_pattern(query), "limit": ITEMS_PER_PAGE, "offset": offset}


def q_invoices_count(cfg: AppConfig, query: str) -> tuple[str, dict[str, Any]]:
    sql = f"""
    SELECT COUNT(*) AS count
    FROM {cfg.fq_schema}.invoices
    JOIN {cfg.fq_schema}.customers ON invoices.customer_id = customers.id
    WHERE ({invoice_search_predicate()})
    """
    return sql, {"pattern": search_pattern(query)}


def q_invoice_by_id(cfg: AppConfig, invoice_id: str) -> tuple[str, dict[str, Any]]:
    sql = f"""
    SELECT id, customer_id, amount, status
    FROM {cfg.fq_schema}.invoices
    WHERE id = %(id)s::uuid
    """
    return sql, {"id": invoice_id}


def q_customers(cfg: AppConfig) -> str:
    return f"""
    SELECT id, name
    FROM {cfg.fq_schema}.customers
    ORDER BY name ASC
    """


def q_filtered_customers(cfg: AppConfig, query: str) -> tuple[str, dict[str, Any]]:
    """Customers matching name/email, with invoice totals (LEFT JOIN keeps customers without invoices)."""
    sql = f"""
    SELECT
      customers.id,
      customers.name,
      customers.email,
      customers.image_url,
      COUNT(invoices.id) AS total_invoices,
      SUM(CASE WHEN invoices.status = 'pending' THEN invoices.amount ELSE 0 END) AS total_pending,
      SUM(CASE WHEN invoices.status = 'paid' THEN invoices.amount ELSE 0 END) AS total_paid
    FROM {cfg.fq_schema}.customers
    LEFT JOIN {cfg.fq_schema}.invoices ON customers.id = invoices.customer_id
    WHERE
      customers.name ILIKE %(pattern)s OR
      customers.email ILIKE %(pattern)s
    GROUP BY customers.id, customers.name, customers.email, customers.image_url
    ORDER BY customers.name ASC
    """
    return sql, {"pattern": search_pattern(query)}
