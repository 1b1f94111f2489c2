from __future__ import annotations

import random
import uuid
from datetime import date, timedelta

import pandas as pd
from faker import Faker


MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
STATUSES = ["pending", "paid"]


def _faker(seed: int) -> Faker:
    fake = Faker()
    fake.seed_instance(seed)
    return fake


def customers_mock(n: int = 12, seed: int = 7) -> pd.DataFrame:
    fake = _faker(seed)
    rng = random.Random(seed)
    rows = []
    for _ in range(n):
        name = fake.unique.name()
        slug = name.lower().replace(" ", "-").replace(".", "")
        rows.append(
            {
                "id": str(uuid.UUID(int=rng.getrandbits(128), version=4)),
                "name": name,
                "email": f"{slug}@{fake.free_email_domain()}",
                "image_url": f"/customers/{slug}.png",
            }
        )
    return pd.DataFrame(rows, columns=["id", "name", "email", "image_url"])


def invoices_mock(customers: pd.DataFrame, n: int = 60, seed: int = 11, end: date | None = None) -> pd.DataFrame:
    """Invoices spread over the past year; amounts in minor units."""
    rng = random.Random(seed)
    end = end or date.today()
    customer_ids = customers["id"].tolist()
    rows = []
    for _ in range(n if customer_ids else 0):
        rows.append(
            {
                "id": str(uuid.UUID(int=rng.getrandbits(128), version=4)),
                "customer_id": rng.choice(customer_ids),
                "amount": rng.randint(5, 5000) * 100 + rng.choice([0, 0, 25, 50, 99]),
                "status": rng.choice(STATUSES),
                "date": end - timedelta(days=rng.randint(0, 364)),
            }
        )
    return pd.DataFrame(rows, columns=["id", "customer_id", "amount", "status", "date"])


def revenue_mock(seed: int = 13) -> pd.DataFrame:
    rng = random.Random(seed)
    rows = []
    level = 2000.0
    for i, m in enumerate(MONTHS):
        # mild seasonality with a Q4 bump
        level = max(500.0, level * (0.9 + rng.random() * 0.25) + (600.0 if i >= 9 else 0.0))
        rows.append({"month": m, "revenue": int(round(level))})
    return pd.DataFrame(rows, columns=["month", "revenue"])
