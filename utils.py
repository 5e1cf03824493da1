"""
utils.py
Dates, input checks, and DataFrame builders for the views.
"""

from __future__ import annotations

from datetime import date, timedelta
import pandas as pd

from models import FleetState, Payment


def parse_iso(d: str) -> date:
    return date.fromisoformat(d)


def add_months(start: date, months: int) -> date:
    """
    Add (or subtract) months while keeping day in valid range (e.g., Jan 31 + 1 month => Feb 28/29).
    """
    y = start.year + (start.month - 1 + months) // 12
    m = (start.month - 1 + months) % 12 + 1
    # last day of target month
    if m == 12:
        next_month = date(y + 1, 1, 1)
    else:
        next_month = date(y, m + 1, 1)
    last_day = next_month - timedelta(days=1)
    day = min(start.day, last_day.day)
    return date(y, m, day)


def month_start(d: date) -> date:
    return d.replace(day=1)


def is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_fields(**fields) -> list[str]:
    """
    Names of the given fields that are None or blank, in argument order.
    """
    return [name for name, value in fields.items() if is_blank(value)]


# ---------- DataFrame builders ----------

def vehicles_frame(state: FleetState, make: str = "All", status: str = "All") -> pd.DataFrame:
    rows = []
    for v in state.vehicles:
        if make != "All" and v.make != make:
            continue
        if status == "Leased" and not v.is_leased:
            continue
        if status == "Available" and v.is_leased:
            continue
        lessee = state.lessee(v.lessee_id)
        rows.append({
            "id": v.id,
            "make_model": f"{v.make} {v.model}",
            "year": v.year,
            "color": v.color,
            "status": "Leased" if v.is_leased else "Available",
            "lessee": lessee.name if lessee else "-",
            "lease_amount": v.lease_amount,
        })
    columns = ["id", "make_model", "year", "color", "status", "lessee", "lease_amount"]
    return pd.DataFrame(rows, columns=columns)


def payments_frame(state: FleetState, payments: list[Payment]) -> pd.DataFrame:
    rows = []
    for p in payments:
        lessee = state.lessee(p.lessee_id)
        rows.append({
            "id": p.id,
            "lessee": lessee.name if lessee else "Unknown",
            "amount": p.amount,
            "date": p.date.isoformat(),
            "status": p.status,
        })
    return pd.DataFrame(rows, columns=["id", "lessee", "amount", "date", "status"])


def overdue_frame(overdue) -> pd.DataFrame:
    rows = [
        {
            "lessee_id": o.lessee.id,
            "name": o.lessee.name,
            "email": o.lessee.email,
            "phone": o.lessee.phone,
            "vehicle": o.vehicle.label if o.vehicle else "N/A",
            "status": o.status,
            "days_overdue": o.days_since_last_payment,
        }
        for o in overdue
    ]
    columns = ["lessee_id", "name", "email", "phone", "vehicle", "status", "days_overdue"]
    return pd.DataFrame(rows, columns=columns)


def monthly_frame(rows: list[dict], columns: list[str]) -> pd.DataFrame:
    """
    Chart-ready frame indexed by "YYYY-MM" month key (sorts chronologically as text).
    """
    df = pd.DataFrame(rows, columns=["month"] + columns)
    return df.set_index("month")


def distribution_frame(distribution: dict[str, int], column: str = "count") -> pd.DataFrame:
    df = pd.DataFrame({"name": list(distribution.keys()), column: list(distribution.values())})
    return df.set_index("name")
