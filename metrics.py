"""
metrics.py
Dashboard numbers derived from the current FleetState.

All functions are pure; the app recomputes them on every rerun.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date

from models import (
    CATEGORIES,
    ECONOMY_MAX,
    MIDRANGE_MAX,
    OVERDUE_AFTER_DAYS,
    FleetState,
    Lessee,
    Payment,
    Vehicle,
)
from utils import add_months, month_start


def month_key(d: date) -> str:
    return d.strftime("%Y-%m")


def month_label(d: date) -> str:
    return d.strftime("%b %y")


def expected_payments_by_month(state: FleetState, now: date) -> dict[str, int]:
    """
    Lease amount owed per month bucket, from each lessee's start month through the current month.
    """
    expected: dict[str, int] = defaultdict(int)
    last = month_start(now)
    for lessee in state.lessees:
        vehicle = state.vehicle(lessee.vehicle_id)
        if vehicle is None:
            continue
        month = month_start(lessee.start_date)
        while month <= last:
            expected[month_key(month)] += vehicle.lease_amount
            month = add_months(month, 1)
    return dict(expected)


def collected_payments_by_month(state: FleetState) -> dict[str, int]:
    collected: dict[str, int] = defaultdict(int)
    for p in state.payments:
        collected[month_key(p.date)] += p.amount
    return dict(collected)


def total_expected(state: FleetState, now: date) -> int:
    return sum(expected_payments_by_month(state, now).values())


def total_collected(state: FleetState) -> int:
    return sum(p.amount for p in state.payments)


def last_payment(state: FleetState, lessee_id: str) -> Payment | None:
    payments = state.payments_for(lessee_id)
    if not payments:
        return None
    return max(payments, key=lambda p: p.date)


@dataclass(frozen=True)
class OverdueLessee:
    lessee: Lessee
    vehicle: Vehicle | None
    last_payment: Payment | None
    days_since_last_payment: int

    @property
    def status(self) -> str:
        return "No payments" if self.last_payment is None else "Payment overdue"


def overdue_lessees(state: FleetState, now: date) -> list[OverdueLessee]:
    """
    Lessees holding a vehicle with no payment at all, or none in the last 30 days.
    Days are counted from the last payment, or from the start date when nothing was ever paid.
    """
    overdue = []
    for lessee in state.lessees:
        if not lessee.vehicle_id:
            continue
        last = last_payment(state, lessee.id)
        if last is None:
            days = (now - lessee.start_date).days
        else:
            days = (now - last.date).days
            if days <= OVERDUE_AFTER_DAYS:
                continue
        overdue.append(
            OverdueLessee(
                lessee=lessee,
                vehicle=state.vehicle(lessee.vehicle_id),
                last_payment=last,
                days_since_last_payment=days,
            )
        )
    return overdue


def monthly_payment_trend(state: FleetState, now: date, months: int = 6) -> list[dict]:
    expected = expected_payments_by_month(state, now)
    collected = collected_payments_by_month(state)
    current = month_start(now)
    trend = []
    for offset in range(months - 1, -1, -1):
        month = add_months(current, -offset)
        key = month_key(month)
        trend.append({
            "name": month_label(month),
            "month": key,
            "expected": expected.get(key, 0),
            "collected": collected.get(key, 0),
        })
    return trend


def vehicle_category(lease_amount: int) -> str:
    if lease_amount < ECONOMY_MAX:
        return "Economy"
    if lease_amount < MIDRANGE_MAX:
        return "Mid-range"
    return "Premium"


def category_distribution(vehicles) -> dict[str, int]:
    counts = {name: 0 for name in CATEGORIES}
    for v in vehicles:
        counts[vehicle_category(v.lease_amount)] += 1
    return counts


def category_summary(vehicles) -> dict[str, dict]:
    """
    Per category: vehicle count, average lease (rounded) and utilization percent.
    Empty categories report zeros.
    """
    grouped: dict[str, list[Vehicle]] = {name: [] for name in CATEGORIES}
    for v in vehicles:
        grouped[vehicle_category(v.lease_amount)].append(v)

    summary = {}
    for name, members in grouped.items():
        count = len(members)
        leased = sum(1 for v in members if v.is_leased)
        summary[name] = {
            "count": count,
            "average_lease": round(sum(v.lease_amount for v in members) / max(1, count)),
            "utilization": round(leased / max(1, count) * 100),
        }
    return summary


def payment_status_distribution(payments) -> dict[str, int]:
    # Illustrative split only: payments carry no on-time/late status to classify by.
    late, missed = 10, 5
    return {
        "Paid On Time": max(0, len(payments) - late - missed),
        "Paid Late": late,
        "Missed": missed,
    }


def recent_payments(state: FleetState, limit: int = 5) -> list[Payment]:
    return list(reversed(state.payments))[:limit]


@dataclass(frozen=True)
class DashboardMetrics:
    total_vehicles: int
    leased_vehicles: int
    available_vehicles: int
    total_lessees: int
    total_expected: int
    total_collected: int
    overdue: list[OverdueLessee] = field(default_factory=list)
    monthly_trend: list[dict] = field(default_factory=list)
    categories: dict[str, int] = field(default_factory=dict)
    payment_statuses: dict[str, int] = field(default_factory=dict)

    @property
    def collection_rate(self) -> float:
        if self.total_expected <= 0:
            return 0.0
        return self.total_collected / self.total_expected

    @property
    def overdue_ratio(self) -> float:
        if self.total_lessees <= 0:
            return 0.0
        return len(self.overdue) / self.total_lessees


def compute_dashboard(state: FleetState, now: date) -> DashboardMetrics:
    return DashboardMetrics(
        total_vehicles=len(state.vehicles),
        leased_vehicles=len(state.leased_vehicles),
        available_vehicles=len(state.available_vehicles),
        total_lessees=len(state.lessees),
        total_expected=total_expected(state, now),
        total_collected=total_collected(state),
        overdue=overdue_lessees(state, now),
        monthly_trend=monthly_payment_trend(state, now),
        categories=category_distribution(state.vehicles),
        payment_statuses=payment_status_distribution(state.payments),
    )
