"""
mock_data.py
Synthetic fleet, lessees and payment history for a fresh session.

Everything random goes through the `rng` argument so a seeded random.Random reproduces a dataset.
"""

from __future__ import annotations

import logging
import random
from datetime import date, timedelta

from models import (
    COLORS,
    FIRST_YEAR,
    LAST_YEAR,
    LEASED_COUNT,
    LESSEE_COUNT,
    LESSEE_NAMES,
    LESSEE_PREFIX,
    PAYMENT_PREFIX,
    VEHICLE_CATALOG,
    VEHICLE_COUNT,
    VEHICLE_PREFIX,
    FleetState,
    Lessee,
    Payment,
    Vehicle,
    make_id,
)
from utils import add_months, month_start

logger = logging.getLogger(__name__)

ADJUST_PROBABILITY = 0.2
ADJUST_FACTORS = (0.8, 1.2)
MISS_PROBABILITY = 0.15
DELAY_PROBABILITY = 0.3
MAX_DELAY_DAYS = 14

# Lessees whose recent payments are dropped so the dashboard always has overdue cases
FORCED_OVERDUE_LESSEES = ("LSE-1002", "LSE-1005")
FORCED_OVERDUE_MONTHS = 2


def generate_vehicles(rng: random.Random) -> list[Vehicle]:
    makes = list(VEHICLE_CATALOG)
    vehicles = []
    for idx in range(VEHICLE_COUNT):
        make = rng.choice(makes)
        models, (low, high) = VEHICLE_CATALOG[make]
        model = rng.choice(models)
        lease_amount = rng.randint(low, high)
        is_leased = idx < LEASED_COUNT
        vehicles.append(
            Vehicle(
                id=make_id(VEHICLE_PREFIX, idx),
                make=make,
                model=model,
                year=rng.randint(FIRST_YEAR, LAST_YEAR),
                color=rng.choice(COLORS),
                lease_amount=lease_amount,
                is_leased=is_leased,
                # two consecutive vehicles share a lessee in the seed data
                lessee_id=make_id(LESSEE_PREFIX, idx // 2) if is_leased else None,
            )
        )
    return vehicles


def lessee_email(name: str) -> str:
    return f"{name.lower().replace(' ', '.', 1)}@example.com"


def generate_lessees(rng: random.Random, vehicles: list[Vehicle], today: date) -> list[Lessee]:
    lessees = []
    for idx in range(LESSEE_COUNT):
        lessee_id = make_id(LESSEE_PREFIX, idx)
        name = LESSEE_NAMES[idx]
        start_date = add_months(today, -rng.randint(0, 11))
        vehicle = next((v for v in vehicles if v.lessee_id == lessee_id), None)
        lessees.append(
            Lessee(
                id=lessee_id,
                name=name,
                email=lessee_email(name),
                phone=f"555-{rng.randint(100, 999)}-{rng.randint(1000, 9999)}",
                vehicle_id=vehicle.id if vehicle else None,
                start_date=start_date,
            )
        )
    return lessees


def generate_payments(
    rng: random.Random, vehicles: list[Vehicle], lessees: list[Lessee], today: date
) -> list[Payment]:
    by_id = {v.id: v for v in vehicles}
    cutoff = add_months(today, -FORCED_OVERDUE_MONTHS)
    history: list[tuple[str, int, date]] = []

    for lessee in lessees:
        vehicle = by_id.get(lessee.vehicle_id)
        if vehicle is None:
            continue

        month = 0
        due = lessee.start_date
        while due <= today:
            amount = vehicle.lease_amount
            if rng.random() < ADJUST_PROBABILITY:
                amount = vehicle.lease_amount * rng.choice(ADJUST_FACTORS)

            missed = rng.random() < MISS_PROBABILITY
            if not missed:
                paid_on = due
                if rng.random() < DELAY_PROBABILITY:
                    paid_on = min(due + timedelta(days=rng.randint(0, MAX_DELAY_DAYS)), today)
                if not (lessee.id in FORCED_OVERDUE_LESSEES and paid_on > cutoff):
                    history.append((lessee.id, int(round(amount)), paid_on))

            month += 1
            due = add_months(lessee.start_date, month)

    # ids must stay contiguous: new payments are numbered from len(payments)
    return [
        Payment(id=make_id(PAYMENT_PREFIX, idx), lessee_id=lessee_id, amount=amount, date=paid_on)
        for idx, (lessee_id, amount, paid_on) in enumerate(history)
    ]


def generate_mock_data(rng: random.Random | None = None, today: date | None = None) -> FleetState:
    """
    Build the seed dataset: 20 vehicles (12 leased), 8 lessees and their backdated payment history.
    """
    rng = rng or random.Random()
    today = today or date.today()

    vehicles = generate_vehicles(rng)
    lessees = generate_lessees(rng, vehicles, today)
    payments = generate_payments(rng, vehicles, lessees, today)

    logger.info(
        f"Generated {len(vehicles)} vehicles, {len(lessees)} lessees and {len(payments)} payments."
    )
    return FleetState(vehicles=tuple(vehicles), lessees=tuple(lessees), payments=tuple(payments))


def generate_utilization_trend(rng: random.Random | None = None, today: date | None = None) -> list[dict]:
    """
    Simulated fleet utilization (%) for the trailing 12 months: a rising baseline with +/-5 noise.
    """
    rng = rng or random.Random()
    current = month_start(today or date.today())
    trend = []
    for i in range(12):
        month = add_months(current, i - 11)
        utilization = min(100.0, max(0.0, 40 + i * 5 + rng.uniform(-5, 5)))
        trend.append({
            "name": month.strftime("%b %y"),
            "month": month.strftime("%Y-%m"),
            "utilization": round(utilization),
        })
    return trend
