from datetime import date

import pytest

from models import FleetState, Lessee, Payment, Vehicle


TODAY = date(2024, 6, 15)


def vehicle(vid, lease_amount=500, lessee_id=None, make="Toyota", model="Camry"):
    return Vehicle(
        id=vid,
        make=make,
        model=model,
        year=2021,
        color="Blue",
        lease_amount=lease_amount,
        is_leased=lessee_id is not None,
        lessee_id=lessee_id,
    )


def lessee(lid, vehicle_id=None, start_date=date(2024, 1, 10), name="Test Lessee"):
    return Lessee(
        id=lid,
        name=name,
        email="test.lessee@example.com",
        phone="555-123-4567",
        vehicle_id=vehicle_id,
        start_date=start_date,
    )


def payment(pid, lessee_id, amount, paid_on):
    return Payment(id=pid, lessee_id=lessee_id, amount=amount, date=paid_on)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def small_fleet():
    """
    Two lessees on two vehicles (one paying, one never paid) plus one available vehicle.
    """
    vehicles = (
        vehicle("VEH-1000", 500, "LSE-1000"),
        vehicle("VEH-1001", 950, "LSE-1001", make="Tesla", model="Model 3"),
        vehicle("VEH-1002", 700, make="BMW", model="X3"),
    )
    lessees = (
        lessee("LSE-1000", "VEH-1000", date(2024, 4, 1), name="John Smith"),
        lessee("LSE-1001", "VEH-1001", date(2024, 5, 20), name="Emma Johnson"),
    )
    payments = (
        payment("PAY-1000", "LSE-1000", 500, date(2024, 4, 1)),
        payment("PAY-1001", "LSE-1000", 500, date(2024, 5, 3)),
        payment("PAY-1002", "LSE-1000", 400, date(2024, 6, 2)),
    )
    return FleetState(vehicles=vehicles, lessees=lessees, payments=payments)
