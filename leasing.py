"""
leasing.py
The two write paths: register a lessee against an available vehicle, and record a payment.

Both take the current FleetState and return (new_state, created_record). Validation failures
raise a LeasingError subclass and leave the given state untouched.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from datetime import date, datetime

from models import (
    LESSEE_PREFIX,
    PAYMENT_PREFIX,
    FleetState,
    Lessee,
    Payment,
    make_id,
)
from utils import missing_fields, parse_iso

logger = logging.getLogger(__name__)


class LeasingError(ValueError):
    """Base class for rejected registrations and payments."""


class MissingField(LeasingError):
    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__("Please fill in all fields: " + ", ".join(fields))


class UnknownVehicle(LeasingError):
    def __init__(self, vehicle_id: str):
        self.vehicle_id = vehicle_id
        super().__init__(f"Invalid vehicle ID: {vehicle_id}")


class VehicleAlreadyLeased(LeasingError):
    def __init__(self, vehicle_id: str):
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle {vehicle_id} is already leased")


class UnknownLessee(LeasingError):
    def __init__(self, lessee_id: str):
        self.lessee_id = lessee_id
        super().__init__(f"Invalid lessee ID: {lessee_id}")


class InvalidAmount(LeasingError):
    def __init__(self, amount):
        self.amount = amount
        super().__init__(f"Amount must be a positive number (got {amount!r})")


class InvalidDate(LeasingError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Payment date must be a valid ISO date (YYYY-MM-DD), got {value!r}")


def register_lessee(
    state: FleetState,
    name: str,
    email: str,
    phone: str,
    vehicle_id: str,
    today: date | None = None,
) -> tuple[FleetState, Lessee]:
    missing = missing_fields(name=name, email=email, phone=phone, vehicle_id=vehicle_id)
    if missing:
        raise MissingField(missing)

    vehicle_id = str(vehicle_id).strip()
    vehicle = state.vehicle(vehicle_id)
    if vehicle is None:
        raise UnknownVehicle(vehicle_id)
    if vehicle.is_leased:
        raise VehicleAlreadyLeased(vehicle_id)

    lessee = Lessee(
        id=make_id(LESSEE_PREFIX, len(state.lessees)),
        name=name.strip(),
        email=email.strip(),
        phone=phone.strip(),
        vehicle_id=vehicle.id,
        start_date=today or date.today(),
    )
    vehicles = tuple(
        replace(v, is_leased=True, lessee_id=lessee.id) if v.id == vehicle.id else v
        for v in state.vehicles
    )
    new_state = replace(state, vehicles=vehicles, lessees=state.lessees + (lessee,))

    logger.info(f"Registered lessee {lessee.id} ({lessee.name}) on vehicle {vehicle.id}.")
    return new_state, lessee


def _parse_amount(amount) -> int:
    try:
        value = float(amount)
    except (TypeError, ValueError):
        raise InvalidAmount(amount) from None
    if not math.isfinite(value) or round(value) <= 0:
        raise InvalidAmount(amount)
    return int(round(value))


def _parse_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso(str(value).strip())
    except ValueError:
        raise InvalidDate(value) from None


def record_payment(state: FleetState, lessee_id: str, amount, payment_date) -> tuple[FleetState, Payment]:
    """
    Append a completed payment. `amount` may be a number or numeric string (0 counts as missing);
    `payment_date` a date, datetime (its date part is kept) or an ISO string.
    """
    missing = missing_fields(
        lessee_id=lessee_id,
        amount=None if amount == 0 else amount,
        date=payment_date,
    )
    if missing:
        raise MissingField(missing)

    value = _parse_amount(amount)
    paid_on = _parse_date(payment_date)

    lessee_id = str(lessee_id).strip()
    if state.lessee(lessee_id) is None:
        raise UnknownLessee(lessee_id)

    payment = Payment(
        id=make_id(PAYMENT_PREFIX, len(state.payments)),
        lessee_id=lessee_id,
        amount=value,
        date=paid_on,
    )
    new_state = replace(state, payments=state.payments + (payment,))

    logger.info(f"Recorded payment {payment.id}: {payment.amount} from {lessee_id} on {paid_on.isoformat()}.")
    return new_state, payment
