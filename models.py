"""
models.py
Domain dataclasses (vehicles, lessees, payments) and the fixed catalogs used by the generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

# Makes with their models and an inclusive monthly lease band
VEHICLE_CATALOG = {
    "Toyota": (["Corolla", "Camry", "RAV4"], (450, 650)),
    "Honda": (["Civic", "Accord", "CR-V"], (470, 680)),
    "Tesla": (["Model 3", "Model Y", "Model S"], (900, 1500)),
    "Ford": (["Focus", "Fusion", "Escape"], (400, 600)),
    "BMW": (["3 Series", "5 Series", "X3"], (750, 1200)),
    "Mercedes": (["C-Class", "E-Class", "GLC"], (800, 1300)),
    "Audi": (["A4", "A6", "Q5"], (780, 1250)),
}

COLORS = ["Black", "White", "Silver", "Blue", "Red", "Gray", "Green"]

LESSEE_NAMES = [
    "John Smith", "Emma Johnson", "Michael Brown", "Sophia Davis", "William Miller",
    "Olivia Wilson", "James Jones", "Ava Taylor", "Robert Anderson", "Isabella Thomas",
]

VEHICLE_COUNT = 20
LEASED_COUNT = 12
LESSEE_COUNT = 8
FIRST_YEAR, LAST_YEAR = 2019, 2023

# Ids are "<prefix>-<1000 + position in collection>"
ID_BASE = 1000
VEHICLE_PREFIX = "VEH"
LESSEE_PREFIX = "LSE"
PAYMENT_PREFIX = "PAY"

# Lease amount thresholds: below ECONOMY_MAX is Economy, below MIDRANGE_MAX is Mid-range
ECONOMY_MAX = 600
MIDRANGE_MAX = 900
CATEGORIES = ["Economy", "Mid-range", "Premium"]

OVERDUE_AFTER_DAYS = 30
PAYMENT_COMPLETED = "completed"


def make_id(prefix: str, position: int) -> str:
    return f"{prefix}-{ID_BASE + position}"


@dataclass(frozen=True)
class Vehicle:
    id: str
    make: str
    model: str
    year: int
    color: str
    lease_amount: int
    is_leased: bool
    lessee_id: str | None  # set iff is_leased

    @property
    def label(self) -> str:
        return f"{self.make} {self.model} ({self.id})"


@dataclass(frozen=True)
class Lessee:
    id: str
    name: str
    email: str
    phone: str
    vehicle_id: str | None
    start_date: date


@dataclass(frozen=True)
class Payment:
    id: str
    lessee_id: str
    amount: int
    date: date
    status: str = PAYMENT_COMPLETED


@dataclass(frozen=True)
class FleetState:
    """
    The whole session dataset. Never mutated: the leasing operations return a new instance.
    """
    vehicles: tuple[Vehicle, ...] = ()
    lessees: tuple[Lessee, ...] = ()
    payments: tuple[Payment, ...] = ()

    def vehicle(self, vehicle_id: str | None) -> Vehicle | None:
        return next((v for v in self.vehicles if v.id == vehicle_id), None)

    def lessee(self, lessee_id: str | None) -> Lessee | None:
        return next((lessee for lessee in self.lessees if lessee.id == lessee_id), None)

    def payments_for(self, lessee_id: str) -> list[Payment]:
        return [p for p in self.payments if p.lessee_id == lessee_id]

    @property
    def leased_vehicles(self) -> list[Vehicle]:
        return [v for v in self.vehicles if v.is_leased]

    @property
    def available_vehicles(self) -> list[Vehicle]:
        return [v for v in self.vehicles if not v.is_leased]
