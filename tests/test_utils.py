from datetime import date

import pytest

import metrics
import utils


@pytest.mark.parametrize(
    "start, months, expected",
    [
        (date(2024, 1, 31), 1, date(2024, 2, 29)),
        (date(2023, 1, 31), 1, date(2023, 2, 28)),
        (date(2024, 3, 15), -3, date(2023, 12, 15)),
        (date(2024, 12, 1), 1, date(2025, 1, 1)),
        (date(2024, 5, 31), -11, date(2023, 6, 30)),
    ],
)
def test_add_months(start, months, expected):
    assert utils.add_months(start, months) == expected


def test_missing_fields_keeps_argument_order():
    assert utils.missing_fields(a="x", b=" ", c=None, d=0) == ["b", "c"]


def test_vehicles_frame_filters(small_fleet):
    all_rows = utils.vehicles_frame(small_fleet)
    assert list(all_rows["id"]) == ["VEH-1000", "VEH-1001", "VEH-1002"]
    assert list(all_rows["lessee"]) == ["John Smith", "Emma Johnson", "-"]

    available = utils.vehicles_frame(small_fleet, status="Available")
    assert list(available["id"]) == ["VEH-1002"]

    teslas = utils.vehicles_frame(small_fleet, make="Tesla", status="Leased")
    assert list(teslas["make_model"]) == ["Tesla Model 3"]

    assert utils.vehicles_frame(small_fleet, make="Ford").empty


def test_payments_frame(small_fleet):
    df = utils.payments_frame(small_fleet, metrics.recent_payments(small_fleet))

    assert list(df.columns) == ["id", "lessee", "amount", "date", "status"]
    assert df.iloc[0].to_dict() == {
        "id": "PAY-1002",
        "lessee": "John Smith",
        "amount": 400,
        "date": "2024-06-02",
        "status": "completed",
    }


def test_overdue_frame(small_fleet, today):
    df = utils.overdue_frame(metrics.overdue_lessees(small_fleet, today))

    assert list(df["lessee_id"]) == ["LSE-1001"]
    assert df.iloc[0]["vehicle"] == "Tesla Model 3 (VEH-1001)"
    assert df.iloc[0]["status"] == "No payments"


def test_overdue_frame_empty_keeps_columns():
    df = utils.overdue_frame([])

    assert df.empty
    assert "days_overdue" in df.columns


def test_monthly_frame(small_fleet, today):
    df = utils.monthly_frame(metrics.monthly_payment_trend(small_fleet, today), ["expected", "collected"])

    assert list(df.index) == ["2024-01", "2024-02", "2024-03", "2024-04", "2024-05", "2024-06"]
    assert df.loc["2024-06", "collected"] == 400


def test_distribution_frame():
    df = utils.distribution_frame({"Economy": 2, "Premium": 1}, "vehicles")

    assert df.loc["Economy", "vehicles"] == 2
    assert list(df.index) == ["Economy", "Premium"]
