"""
app.py
Streamlit EasyLease dashboard (vehicle leasing demo, in-memory data only).
Run: streamlit run app.py
"""

from __future__ import annotations

import logging
import random
from datetime import date

import streamlit as st

import leasing
import metrics
import utils
from mock_data import generate_mock_data, generate_utilization_trend

st.set_page_config(page_title="EasyLease", layout="wide")

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


def init_once(seed: int | None = None, force: bool = False):
    # Fresh synthetic dataset per session (or on demand from Settings)
    if "fleet" in st.session_state and not force:
        return
    rng = random.Random(seed)
    st.session_state.fleet = generate_mock_data(rng)
    st.session_state.utilization = generate_utilization_trend(rng)
    st.session_state.seed = seed


def dashboard_page():
    st.header("📊 Dashboard")

    state = st.session_state.fleet
    m = metrics.compute_dashboard(state, date.today())

    c1, c2, c3 = st.columns(3)
    with c1:
        st.subheader("Vehicle Status")
        st.metric("Available", m.available_vehicles)
        st.metric("Leased", m.leased_vehicles)
    with c2:
        st.subheader("Payments")
        st.metric("Collected", f"${m.total_collected:,}")
        st.metric("Expected", f"${m.total_expected:,}")
        st.progress(min(1.0, m.collection_rate), text=f"{m.collection_rate:.0%} collected")
    with c3:
        st.subheader("Overdue Payments")
        st.metric("Lessees with pending/overdue payments", len(m.overdue))
        st.progress(min(1.0, m.overdue_ratio), text=f"{m.overdue_ratio:.0%} of lessees")

    st.divider()

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Monthly Revenue")
        st.bar_chart(utils.monthly_frame(m.monthly_trend, ["expected", "collected"]), stack=False)
        st.subheader("Vehicle Category Distribution")
        st.bar_chart(utils.distribution_frame(m.categories, "vehicles"))
    with col2:
        st.subheader("Fleet Utilization Trend")
        st.line_chart(utils.monthly_frame(st.session_state.utilization, ["utilization"]))
        st.subheader("Payment Status Distribution")
        st.bar_chart(utils.distribution_frame(m.payment_statuses, "payments"))
        st.caption("Illustrative split; payments are not classified by timeliness.")

    st.divider()

    st.subheader("Overdue Payments")
    if m.overdue:
        st.dataframe(utils.overdue_frame(m.overdue), use_container_width=True, hide_index=True)
    else:
        st.caption("No overdue payments. All lessees are up to date!")


REGISTRATION_KEYS = ("reg_name", "reg_email", "reg_phone", "reg_vehicle")


def flash(message: str):
    # Shown once on the next run (after st.rerun)
    st.session_state.flash = message


def show_flash():
    message = st.session_state.pop("flash", None)
    if message:
        st.success(message)


def registration_page():
    st.header("📝 Register New Lessee")
    show_flash()

    state = st.session_state.fleet
    available = state.available_vehicles
    if not available:
        st.info("No vehicles available for lease.")
        return

    with st.form("registration"):
        name = st.text_input("Full Name", key="reg_name")
        email = st.text_input("Email Address", key="reg_email")
        phone = st.text_input("Phone Number", key="reg_phone")
        options = {f"{v.make} {v.model} ({v.year}) - ${v.lease_amount}/month": v.id for v in available}
        choice = st.selectbox("Vehicle", ["(select a vehicle)"] + list(options.keys()), key="reg_vehicle")
        submitted = st.form_submit_button("Register Lessee", type="primary")

    if submitted:
        try:
            st.session_state.fleet, lessee = leasing.register_lessee(
                state, name, email, phone, options.get(choice, "")
            )
        except leasing.LeasingError as exc:
            st.error(str(exc))
            return
        # Reset the form only after a successful registration
        for key in REGISTRATION_KEYS:
            st.session_state.pop(key, None)
        flash(f"Registration successful! Lessee ID: {lessee.id}")
        st.rerun()


def payment_page():
    st.header("💳 Process Lease Payment")
    show_flash()

    state = st.session_state.fleet
    if not state.lessees:
        st.info("No lessees yet. Register a lessee first.")
        return

    with st.form("payment"):
        options = {f"{lessee.name} ({lessee.id})": lessee.id for lessee in state.lessees}
        choice = st.selectbox("Lessee", ["(select a lessee)"] + list(options.keys()))
        amount = st.number_input("Payment Amount ($)", min_value=0, value=500, step=50)
        pay_date = st.date_input("Payment Date", value=date.today())
        submitted = st.form_submit_button("Record Payment", type="primary")

    if submitted:
        try:
            st.session_state.fleet, payment = leasing.record_payment(
                state, options.get(choice, ""), amount, pay_date
            )
        except leasing.LeasingError as exc:
            st.error(str(exc))
        else:
            flash(f"Payment recorded successfully! Payment ID: {payment.id}")
            st.rerun()

    if state.payments:
        st.divider()
        st.subheader("Recent Payments")
        recent = metrics.recent_payments(state)
        st.dataframe(utils.payments_frame(state, recent), use_container_width=True, hide_index=True)


def fleet_page():
    st.header("🚗 Vehicle Fleet Management")

    state = st.session_state.fleet

    c1, c2, c3 = st.columns(3)
    c1.metric("Total", len(state.vehicles))
    c2.metric("Available", len(state.available_vehicles))
    c3.metric("Leased", len(state.leased_vehicles))

    with st.sidebar:
        st.subheader("Filters")
        makes = sorted({v.make for v in state.vehicles})
        make = st.selectbox("Make", ["All"] + makes)
        status = st.selectbox("Status", ["All", "Leased", "Available"])

    st.dataframe(
        utils.vehicles_frame(state, make=make, status=status),
        use_container_width=True,
        hide_index=True,
    )

    st.divider()

    summary = metrics.category_summary(state.vehicles)
    cols = st.columns(len(summary))
    for col, (name, s) in zip(cols, summary.items()):
        with col:
            st.subheader(f"{name} Vehicles")
            st.metric("Vehicles", s["count"])
            st.caption(f"Average Lease: ${s['average_lease']}/month")
            st.caption(f"Utilization: {s['utilization']}%")


def settings_page():
    st.header("⚙️ Settings")

    st.subheader("Sample data")
    st.caption("Replace the session data with a freshly generated dataset. Registrations and payments are lost.")
    seed_text = st.text_input("Seed (optional, integer)", value="")
    if st.button("Regenerate sample data"):
        seed = None
        if seed_text.strip():
            try:
                seed = int(seed_text.strip())
            except ValueError:
                st.error("Seed must be an integer.")
                return
        init_once(seed=seed, force=True)
        logger.info(f"Sample data regenerated (seed={seed}).")
        st.success("Sample data regenerated.")


def main_app():
    st.sidebar.title("🚙 EasyLease")
    st.sidebar.caption("Vehicle leasing dashboard (demo data)")

    pages = ["Dashboard", "Register Lessee", "Record Payment", "Fleet", "Settings"]
    if "page" not in st.session_state:
        st.session_state.page = "Dashboard"
    st.session_state.page = st.sidebar.radio("Navigate", pages, index=pages.index(st.session_state.page))

    if st.session_state.page == "Dashboard":
        dashboard_page()
    elif st.session_state.page == "Register Lessee":
        registration_page()
    elif st.session_state.page == "Record Payment":
        payment_page()
    elif st.session_state.page == "Fleet":
        fleet_page()
    elif st.session_state.page == "Settings":
        settings_page()


# --------- App entry ---------

def run():
    init_once()
    main_app()


if __name__ == "__main__":
    run()
