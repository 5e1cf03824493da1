from streamlit.testing.v1 import AppTest

APP = "../app.py"
TIMEOUT = 30


def run_app():
    return AppTest.from_file(APP, default_timeout=TIMEOUT).run()


def goto(at, page):
    at.sidebar.radio[0].set_value(page)
    return at.run()


def test_dashboard_renders():
    at = run_app()

    assert not at.exception
    assert at.header[0].value == "📊 Dashboard"
    assert len(at.session_state["fleet"].vehicles) == 20


def test_every_page_renders():
    at = run_app()
    for page in ["Register Lessee", "Record Payment", "Fleet", "Settings"]:
        at = goto(at, page)
        assert not at.exception, page


def test_register_lessee_through_form():
    at = goto(run_app(), "Register Lessee")
    available_before = len(at.session_state["fleet"].available_vehicles)

    at.text_input[0].input("Jane Doe")
    at.text_input[1].input("jane.doe@example.com")
    at.text_input[2].input("555-222-3333")
    at.selectbox[0].select_index(1)
    at.button[0].click()
    at.run()

    assert not at.exception
    assert at.success[0].value == "Registration successful! Lessee ID: LSE-1008"
    assert len(at.session_state["fleet"].available_vehicles) == available_before - 1


def test_register_lessee_with_empty_form_shows_error():
    at = goto(run_app(), "Register Lessee")
    lessees_before = len(at.session_state["fleet"].lessees)

    at.button[0].click()
    at.run()

    assert at.error[0].value.startswith("Please fill in all fields")
    assert len(at.session_state["fleet"].lessees) == lessees_before


def test_regenerate_with_seed_is_reproducible():
    at = goto(run_app(), "Settings")
    at.text_input[0].input("42")
    at.button[0].click()
    at.run()
    first = at.session_state["fleet"]

    at.button[0].click()
    at.run()

    assert at.success[0].value == "Sample data regenerated."
    assert at.session_state["fleet"].vehicles == first.vehicles


def test_leased_vehicle_is_no_longer_offered_after_registration():
    at = goto(run_app(), "Register Lessee")
    leased_label = at.selectbox[0].options[1]

    at.text_input[0].input("Jane Doe")
    at.text_input[1].input("jane.doe@example.com")
    at.text_input[2].input("555-222-3333")
    at.selectbox[0].select(leased_label)
    at.button[0].click()
    at.run()

    assert not at.exception
    assert at.success[0].value == "Registration successful! Lessee ID: LSE-1008"
    assert leased_label not in at.selectbox[0].options
    assert at.text_input[0].value == ""


def test_failed_registration_keeps_typed_input():
    at = goto(run_app(), "Register Lessee")

    at.text_input[1].input("jane.doe@example.com")
    at.text_input[2].input("555-222-3333")
    at.button[0].click()
    at.run()

    assert at.error[0].value == "Please fill in all fields: name, vehicle_id"
    assert at.text_input[1].value == "jane.doe@example.com"
    assert at.text_input[2].value == "555-222-3333"


def test_record_payment_through_form():
    at = goto(run_app(), "Record Payment")
    payments_before = len(at.session_state["fleet"].payments)

    at.selectbox[0].select_index(1)
    at.button[0].click()
    at.run()

    assert not at.exception
    assert at.success[0].value == f"Payment recorded successfully! Payment ID: PAY-{1000 + payments_before}"
    assert len(at.session_state["fleet"].payments) == payments_before + 1
