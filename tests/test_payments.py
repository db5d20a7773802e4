import asyncio
from urllib.parse import parse_qs

import httpx
import pytest

from app.core.errors import PaymentGatewayError
from app.db import collections
from app.services.payments import PaymentGateway, get_gateway, salary_to_minor_units
from app.main import app

from conftest import EMPLOYEE_EMAIL, HR_EMAIL, auth_headers


def test_hr_records_and_lists_payments(client, db, accounts):
    response = client.post(
        "/payments",
        json={"email": EMPLOYEE_EMAIL, "month": "2024-03", "year": 2024, "amount": 1000, "transactionId": "pi_1"},
        headers=auth_headers(HR_EMAIL),
    )

    assert response.status_code == 200
    stored = db[collections.PAYMENTS].find_one({"transactionId": "pi_1"})
    assert stored["status"] == "paid"

    listed = client.get("/payments", headers=auth_headers(HR_EMAIL)).json()
    assert [p["transactionId"] for p in listed] == ["pi_1"]


def test_employee_cannot_record_payments(client, accounts):
    response = client.post(
        "/payments", json={"email": EMPLOYEE_EMAIL, "month": "2024-03", "amount": 1}, headers=auth_headers(EMPLOYEE_EMAIL)
    )
    assert response.status_code == 403


def test_payment_history_is_sorted_by_month(client, db, accounts):
    for month in ("2024-03", "2024-01", "2024-02"):
        db[collections.PAYMENTS].insert_one({"email": EMPLOYEE_EMAIL, "month": month, "amount": 1000, "status": "paid"})
    db[collections.PAYMENTS].insert_one({"email": "other@x.com", "month": "2024-01", "amount": 5, "status": "paid"})

    response = client.get(f"/payment-history/{EMPLOYEE_EMAIL}", headers=auth_headers(EMPLOYEE_EMAIL))

    assert response.status_code == 200
    assert [p["month"] for p in response.json()] == ["2024-01", "2024-02", "2024-03"]


def test_payment_history_of_someone_else_is_forbidden(client, db, accounts):
    db[collections.USERS].insert_one({"email": "second@x.com", "role": "Employee"})

    response = client.get(f"/payment-history/{EMPLOYEE_EMAIL}", headers=auth_headers("second@x.com"))

    assert response.status_code == 403


def test_salary_to_minor_units():
    assert salary_to_minor_units(1000) == 100000
    assert salary_to_minor_units(19.99) == 1999


def test_create_payment_intent(client, stripe_requests):
    response = client.post("/create-payment-intent", json={"salary": 1000})

    assert response.status_code == 200
    assert response.json() == {"clientSecret": "pi_123_secret_abc"}
    (request,) = stripe_requests
    assert request.url.path == "/v1/payment_intents"
    assert request.headers["authorization"].startswith("Basic ")
    form = parse_qs(request.content.decode())
    assert form["amount"] == ["100000"]
    assert form["currency"] == ["usd"]
    assert form["payment_method_types[]"] == ["card"]


def test_create_payment_intent_rejects_missing_salary(client, stripe_requests):
    assert client.post("/create-payment-intent", json={}).status_code == 422
    assert stripe_requests == []


def test_gateway_failure_is_bad_gateway(client):
    def handler(request):
        return httpx.Response(402, json={"error": {"message": "card_declined"}})

    failing = PaymentGateway("sk_test_123", transport=httpx.MockTransport(handler))
    app.dependency_overrides[get_gateway] = lambda: failing

    response = client.post("/create-payment-intent", json={"salary": 10})

    assert response.status_code == 502
    assert response.json() == {"message": "payment gateway error"}


def test_gateway_raises_on_missing_client_secret():
    gateway = PaymentGateway("sk_test_123", transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))

    with pytest.raises(PaymentGatewayError):
        asyncio.run(gateway.create_payment_intent(100))


def test_payment_history_for_mixed_case_email(client, db):
    email = "Ann@MotionMax.COM"
    db[collections.USERS].insert_one({"email": email, "role": "Employee"})
    db[collections.PAYMENTS].insert_one({"email": email, "month": "2024-01", "amount": 10, "status": "paid"})

    response = client.get(f"/payment-history/{email}", headers=auth_headers(email))

    assert response.status_code == 200
    assert [p["email"] for p in response.json()] == [email]
