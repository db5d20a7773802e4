# app/api/endpoints/payments.py
import logging

from fastapi import APIRouter, Depends
from pymongo import ASCENDING
from pymongo.database import Database

from app.core import security
from app.db import collections, session
from app.schemas import payment as payment_schema
from app.schemas import token as token_schema
from app.services.payments import PaymentGateway, get_gateway, salary_to_minor_units

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/payments")
def list_payments(
    db: Database = Depends(session.get_db),
    hr: dict = Depends(security.get_current_hr),
):
    return session.serialize_docs(db[collections.PAYMENTS].find())

@router.post("/payments")
def record_payment(
    payment: payment_schema.PaymentCreate,
    db: Database = Depends(session.get_db),
    hr: dict = Depends(security.get_current_hr),
):
    result = db[collections.PAYMENTS].insert_one(payment.model_dump())
    logger.info("%s recorded %s payment of %s for %s", hr["email"], payment.month, payment.amount, payment.email)
    return session.insert_result(result)

@router.get("/payment-history/{email}")
def read_payment_history(
    email: str,
    db: Database = Depends(session.get_db),
    employee: dict = Depends(security.get_current_employee),
    identity: token_schema.TokenData = Depends(security.get_token_identity),
):
    security.ensure_same_user(email, identity)
    cursor = db[collections.PAYMENTS].find({"email": email}).sort([("month", ASCENDING)])
    return session.serialize_docs(cursor)

@router.post("/create-payment-intent", response_model=payment_schema.PaymentIntentResponse)
async def create_payment_intent(
    intent_in: payment_schema.PaymentIntentRequest,
    gateway: PaymentGateway = Depends(get_gateway),
):
    amount = salary_to_minor_units(intent_in.salary)
    client_secret = await gateway.create_payment_intent(amount, currency="usd")
    return {"clientSecret": client_secret}
